"""Data model for parsed Gherkin documents."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Tag:
    """A tag such as ``@smoke``; the name keeps its ``@`` prefix."""

    name: str
    id: str = ""


@dataclass
class TableCell:
    """A single cell of a data table or examples table."""

    value: str


@dataclass
class TableRow:
    """A row of table cells."""

    cells: list[TableCell] = field(default_factory=list)
    id: str = ""


@dataclass
class DataTable:
    """A data table attached to a step."""

    rows: list[TableRow] = field(default_factory=list)

    def values(self) -> list[list[str]]:
        """Return the cell values row by row."""
        return [[cell.value for cell in row.cells] for row in self.rows]


@dataclass
class Step:
    """A Given/When/Then step."""

    keyword: str
    text: str
    id: str = ""
    keyword_type: str = ""
    doc_string: str | None = None
    data_table: DataTable | None = None


@dataclass
class Examples:
    """An Examples block of a Scenario Outline."""

    name: str = ""
    keyword: str = "Examples"
    tags: list[Tag] = field(default_factory=list)
    table_header: TableRow | None = None
    table_body: list[TableRow] = field(default_factory=list)
    description: str = ""
    id: str = ""


@dataclass
class Scenario:
    """A scenario, or a scenario outline when it carries examples."""

    name: str
    keyword: str = "Scenario"
    tags: list[Tag] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    examples: list[Examples] = field(default_factory=list)
    description: str = ""
    id: str = ""


@dataclass
class Background:
    """Steps run before every scenario of a feature or rule."""

    name: str = ""
    keyword: str = "Background"
    steps: list[Step] = field(default_factory=list)
    description: str = ""
    id: str = ""


@dataclass
class RuleChild:
    """A child of a rule: either a background or a scenario."""

    background: Background | None = None
    scenario: Scenario | None = None


@dataclass
class Rule:
    """A rule grouping scenarios inside a feature."""

    name: str = ""
    keyword: str = "Rule"
    tags: list[Tag] = field(default_factory=list)
    children: list[RuleChild] = field(default_factory=list)
    description: str = ""
    id: str = ""


@dataclass
class FeatureChild:
    """A child of a feature: a background, a scenario or a rule."""

    background: Background | None = None
    scenario: Scenario | None = None
    rule: Rule | None = None


@dataclass
class Feature:
    """A feature with its tags and children."""

    name: str = ""
    keyword: str = "Feature"
    tags: list[Tag] = field(default_factory=list)
    children: list[FeatureChild] = field(default_factory=list)
    language: str = "en"
    description: str = ""


@dataclass
class GherkinDocument:
    """A parsed feature file."""

    feature: Feature | None = None
    uri: str = ""
    comments: list[str] = field(default_factory=list)