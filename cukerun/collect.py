"""Gathering of runnable scenarios from parsed feature files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from cukerun.gherkin import Background, DataTable, GherkinDocument, Scenario
from cukerun.outline import expand_scenario_outline

__all__ = ["FeatureSource", "ScenarioExecution", "collect_scenarios", "data_table_rows"]


@dataclass
class FeatureSource:
    """A parsed document together with the file it came from."""

    document: GherkinDocument
    file: str


@dataclass
class ScenarioExecution:
    """A concrete scenario with the backgrounds that run before it."""

    scenario: Scenario
    feature_file: str = ""
    feature_name: str = ""
    rule_name: str = ""
    feature_background: Background | None = None
    rule_background: Background | None = None


def collect_scenarios(sources: Iterable[FeatureSource]) -> list[ScenarioExecution]:
    """Return every scenario of *sources*, outlines expanded, in document order.

    A background applies to the scenarios that follow it in the same feature
    or rule.
    """
    scenarios: list[ScenarioExecution] = []
    for source in sources:
        feature = source.document.feature
        if feature is None:
            continue
        feature_background: Background | None = None
        for child in feature.children:
            if child.background is not None:
                feature_background = child.background
            elif child.scenario is not None:
                scenarios.extend(
                    ScenarioExecution(
                        scenario=expanded,
                        feature_file=source.file,
                        feature_name=feature.name,
                        feature_background=feature_background,
                    )
                    for expanded in expand_scenario_outline(child.scenario)
                )
            elif child.rule is not None:
                rule_background: Background | None = None
                for rule_child in child.rule.children:
                    if rule_child.background is not None:
                        rule_background = rule_child.background
                    elif rule_child.scenario is not None:
                        scenarios.extend(
                            ScenarioExecution(
                                scenario=expanded,
                                feature_file=source.file,
                                feature_name=feature.name,
                                rule_name=child.rule.name,
                                feature_background=feature_background,
                                rule_background=rule_background,
                            )
                            for expanded in expand_scenario_outline(rule_child.scenario)
                        )
    return scenarios


def data_table_rows(table: DataTable | None) -> list[list[str]] | None:
    """Return the cell values of *table* for reporting, or ``None`` without one."""
    if table is None:
        return None
    return table.values()