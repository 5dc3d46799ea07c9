"""Selection of scenarios from Gherkin documents by tag expression."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import replace

from cukerun.gherkin import FeatureChild, GherkinDocument, Rule, RuleChild, Scenario, Tag
from cukerun.outline import expand_scenario_outline
from cukerun.tag_expressions import TagExpression

__all__ = [
    "extract_tag_names",
    "merge_tags",
    "filter_document_by_tags",
    "filter_rule_by_tags",
    "has_scenarios",
    "has_rule_scenarios",
]


def extract_tag_names(tags: Iterable[Tag]) -> list[str]:
    """Return the names of *tags*, each keeping its ``@`` prefix."""
    return [tag.name for tag in tags]


def merge_tags(parent: Sequence[str], child: Sequence[str]) -> list[str]:
    """Return the parent tags followed by the child tags."""
    return [*parent, *child]


def _matching_expansions(
    scenario: Scenario, inherited: Sequence[str], expression: TagExpression
) -> Iterator[Scenario]:
    # Outlines are expanded first so that Examples-level tags take part.
    for expanded in expand_scenario_outline(scenario):
        if expression.evaluate(merge_tags(inherited, extract_tag_names(expanded.tags))):
            yield expanded


def filter_rule_by_tags(
    rule: Rule, feature_tags: Sequence[str], expression: TagExpression
) -> Rule:
    """Return a copy of *rule* holding its backgrounds and matching scenarios."""
    rule_tags = merge_tags(feature_tags, extract_tag_names(rule.tags))
    children: list[RuleChild] = []
    for child in rule.children:
        if child.background is not None:
            children.append(child)
        elif child.scenario is not None:
            children.extend(
                RuleChild(scenario=expanded)
                for expanded in _matching_expansions(child.scenario, rule_tags, expression)
            )
    return replace(rule, children=children)


def filter_document_by_tags(
    document: GherkinDocument, expression: TagExpression
) -> GherkinDocument:
    """Return a copy of *document* keeping only scenarios that match *expression*.

    Tags are inherited from feature to rule to scenario. Backgrounds are
    always kept; rules left without scenarios are dropped.
    """
    feature = document.feature
    if feature is None:
        return document

    feature_tags = extract_tag_names(feature.tags)
    children: list[FeatureChild] = []
    for child in feature.children:
        if child.background is not None:
            children.append(child)
        elif child.scenario is not None:
            children.extend(
                FeatureChild(scenario=expanded)
                for expanded in _matching_expansions(child.scenario, feature_tags, expression)
            )
        elif child.rule is not None:
            filtered = filter_rule_by_tags(child.rule, feature_tags, expression)
            if has_rule_scenarios(filtered):
                children.append(FeatureChild(rule=filtered))

    return replace(document, feature=replace(feature, children=children))


def has_rule_scenarios(rule: Rule) -> bool:
    """Return whether *rule* holds at least one scenario."""
    return any(child.scenario is not None for child in rule.children)


def has_scenarios(document: GherkinDocument) -> bool:
    """Return whether *document* holds a scenario, directly or inside a rule."""
    if document.feature is None:
        return False
    return any(
        child.scenario is not None
        or (child.rule is not None and has_rule_scenarios(child.rule))
        for child in document.feature.children
    )