"""Expansion of Scenario Outlines into concrete scenarios."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace

from cukerun.gherkin import DataTable, Scenario, Step, TableRow

__all__ = ["substitute_text", "substitute_data_table", "expand_scenario_outline"]


def substitute_text(text: str, replacements: Mapping[str, str]) -> str:
    """Replace every ``<placeholder>`` key of *replacements* in *text*."""
    for placeholder, value in replacements.items():
        text = text.replace(placeholder, value)
    return text


def substitute_data_table(table: DataTable, replacements: Mapping[str, str]) -> DataTable:
    """Return a copy of *table* with placeholders substituted in every cell."""
    return DataTable(
        rows=[
            TableRow(
                cells=[
                    replace(cell, value=substitute_text(cell.value, replacements))
                    for cell in row.cells
                ],
                id=row.id,
            )
            for row in table.rows
        ]
    )


def _substitute_step(step: Step, replacements: Mapping[str, str]) -> Step:
    table = step.data_table
    return replace(
        step,
        text=substitute_text(step.text, replacements),
        data_table=substitute_data_table(table, replacements) if table is not None else None,
    )


def expand_scenario_outline(scenario: Scenario) -> list[Scenario]:
    """Expand an outline into one scenario per examples row.

    A scenario without examples is returned alone. Examples blocks without a
    header row are ignored.
    """
    if not scenario.examples:
        return [scenario]

    expanded: list[Scenario] = []
    for examples in scenario.examples:
        if examples.table_header is None:
            continue
        headers = [cell.value for cell in examples.table_header.cells]
        for number, row in enumerate(examples.table_body, start=1):
            replacements = {
                f"<{header}>": cell.value for header, cell in zip(headers, row.cells)
            }
            name = scenario.name
            if examples.name:
                name += " -- " + examples.name
            name += f" (#{number})"
            expanded.append(
                Scenario(
                    name=name,
                    keyword="Scenario",
                    tags=[*scenario.tags, *examples.tags],
                    steps=[_substitute_step(step, replacements) for step in scenario.steps],
                    description=scenario.description,
                    id=scenario.id,
                )
            )
    return expanded