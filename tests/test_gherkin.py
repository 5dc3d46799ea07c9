from cukerun.gherkin import (
    Background,
    DataTable,
    Examples,
    Feature,
    FeatureChild,
    GherkinDocument,
    Rule,
    RuleChild,
    Scenario,
    Step,
    TableCell,
    TableRow,
    Tag,
)


def _table(rows):
    return DataTable(rows=[TableRow(cells=[TableCell(v) for v in row]) for row in rows])


def test_values_returns_cells_row_by_row():
    rows = [["name", "age"], ["Alice", "30"], ["Bob", "25"]]
    assert _table(rows).values() == rows


def test_values_of_empty_table_is_empty():
    assert DataTable().values() == []


def test_values_keeps_ragged_rows():
    rows = [["a"], ["b", "c", "d"], []]
    assert _table(rows).values() == rows


def test_default_lists_are_not_shared():
    first = Scenario(name="one")
    second = Scenario(name="two")
    first.tags.append(Tag("@smoke"))
    first.steps.append(Step("Given ", "a step"))
    assert second.tags == []
    assert second.steps == []


def test_scenario_defaults():
    scenario = Scenario(name="s")
    assert scenario.keyword == "Scenario"
    assert scenario.examples == []


def test_examples_without_header():
    examples = Examples(name="rows")
    assert examples.table_header is None
    assert examples.table_body == []


def test_document_structure_holds_children():
    background = Background(steps=[Step("Given ", "the system is initialized")])
    rule = Rule(
        name="Registration",
        children=[RuleChild(scenario=Scenario(name="Successful registration"))],
    )
    doc = GherkinDocument(
        feature=Feature(
            name="User management",
            children=[FeatureChild(background=background), FeatureChild(rule=rule)],
        )
    )
    assert doc.feature.children[0].background.steps[0].text == "the system is initialized"
    assert doc.feature.children[1].rule.children[0].scenario.name == "Successful registration"
    assert doc.feature.children[1].scenario is None


def test_step_equality_is_by_value():
    assert Step("Given ", "x", data_table=_table([["a"]])) == Step(
        "Given ", "x", data_table=_table([["a"]])
    )
    assert Step("Given ", "x") != Step("When ", "x")