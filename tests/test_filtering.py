from cukerun.filtering import (
    extract_tag_names,
    filter_document_by_tags,
    filter_rule_by_tags,
    has_rule_scenarios,
    has_scenarios,
    merge_tags,
)
from cukerun.gherkin import (
    Background,
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
from cukerun.tag_expressions import parse


def _scenario(name, *tags):
    return FeatureChild(scenario=Scenario(name=name, tags=[Tag(t) for t in tags]))


def _doc(*children, tags=()):
    return GherkinDocument(
        feature=Feature(name="F", tags=[Tag(t) for t in tags], children=list(children))
    )


def _names(doc):
    return [child.scenario.name for child in doc.feature.children if child.scenario]


def test_extract_tag_names_keeps_prefix():
    assert extract_tag_names([Tag("@smoke"), Tag("@fast")]) == ["@smoke", "@fast"]


def test_extract_tag_names_empty():
    assert extract_tag_names([]) == []


def test_merge_tags():
    assert merge_tags(["@feature"], ["@scenario"]) == ["@feature", "@scenario"]


def test_filters_scenarios_by_tag():
    doc = _doc(_scenario("Smoke Test", "@smoke"), _scenario("Other Test", "@other"))
    filtered = filter_document_by_tags(doc, parse("@smoke"))
    assert _names(filtered) == ["Smoke Test"]


def test_inherits_feature_tags():
    doc = _doc(_scenario("Test"), tags=["@feature"])
    filtered = filter_document_by_tags(doc, parse("@feature"))
    assert len(filtered.feature.children) == 1


def test_and_expression():
    doc = _doc(
        _scenario("Both Tags", "@smoke", "@fast"),
        _scenario("Only Smoke", "@smoke"),
    )
    filtered = filter_document_by_tags(doc, parse("@smoke and @fast"))
    assert _names(filtered) == ["Both Tags"]


def test_or_expression():
    doc = _doc(
        _scenario("Has Smoke", "@smoke"),
        _scenario("Has Fast", "@fast"),
        _scenario("Has Neither", "@other"),
    )
    filtered = filter_document_by_tags(doc, parse("@smoke or @fast"))
    assert len(filtered.feature.children) == 2


def test_not_expression():
    doc = _doc(_scenario("Fast Test", "@fast"), _scenario("Slow Test", "@slow"))
    filtered = filter_document_by_tags(doc, parse("not @slow"))
    assert _names(filtered) == ["Fast Test"]


def test_complex_expression_with_parentheses():
    doc = _doc(
        _scenario("Smoke Fast", "@smoke"),
        _scenario("UI Fast", "@ui"),
        _scenario("Smoke Slow", "@smoke", "@slow"),
        _scenario("Other", "@other"),
    )
    filtered = filter_document_by_tags(doc, parse("(@smoke or @ui) and not @slow"))
    assert _names(filtered) == ["Smoke Fast", "UI Fast"]


def test_preserves_background():
    doc = _doc(
        FeatureChild(background=Background(name="Setup")),
        _scenario("Smoke Test", "@smoke"),
    )
    filtered = filter_document_by_tags(doc, parse("@smoke"))
    assert len(filtered.feature.children) == 2
    assert filtered.feature.children[0].background.name == "Setup"


def test_rule_scenarios_inherit_feature_and_rule_tags():
    rule = Rule(
        name="R",
        tags=[Tag("@rule")],
        children=[RuleChild(scenario=Scenario(name="Rule Scenario"))],
    )
    doc = _doc(FeatureChild(rule=rule), tags=["@feature"])
    filtered = filter_document_by_tags(doc, parse("@feature and @rule"))
    assert len(filtered.feature.children) == 1
    assert filtered.feature.children[0].rule is not None
    assert len(filtered.feature.children[0].rule.children) == 1


def test_rule_without_matches_is_dropped():
    rule = Rule(
        name="R",
        children=[
            RuleChild(background=Background(name="bg")),
            RuleChild(scenario=Scenario(name="S", tags=[Tag("@other")])),
        ],
    )
    doc = _doc(FeatureChild(rule=rule))
    filtered = filter_document_by_tags(doc, parse("@smoke"))
    assert filtered.feature.children == []
    assert has_scenarios(filtered) is False


def test_filter_rule_keeps_background():
    rule = Rule(
        name="R",
        children=[
            RuleChild(background=Background(name="bg")),
            RuleChild(scenario=Scenario(name="A", tags=[Tag("@a")])),
            RuleChild(scenario=Scenario(name="B", tags=[Tag("@b")])),
        ],
    )
    filtered = filter_rule_by_tags(rule, ["@feature"], parse("@feature and @b"))
    assert filtered.name == "R"
    assert filtered.children[0].background.name == "bg"
    assert [c.scenario.name for c in filtered.children[1:]] == ["B"]
    assert len(rule.children) == 3


def test_filters_by_examples_level_tag():
    outline = Scenario(
        name="Login",
        keyword="Scenario Outline",
        steps=[Step(keyword="When ", text='user "<user>" logs in')],
        examples=[
            Examples(
                name="valid",
                table_header=TableRow(cells=[TableCell("user")]),
                table_body=[TableRow(cells=[TableCell("alice")])],
            ),
            Examples(
                name="invalid",
                tags=[Tag("@negative")],
                table_header=TableRow(cells=[TableCell("user")]),
                table_body=[
                    TableRow(cells=[TableCell("bob")]),
                    TableRow(cells=[TableCell("eve")]),
                ],
            ),
        ],
    )
    doc = _doc(FeatureChild(scenario=outline))
    filtered = filter_document_by_tags(doc, parse("@negative"))
    assert _names(filtered) == ["Login -- invalid (#1)", "Login -- invalid (#2)"]
    assert filtered.feature.children[1].scenario.steps[0].text == 'user "eve" logs in'


def test_document_without_feature_is_returned_unchanged():
    doc = GherkinDocument(feature=None, uri="x.feature")
    assert filter_document_by_tags(doc, parse("@smoke")) is doc


def test_filter_keeps_feature_metadata():
    doc = GherkinDocument(
        feature=Feature(name="Named", tags=[Tag("@f")], children=[]), uri="a.feature"
    )
    filtered = filter_document_by_tags(doc, parse("@f"))
    assert filtered.uri == "a.feature"
    assert filtered.feature.name == "Named"
    assert extract_tag_names(filtered.feature.tags) == ["@f"]


def test_has_scenarios():
    assert has_scenarios(_doc(_scenario("S"))) is True
    assert has_scenarios(_doc(FeatureChild(background=Background()))) is False
    assert has_scenarios(GherkinDocument()) is False
    rule = Rule(children=[RuleChild(scenario=Scenario(name="S"))])
    assert has_scenarios(_doc(FeatureChild(rule=rule))) is True


def test_has_rule_scenarios():
    assert has_rule_scenarios(Rule(children=[RuleChild(background=Background())])) is False
    assert has_rule_scenarios(Rule(children=[RuleChild(scenario=Scenario(name="S"))])) is True