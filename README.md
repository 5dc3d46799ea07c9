# cukerun

Building blocks for running Gherkin (Cucumber-style) feature files from Python:

- a plain dataclass model of a parsed Gherkin document (`cukerun.gherkin`);
- a Cucumber tag-expression parser and evaluator (`cukerun.tag_expressions`);
- Scenario Outline expansion with `<placeholder>` substitution in step text
  and data tables (`cukerun.outline`);
- tag-based filtering of whole documents, with feature → rule → scenario tag
  inheritance (`cukerun.filtering`);
- handling of the `--tags`, `--report-file`, `--fail-fast`, `--no-color`,
  `--disable-log` and `--disable-reporter` options (`cukerun.cli_args`);
- collection of runnable scenarios with their feature and rule backgrounds
  (`cukerun.collect`).

The package has no runtime dependencies and requires Python 3.10 or later.

## Installation

```
pip install cukerun
```

## The document model

`cukerun.gherkin` holds dataclasses for a parsed feature file:
`GherkinDocument`, `Feature`, `FeatureChild`, `Rule`, `RuleChild`,
`Background`, `Scenario`, `Examples`, `Step`, `DataTable`, `TableRow`,
`TableCell` and `Tag`. Tag names keep their `@` prefix. A `Scenario` with
`examples` is a Scenario Outline. `DataTable.values()` returns the cell values
row by row as lists of strings.

## Tag expressions

```python
from cukerun.tag_expressions import parse, TagExpressionError

expr = parse("(@smoke or @ui) and not @slow")
expr.evaluate(["@smoke"])           # True
expr.evaluate(["@smoke", "@slow"])  # False

try:
    parse("invalid expression ((")
except TagExpressionError as exc:
    print(exc)
```

Supported operators are `and`, `or`, `not` and parentheses; `not` binds
tightest, then `and`, then `or`. A backslash escapes a space, a parenthesis or
a backslash inside a tag name. An empty expression matches everything.
`TagExpressionError` is a subclass of `ValueError`.

## Filtering a document

```python
from cukerun.gherkin import Feature, FeatureChild, GherkinDocument, Scenario, Tag
from cukerun.filtering import filter_document_by_tags, has_scenarios
from cukerun.tag_expressions import parse

document = GherkinDocument(
    feature=Feature(
        name="Checkout",
        children=[
            FeatureChild(scenario=Scenario(name="Smoke Test", tags=[Tag(name="@smoke")])),
            FeatureChild(scenario=Scenario(name="Other Test", tags=[Tag(name="@other")])),
        ],
    )
)

filtered = filter_document_by_tags(document, parse("@smoke"))
[child.scenario.name for child in filtered.feature.children]  # ["Smoke Test"]
has_scenarios(filtered)                                        # True
```

`filter_document_by_tags` returns a copy; the input is left as it was.
Backgrounds are always kept, and rules left without scenarios are dropped.
Scenario Outlines are expanded before filtering, so tags placed on an
`Examples` block select only that block's rows. The helpers
`filter_rule_by_tags`, `has_rule_scenarios`, `extract_tag_names` and
`merge_tags` are available too.

## Scenario Outlines

`expand_scenario_outline(scenario)` turns an outline into one concrete
scenario per examples row. Each expanded scenario is named
`"<outline name> -- <examples name> (#<row>)"` (the examples part is omitted
when the block has no name), carries the outline's tags followed by the
examples' tags, and has `<placeholder>` values replaced in step text and data
table cells. Examples blocks without a header row are skipped. A scenario
without examples is returned unchanged as a single-element list.
`substitute_text` and `substitute_data_table` do the substitution on their own.

## Options

```python
from cukerun.cli_args import RunConfig, resolve_settings, resolve_report_file, parse_tags

argv = ["--tags", "@billing", "--no-color", "--report-file=out/report"]
parse_tags(argv)                                          # "@billing"
resolve_settings(RunConfig(fail_fast=True), argv)         # fail_fast=True, use_colors=False, ...
resolve_report_file(RunConfig(report_file="cfg"), argv)   # "out/report.html"
```

`argv` excludes the program name; when it is `None`, `sys.argv[1:]` is used.
Values may be given as `--tags VALUE` or `--tags=VALUE` (likewise for
`--report-file`). Command-line flags always override `RunConfig` values, and
the report file name gets `.html` appended; with no report file configured,
`resolve_report_file` returns `""`. `has_flag(argv, flag)` tells whether a
flag is present.

## Collecting scenarios

```python
from cukerun.collect import FeatureSource, collect_scenarios

for execution in collect_scenarios([FeatureSource(document=document, file="checkout.feature")]):
    print(execution.feature_name, execution.rule_name, execution.scenario.name)
```

Each `ScenarioExecution` carries the scenario, outlines already expanded,
together with the feature and rule backgrounds that precede it in the file.
`data_table_rows(table)` gives a step's table as lists of strings, or `None`
when the step has no table.

## What this package does not do

It prepares scenarios but does not run them. It has no parser for `.feature`
text (documents are built from the dataclasses), no step definition registry
or step matching, no console reporter or HTML report writer, no lifecycle
hooks and no command-line program. The report file name and the run settings
it resolves are for a runner built on top of it to use.