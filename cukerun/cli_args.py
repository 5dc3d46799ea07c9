"""Run settings taken from configuration and command-line arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "RunConfig",
    "RunSettings",
    "parse_tags",
    "parse_report_file",
    "has_flag",
    "resolve_settings",
    "resolve_report_file",
]


@dataclass
class RunConfig:
    """Configuration given to a run; command-line flags override it."""

    fail_fast: bool = False
    no_color: bool = False
    disable_log: bool = False
    disable_reporter: bool = False
    report_file: str = ""


@dataclass(frozen=True)
class RunSettings:
    """Settings in effect for a run."""

    fail_fast: bool = False
    use_colors: bool = True
    disable_log: bool = False
    disable_reporter: bool = False


def _args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def _option_value(argv: Sequence[str] | None, option: str) -> str:
    args = _args(argv)
    prefix = option + "="
    for position, arg in enumerate(args):
        if arg == option and position + 1 < len(args):
            return args[position + 1]
        if arg.startswith(prefix):
            return arg[len(prefix):]
    return ""


def parse_tags(argv: Sequence[str] | None = None) -> str:
    """Return the value of ``--tags VALUE`` or ``--tags=VALUE``, or ``""``.

    *argv* excludes the program name and defaults to ``sys.argv[1:]``.
    """
    return _option_value(argv, "--tags")


def parse_report_file(argv: Sequence[str] | None = None) -> str:
    """Return the value of ``--report-file``, or ``""`` when absent."""
    return _option_value(argv, "--report-file")


def has_flag(argv: Sequence[str] | None, flag: str) -> bool:
    """Return whether *flag* appears among the arguments."""
    return flag in _args(argv)


def resolve_settings(
    config: RunConfig | None = None, argv: Sequence[str] | None = None
) -> RunSettings:
    """Combine *config* with command-line flags, the flags taking precedence."""
    if config is None:
        config = RunConfig()
    return RunSettings(
        fail_fast=config.fail_fast or has_flag(argv, "--fail-fast"),
        use_colors=not config.no_color and not has_flag(argv, "--no-color"),
        disable_log=config.disable_log or has_flag(argv, "--disable-log"),
        disable_reporter=config.disable_reporter or has_flag(argv, "--disable-reporter"),
    )


def resolve_report_file(
    config: RunConfig | None = None, argv: Sequence[str] | None = None
) -> str:
    """Return the HTML report path, or ``""`` when no report is wanted.

    The value is a name without extension; ``.html`` is appended.
    """
    report_file = config.report_file if config is not None else ""
    cli_report = parse_report_file(argv)
    if cli_report:
        report_file = cli_report
    return report_file + ".html" if report_file else ""