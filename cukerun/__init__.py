"""Gherkin model, tag-expression filtering, outline expansion and scenario collection."""

__version__ = "0.1.0"

__all__ = ["cli_args", "collect", "filtering", "gherkin", "outline", "tag_expressions"]