"""Output formatters for FountainKit CLI."""

from __future__ import annotations

from fountainkit.cli.formatters.base import OutputFormat, OutputFormatter
from fountainkit.cli.formatters.document_formatter import DocumentFormatter
from fountainkit.cli.formatters.json_formatter import JsonFormatter

__all__ = [
    "DocumentFormatter",
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
]
