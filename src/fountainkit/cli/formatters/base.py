"""Base formatter classes for CLI output."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from rich.console import Console

T = TypeVar("T")


class OutputFormat(str, Enum):
    """Supported output formats."""

    TABLE = "table"
    JSON = "json"


class OutputFormatter(ABC, Generic[T]):
    """Render command results either for humans or as JSON."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize formatter.

        Args:
            console: Rich console for table output. If None, creates new instance.
        """
        self.console = console or Console()

    @abstractmethod
    def format(self, data: T, format_type: OutputFormat = OutputFormat.TABLE) -> str:
        """Format data as a string in the requested format."""

    def emit(self, data: T, format_type: OutputFormat = OutputFormat.TABLE) -> None:
        """Format data and write it out."""
        output = self.format(data, format_type)
        if format_type == OutputFormat.JSON:
            # Output pure JSON without ANSI escape codes
            print(output)
        else:
            self.console.print(output, markup=False, highlight=False)
