"""Error reporting and input helpers shared by the CLI commands."""

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from fountainkit.cli.formatters.json_formatter import JsonFormatter
from fountainkit.config import get_logger
from fountainkit.exceptions import FountainKitError

logger = get_logger(__name__)

STDIN_PATH = "-"


class CLIHandler:
    """Report command failures and read piped input for one command."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> None:
        """Print ``error`` as text or JSON and leave the command.

        Raises:
            typer.Exit: Always, carrying ``exit_code``
        """
        logger.error("Command failed", error=str(error), exc_info=error)

        if json_output:
            print(JsonFormatter().format_error_response(error, exit_code))
            raise typer.Exit(exit_code)

        message = error.message if isinstance(error, FountainKitError) else str(error)
        self.console.print(f"[red]Error: {escape(message)}[/red]")
        hint = getattr(error, "hint", None)
        if hint:
            self.console.print(f"[yellow]Hint: {escape(hint)}[/yellow]")
        raise typer.Exit(exit_code)

    def read_stdin(self) -> str:
        """Return everything piped to stdin.

        Raises:
            typer.Exit: If stdin is an interactive terminal
        """
        if sys.stdin.isatty():
            self.console.print(
                "[red]Error: No input provided. "
                "Pass a file path or pipe a screenplay to stdin[/red]"
            )
            raise typer.Exit(1)
        return sys.stdin.read()

    @staticmethod
    def is_stdin(path: Path) -> bool:
        return str(path) == STDIN_PATH
