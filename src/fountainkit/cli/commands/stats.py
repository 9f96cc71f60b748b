"""Summarize a Fountain screenplay."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from fountainkit.cli.commands.common import load_document
from fountainkit.cli.formatters import DocumentFormatter, JsonFormatter, OutputFormat
from fountainkit.cli.utils.cli_handler import CLIHandler
from fountainkit.config import get_settings_for_cli

console = Console()


def stats_command(
    path: Annotated[
        Path,
        typer.Argument(help="Fountain file to summarize, or '-' to read from stdin"),
    ],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
) -> None:
    """Show element counts, scenes and characters of a screenplay."""
    handler = CLIHandler(console)

    try:
        settings = get_settings_for_cli(config_file=config)
        document = load_document(path, settings, handler)

        formatter = DocumentFormatter(console)
        stats = formatter.build_stats(document)

        if json_output:
            JsonFormatter().emit(stats, OutputFormat.JSON)
            return

        if stats["title"]:
            console.print(f"[bold cyan]{escape(stats['title'])}[/bold cyan]")
        console.print(formatter.build_stats_table(stats))
        if stats["characters"]:
            console.print(f"Characters: {escape(', '.join(stats['characters']))}")
    except typer.Exit:
        raise
    except Exception as e:
        handler.handle_error(e, json_output)
