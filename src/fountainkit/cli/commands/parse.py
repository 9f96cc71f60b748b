"""Parse a Fountain screenplay and show its elements."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from fountainkit.cli.commands.common import load_document
from fountainkit.cli.formatters import DocumentFormatter, JsonFormatter, OutputFormat
from fountainkit.cli.utils.cli_handler import CLIHandler
from fountainkit.config import get_settings_for_cli

console = Console()


def parse_command(
    path: Annotated[
        Path,
        typer.Argument(help="Fountain file to parse, or '-' to read from stdin"),
    ],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    no_merge_actions: Annotated[
        bool,
        typer.Option(
            "--no-merge-actions",
            help="Keep every action line as its own element",
        ),
    ] = False,
    no_merge_dialogue: Annotated[
        bool,
        typer.Option(
            "--no-merge-dialogue",
            help="Keep every dialogue line as its own element",
        ),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
) -> None:
    """Parse a Fountain screenplay into its script elements.

    Lists every element (scene headings, action, characters, dialogue, ...)
    in order, together with the title page. Use --json for the full
    document including boneyards and notes.
    """
    handler = CLIHandler(console)

    try:
        overrides = {
            "merge_actions": False if no_merge_actions else None,
            "merge_dialogue": False if no_merge_dialogue else None,
        }
        settings = get_settings_for_cli(config_file=config, cli_overrides=overrides)
        document = load_document(path, settings, handler)

        if json_output:
            JsonFormatter().emit(document, OutputFormat.JSON)
        else:
            DocumentFormatter(console).print_document(document)
    except typer.Exit:
        raise
    except Exception as e:
        handler.handle_error(e, json_output)
