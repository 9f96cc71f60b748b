"""The ``fountainkit`` command line application."""

from __future__ import annotations

import os
from typing import Annotated

import typer
from rich.console import Console

from fountainkit import __version__
from fountainkit.cli.commands import parse_command, stats_command
from fountainkit.cli.formatters import JsonFormatter, OutputFormat
from fountainkit.config import (
    clear_settings_cache,
    configure_logging,
    get_logger,
    get_settings,
)

logger = get_logger(__name__)
console = Console()

DESCRIPTION = "Parse Fountain screenplays into structured script elements"

app = typer.Typer(
    name="fountainkit",
    help=DESCRIPTION,
    pretty_exceptions_enable=False,
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="parse")(parse_command)
app.command(name="stats")(stats_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show the FountainKit version."""
    if json_output:
        JsonFormatter().emit(
            {"name": "FountainKit", "version": __version__, "description": DESCRIPTION},
            OutputFormat.JSON,
        )
        return
    console.print(f"FountainKit v{__version__}")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log at INFO level"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Log at DEBUG level with call site information",
            envvar="FOUNTAINKIT_DEBUG",
        ),
    ] = False,
) -> None:
    """Parse and inspect Fountain screenplays."""
    if not (verbose or debug):
        return

    # Exported so that settings reloaded by the command see the same level
    os.environ["FOUNTAINKIT_LOG_LEVEL"] = "DEBUG" if debug else "INFO"
    if debug:
        os.environ["FOUNTAINKIT_DEBUG"] = "true"

    clear_settings_cache()
    settings = get_settings()
    configure_logging(settings)
    logger.info("Logging configured", level=settings.log_level, debug=settings.debug)


def main() -> None:
    """Console script entry point."""
    app()
