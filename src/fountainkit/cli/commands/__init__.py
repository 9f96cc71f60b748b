"""FountainKit CLI commands."""

from __future__ import annotations

from fountainkit.cli.commands.parse import parse_command
from fountainkit.cli.commands.stats import stats_command

__all__ = ["parse_command", "stats_command"]
