"""Helpers shared by the parse and stats commands."""

from __future__ import annotations

from pathlib import Path

from fountainkit.cli.utils.cli_handler import CLIHandler
from fountainkit.config import FountainKitSettings, get_logger
from fountainkit.main import FountainKit
from fountainkit.parser import FountainDocument

logger = get_logger(__name__)


def load_document(
    path: Path, settings: FountainKitSettings, handler: CLIHandler
) -> FountainDocument:
    """Parse a file, or stdin when ``path`` is "-".

    Args:
        path: Screenplay path or "-"
        settings: Effective settings for this command
        handler: CLI handler used to read stdin

    Returns:
        Parsed document
    """
    kit = FountainKit(settings)
    if handler.is_stdin(path):
        logger.debug("Reading screenplay from stdin")
        return kit.parse_text(handler.read_stdin())
    return kit.parse_file(path)
