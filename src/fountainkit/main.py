"""Library facade binding one settings object to the parser."""

from __future__ import annotations

from pathlib import Path

from fountainkit.config import FountainKitSettings, get_logger, get_settings
from fountainkit.parser import FountainDocument, FountainParser
from fountainkit.parser.fountain_parser import parse_file

logger = get_logger(__name__)


class FountainKit:
    """Parse screenplays with a fixed set of settings.

    Without explicit settings the process-wide ones from ``get_settings()``
    are used.
    """

    def __init__(self, settings: FountainKitSettings | None = None) -> None:
        self.settings = settings or get_settings()

    def create_parser(self) -> FountainParser:
        """Return a new incremental parser; call ``finalize()`` on it when done."""
        return FountainParser.from_settings(self.settings)

    def parse_text(self, text: str) -> FountainDocument:
        document = self.create_parser().feed_text(text)
        self._log_parsed(document, source="<text>")
        return document

    def parse_file(self, path: str | Path) -> FountainDocument:
        """Read and parse a ``.fountain`` file.

        Raises:
            FountainFileNotFoundError: ``path`` is not a file
            ParseError: The file cannot be decoded with ``settings.encoding``
        """
        document = parse_file(Path(path), self.settings)
        self._log_parsed(document, source=str(path))
        return document

    @staticmethod
    def _log_parsed(document: FountainDocument, source: str) -> None:
        logger.info(
            "Parsed screenplay",
            source=source,
            title=document.title,
            elements=len(document.elements),
            scenes=len(document.scene_headings),
        )
