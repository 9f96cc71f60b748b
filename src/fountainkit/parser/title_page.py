"""Title page parsing for the top of a Fountain document."""

from __future__ import annotations

from fountainkit.config import get_logger
from fountainkit.parser.elements import TitleEntry
from fountainkit.parser.patterns import (
    TITLE_CONTINUATION_PATTERN,
    TITLE_ENTRY_PATTERN,
)

logger = get_logger(__name__)


class TitlePageParser:
    """Collect ``key: value`` entries until the first non-title line.

    An entry with an empty value opens continuation mode, in which lines
    indented by three or more spaces (or a tab) extend that entry.
    """

    def __init__(self, entries: list[TitleEntry]) -> None:
        self.entries = entries
        self.active = True
        self.multi_line = False

    def parse(self, line: str) -> bool:
        """Consume a title page line.

        Args:
            line: The raw, untrimmed line

        Returns:
            True if the line belonged to the title page. On False the title
            page is over and the line must be classified normally.
        """
        match = TITLE_ENTRY_PATTERN.match(line)
        if match:
            text = match.group(2)
            self.entries.append(TitleEntry(key=match.group(1), text=text))
            self.multi_line = not text
            return True

        if self.multi_line and self.entries and TITLE_CONTINUATION_PATTERN.match(line):
            self.entries[-1].append_line(line.strip())
            return True

        self.active = False
        logger.debug("Title page ended", entries=len(self.entries))
        return False
