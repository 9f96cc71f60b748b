"""Line-by-line Fountain screenplay parser."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from fountainkit.config import FountainKitSettings, get_logger, get_settings
from fountainkit.exceptions import FountainFileNotFoundError, ParseError
from fountainkit.parser.assembler import ElementAssembler
from fountainkit.parser.blocks import BlockAbsorber
from fountainkit.parser.document import FountainDocument
from fountainkit.parser.elements import (
    Action,
    Boneyard,
    Character,
    Dialogue,
    ElementType,
    Lyric,
    Note,
    PageBreak,
    Parenthetical,
    SceneHeading,
    Section,
    Synopsis,
    Transition,
)
from fountainkit.parser.patterns import (
    CHARACTER_PATTERN,
    FORCED_SCENE_HEADING_PATTERN,
    PAGE_BREAK_PATTERN,
    PARENTHETICAL_PATTERN,
    SCENE_HEADING_PATTERN,
    SECTION_PATTERN,
    SYNOPSIS_PATTERN,
    TRANSITION_PATTERN,
    decode_character,
    decode_heading,
    strip_continued,
)
from fountainkit.parser.pending import PendingElement
from fountainkit.parser.title_page import TitlePageParser

logger = get_logger(__name__)

NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")
BYTE_ORDER_MARK = "\ufeff"


@dataclass
class LineState:
    """The current and previous physical line of a parsing session."""

    line: str = ""
    trimmed: str = ""
    last_line: str = ""
    # the parser starts as if it had just seen a blank line
    last_line_empty: bool = True

    def advance(self, line: str) -> None:
        """Shift the current line into the previous slot and load ``line``."""
        self.last_line = self.line
        self.last_line_empty = not self.line.strip()
        self.line = line
        self.trimmed = line.strip()

    @property
    def blank(self) -> bool:
        return not self.trimmed


class FountainParser:
    """Classify Fountain lines into a FountainDocument.

    Feed lines one at a time with :meth:`feed` (or all at once with
    :meth:`feed_all` / :meth:`feed_text`) and call :meth:`finalize` after
    the last line. Each line is offered, in order, to the boneyard and note
    absorbers, the pending lookahead resolver, the title page parser and
    finally the matcher chain; the first one to accept the line wins, with
    plain action as the fallback.

    A parser holds the state of one document and is not reusable.
    """

    def __init__(self, merge_actions: bool = True, merge_dialogue: bool = True) -> None:
        """Initialize the parser.

        Args:
            merge_actions: Fold consecutive action lines into one element
            merge_dialogue: Fold consecutive dialogue lines under one cue
                into one element
        """
        self.merge_actions = merge_actions
        self.merge_dialogue = merge_dialogue

        self._document = FountainDocument()
        self._assembler = ElementAssembler(self._document.elements, merge_actions)
        self._title_page = TitlePageParser(self._document.title_entries)
        self._boneyard = BlockAbsorber(Boneyard, self._document.boneyards)
        self._notes = BlockAbsorber(Note, self._document.notes)
        self._pending: list[PendingElement] = []
        self._state = LineState()
        self._finalized = False

        self._matchers: tuple[Callable[[], bool], ...] = (
            self._parse_section,
            self._parse_forced_action,
            self._parse_forced_scene_heading,
            self._parse_forced_character,
            self._parse_forced_transition,
            self._parse_page_break,
            self._parse_lyric,
            self._parse_synopsis,
            self._parse_centered_text,
            self._parse_scene_heading,
            self._parse_transition,
            self._parse_parenthetical,
            self._parse_character,
            self._parse_dialogue,
        )

    @classmethod
    def from_settings(cls, settings: FountainKitSettings) -> FountainParser:
        """Create a parser configured from application settings."""
        return cls(
            merge_actions=settings.merge_actions,
            merge_dialogue=settings.merge_dialogue,
        )

    @property
    def document(self) -> FountainDocument:
        """The document built so far; complete only after finalize()."""
        return self._document

    @property
    def finalized(self) -> bool:
        return self._finalized

    def feed(self, line: str) -> None:
        """Process one logical line.

        Args:
            line: A single line without its line terminator

        Raises:
            ParseError: If the parser has already been finalized
        """
        if self._finalized:
            raise ParseError(
                message="Cannot feed lines to a finalized parser",
                hint="Create a new FountainParser for each document.",
            )

        state = self._state
        state.advance(line)

        if self._absorb_block(state.trimmed):
            return

        if self._pending:
            self._resolve_pending(next_line_blank=state.blank)

        if self._title_page.active and self._title_page.parse(line):
            return

        for matcher in self._matchers:
            if matcher():
                return

        self._parse_action()

    def feed_all(self, lines: Iterable[str]) -> FountainDocument:
        """Process every line, then finalize.

        Args:
            lines: Logical lines without line terminators

        Returns:
            The finished document
        """
        for line in lines:
            self.feed(line)
        return self.finalize()

    def feed_text(self, text: str) -> FountainDocument:
        """Split ``text`` on any newline convention, process it and finalize.

        A leading byte order mark is dropped so it cannot hide a title key.
        """
        text = text.removeprefix(BYTE_ORDER_MARK)
        return self.feed_all(NEWLINE_PATTERN.split(text))

    def finalize(self) -> FountainDocument:
        """Flush pending state at end of input.

        Pending lookahead items are resolved as if a blank line followed.
        Unterminated boneyards and notes are discarded. Calling this again
        has no further effect.

        Returns:
            The finished document
        """
        if self._finalized:
            return self._document

        self._resolve_pending(next_line_blank=True)

        for absorber in (self._boneyard, self._notes):
            dropped = absorber.discard()
            if dropped is not None:
                logger.warning(
                    "Discarding unterminated block at end of input",
                    block=type(dropped).__name__,
                    lines=len(dropped.lines),
                )

        self._assembler.pad_actions.clear()
        self._finalized = True

        logger.debug(
            "Finalized fountain document",
            elements=len(self._document.elements),
            title_entries=len(self._document.title_entries),
            boneyards=len(self._document.boneyards),
            notes=len(self._document.notes),
        )
        return self._document

    def _absorb_block(self, trimmed: str) -> bool:
        # An open block owns every line until its close marker, including
        # lines that look like the other block's open marker
        absorbers = (self._boneyard, self._notes)
        for absorber in absorbers:
            if absorber.active:
                return absorber.absorb(trimmed)
        return any(absorber.absorb(trimmed) for absorber in absorbers)

    def _add_pending(self, pending: PendingElement) -> None:
        logger.debug(
            "Created pending element",
            candidate=pending.primary.element_type.value,
            fallback=pending.backup.element_type.value,
        )
        self._pending.append(pending)

    def _resolve_pending(self, next_line_blank: bool) -> None:
        for pending in self._pending:
            element = pending.resolve(next_line_blank)
            logger.debug(
                "Resolved pending element",
                candidate=pending.primary.element_type.value,
                resolved=element.element_type.value,
            )
            self._assembler.add(element)
        self._pending.clear()

    # Matchers: each returns True when it has consumed the current line.

    def _parse_section(self) -> bool:
        match = SECTION_PATTERN.match(self._state.trimmed)
        if not match:
            return False
        self._assembler.add(
            Section(match.group(2).strip(), level=len(match.group(1)))
        )
        return True

    def _parse_forced_action(self) -> bool:
        trimmed = self._state.trimmed
        if not trimmed.startswith("!"):
            return False
        self._assembler.add(Action(trimmed[1:], forced=True))
        return True

    def _parse_forced_scene_heading(self) -> bool:
        trimmed = self._state.trimmed
        if not FORCED_SCENE_HEADING_PATTERN.match(trimmed):
            return False
        heading = decode_heading(trimmed[1:])
        if heading is None:
            return False
        text, scene_number = heading
        self._assembler.add(SceneHeading(text, scene_number=scene_number, forced=True))
        return True

    def _parse_forced_character(self) -> bool:
        trimmed = self._state.trimmed
        if not trimmed.startswith("@"):
            return False
        cue_text = trimmed[1:].strip()
        cue = decode_character(cue_text)
        if cue is None:
            return False
        self._assembler.add(
            Character(
                cue_text, name=cue.name, extension=cue.extension, dual=cue.dual
            )
        )
        return True

    def _parse_forced_transition(self) -> bool:
        trimmed = self._state.trimmed
        if not trimmed.startswith(">") or trimmed.endswith("<"):
            return False
        self._assembler.add(Transition(trimmed[1:].strip(), forced=True))
        return True

    def _parse_page_break(self) -> bool:
        if not PAGE_BREAK_PATTERN.match(self._state.trimmed):
            return False
        self._assembler.add(PageBreak())
        return True

    def _parse_lyric(self) -> bool:
        trimmed = self._state.trimmed
        if not trimmed.startswith("~"):
            return False
        self._assembler.add(Lyric(trimmed[1:].lstrip()))
        return True

    def _parse_synopsis(self) -> bool:
        trimmed = self._state.trimmed
        if not SYNOPSIS_PATTERN.match(trimmed):
            return False
        self._assembler.add(Synopsis(trimmed[1:].lstrip()))
        return True

    def _parse_centered_text(self) -> bool:
        trimmed = self._state.trimmed
        if not (trimmed.startswith(">") and trimmed.endswith("<")):
            return False
        self._assembler.add(Action(trimmed[1:-1].strip(), centered=True))
        return True

    def _parse_scene_heading(self) -> bool:
        trimmed = self._state.trimmed
        if not SCENE_HEADING_PATTERN.match(trimmed):
            return False
        heading = decode_heading(trimmed)
        if heading is None:
            return False
        text, scene_number = heading
        self._assembler.add(SceneHeading(text, scene_number=scene_number))
        return True

    def _parse_transition(self) -> bool:
        state = self._state
        if not (state.last_line_empty and TRANSITION_PATTERN.match(state.trimmed)):
            return False
        self._add_pending(PendingElement.transition(state.trimmed))
        return True

    def _parse_parenthetical(self) -> bool:
        match = PARENTHETICAL_PATTERN.match(self._state.line)
        last = self._assembler.last
        if not (match and self._assembler.in_dialogue and last is not None):
            return False
        if last.element_type not in (ElementType.CHARACTER, ElementType.DIALOGUE):
            return False
        self._assembler.add(Parenthetical(match.group(1)))
        return True

    def _parse_character(self) -> bool:
        cue_text = strip_continued(self._state.trimmed)
        if not (self._state.last_line_empty and CHARACTER_PATTERN.match(cue_text)):
            return False
        cue = decode_character(cue_text)
        if cue is None:
            return False
        self._add_pending(
            PendingElement.character(
                Character(
                    cue_text, name=cue.name, extension=cue.extension, dual=cue.dual
                )
            )
        )
        return True

    def _parse_dialogue(self) -> bool:
        state = self._state
        last = self._assembler.last
        if last is None:
            return False

        if state.line and last.element_type in (
            ElementType.CHARACTER,
            ElementType.PARENTHETICAL,
        ):
            self._assembler.add(Dialogue(state.trimmed))
            return True

        if not isinstance(last, Dialogue) or state.blank:
            return False

        # A whitespace-only line (not an empty one) separates paragraphs
        if state.last_line_empty and state.last_line:
            if self.merge_dialogue:
                last.append_line("")
                last.append_line(state.trimmed)
            else:
                self._assembler.add(Dialogue(""))
                self._assembler.add(Dialogue(state.trimmed))
            return True

        if not state.last_line_empty:
            if self.merge_dialogue:
                last.append_line(state.trimmed)
            else:
                self._assembler.add(Dialogue(state.trimmed))
            return True

        return False

    def _parse_action(self) -> None:
        self._assembler.add(Action(self._state.line))


def parse_text(
    text: str, settings: FountainKitSettings | None = None
) -> FountainDocument:
    """Parse a whole Fountain text.

    Args:
        text: Raw Fountain text in any newline convention
        settings: Settings providing the merge options (defaults to global)

    Returns:
        The finished document
    """
    settings = settings or get_settings()
    return FountainParser.from_settings(settings).feed_text(text)


def parse_file(
    file_path: Path | str, settings: FountainKitSettings | None = None
) -> FountainDocument:
    """Parse a Fountain file.

    Args:
        file_path: Path to the Fountain file
        settings: Settings providing the encoding and merge options

    Returns:
        The finished document

    Raises:
        FountainFileNotFoundError: If the file does not exist
        ParseError: If the file cannot be read or decoded
    """
    settings = settings or get_settings()
    path = Path(file_path)

    if not path.is_file():
        raise FountainFileNotFoundError(
            message=f"Fountain file not found: {path}",
            hint="Check the path and make sure it points to a file.",
            details={"file": str(path)},
        )

    logger.debug("Parsing fountain file", file=str(path))
    try:
        content = path.read_text(encoding=settings.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        logger.error("Failed to read fountain file", file=str(path), error=str(e))
        raise ParseError(
            message=f"Failed to read Fountain file: {path}",
            hint="Check the file encoding (FOUNTAINKIT_ENCODING) and permissions.",
            details={
                "file": str(path),
                "encoding": settings.encoding,
                "reader_error": str(e),
            },
        ) from e

    return parse_text(content, settings)
