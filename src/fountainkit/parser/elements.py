"""Data models for parsed Fountain screenplay elements."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, ClassVar

LINE_SEPARATOR = "\n"


class ElementType(str, Enum):
    """Kinds of script element the parser can produce."""

    SECTION = "section"
    SCENE_HEADING = "scene_heading"
    ACTION = "action"
    CHARACTER = "character"
    DIALOGUE = "dialogue"
    PARENTHETICAL = "parenthetical"
    LYRIC = "lyric"
    TRANSITION = "transition"
    SYNOPSIS = "synopsis"
    PAGE_BREAK = "page_break"


DIALOGUE_TYPES = frozenset(
    {ElementType.CHARACTER, ElementType.PARENTHETICAL, ElementType.DIALOGUE}
)


@dataclass
class Element:
    """Base class for a classified script element.

    ``raw_text`` holds every source line folded into the element, joined by
    ``LINE_SEPARATOR``, so merged blocks can be split back into their lines.
    """

    element_type: ClassVar[ElementType]

    raw_text: str

    @property
    def text(self) -> str:
        """Display text with surrounding whitespace removed."""
        return self.raw_text.strip()

    def append_line(self, line: str) -> None:
        """Append a source line to this element."""
        self.raw_text = f"{self.raw_text}{LINE_SEPARATOR}{line}"

    def is_empty(self) -> bool:
        """Return True if the element holds only whitespace."""
        return not self.raw_text.strip()

    def lines(self) -> list[str]:
        """Return the source lines folded into this element, in order."""
        return self.raw_text.split(LINE_SEPARATOR)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the element to a JSON-friendly dictionary."""
        data = asdict(self)
        data["type"] = self.element_type.value
        return data


@dataclass
class Section(Element):
    """Outline section marker (``#``, ``##`` or ``###``)."""

    element_type: ClassVar[ElementType] = ElementType.SECTION

    level: int = 1


@dataclass
class SceneHeading(Element):
    """Scene heading, e.g. ``INT. HOUSE - DAY #12#``."""

    element_type: ClassVar[ElementType] = ElementType.SCENE_HEADING

    scene_number: str | None = None
    forced: bool = False

    @property
    def text(self) -> str:
        """Heading text in upper case; ``raw_text`` keeps the source casing."""
        return self.raw_text.strip().upper()


@dataclass
class Action(Element):
    """Action (description) text, also used for centered text."""

    element_type: ClassVar[ElementType] = ElementType.ACTION

    centered: bool = False
    forced: bool = False


@dataclass
class Character(Element):
    """Character cue introducing a block of dialogue."""

    element_type: ClassVar[ElementType] = ElementType.CHARACTER

    name: str = ""
    extension: str | None = None
    dual: bool = False


@dataclass
class Dialogue(Element):
    element_type: ClassVar[ElementType] = ElementType.DIALOGUE


@dataclass
class Parenthetical(Element):
    element_type: ClassVar[ElementType] = ElementType.PARENTHETICAL


@dataclass
class Lyric(Element):
    element_type: ClassVar[ElementType] = ElementType.LYRIC


@dataclass
class Transition(Element):
    element_type: ClassVar[ElementType] = ElementType.TRANSITION

    forced: bool = False


@dataclass
class Synopsis(Element):
    element_type: ClassVar[ElementType] = ElementType.SYNOPSIS


@dataclass
class PageBreak(Element):
    element_type: ClassVar[ElementType] = ElementType.PAGE_BREAK

    raw_text: str = ""


@dataclass
class TitleEntry:
    """A ``key: value`` entry from the title page.

    Indented continuation lines extend ``text`` line by line.
    """

    key: str
    text: str = ""

    def append_line(self, line: str) -> None:
        """Append a continuation line to the entry value."""
        self.text = f"{self.text}{LINE_SEPARATOR}{line}" if self.text else line

    def to_dict(self) -> dict[str, Any]:
        """Serialize the entry to a JSON-friendly dictionary."""
        return {"key": self.key, "text": self.text}


@dataclass
class TextBlock:
    """Lines collected between an open marker and its close marker."""

    open_marker: ClassVar[str]
    close_marker: ClassVar[str]

    lines: list[str] = field(default_factory=list)

    @property
    def raw_text(self) -> str:
        return LINE_SEPARATOR.join(self.lines)

    @property
    def text(self) -> str:
        """Block content with the surrounding markers removed."""
        content = self.raw_text
        if content.startswith(self.open_marker):
            content = content[len(self.open_marker) :]
        if content.endswith(self.close_marker):
            content = content[: -len(self.close_marker)]
        return content.strip()

    def append_line(self, line: str) -> None:
        self.lines.append(line)

    def is_closed(self) -> bool:
        """Return True once the collected text ends with the close marker."""
        # "/*/" opens and ends with "*/" but shares the middle character
        content = self.raw_text
        minimum = len(self.open_marker) + len(self.close_marker)
        return len(content) >= minimum and content.endswith(self.close_marker)

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "lines": list(self.lines)}


@dataclass
class Boneyard(TextBlock):
    """Commented-out text between ``/*`` and ``*/``."""

    open_marker: ClassVar[str] = "/*"
    close_marker: ClassVar[str] = "*/"


@dataclass
class Note(TextBlock):
    """Writer's note between ``[[`` and ``]]``."""

    open_marker: ClassVar[str] = "[["
    close_marker: ClassVar[str] = "]]"
