"""Line patterns and decoders used by the Fountain line classifier."""

from __future__ import annotations

import re
from dataclasses import dataclass

SECTION_PATTERN = re.compile(r"^(#{1,3})(.*)$")
FORCED_SCENE_HEADING_PATTERN = re.compile(r"^\.[a-zA-Z0-9]")
PAGE_BREAK_PATTERN = re.compile(r"^\s*={3,}\s*$")
SYNOPSIS_PATTERN = re.compile(r"^=(?!=)")
SCENE_HEADING_PATTERN = re.compile(
    r"^\s*(?:(?:INT|EXT|EST|INT\./EXT|INT/EXT|I/E)(?:\.|\s)|FADE IN:)",
    re.IGNORECASE,
)
TRANSITION_PATTERN = re.compile(r"^\s*[A-Z\s]+TO:\s*$", re.IGNORECASE)
PARENTHETICAL_PATTERN = re.compile(r"^\s*\((.*)\)\s*$")
CHARACTER_PATTERN = re.compile(r"^([A-Z][^a-z]*?)\s*(?:\(.*\))?(?:\s*\^\s*)?$")
CONTINUED_PATTERN = re.compile(r"\(\s*CONT[’']D\s*\)", re.IGNORECASE)

TITLE_ENTRY_PATTERN = re.compile(r"^\s*([A-Za-z0-9 ]+?)\s*:\s*(.*?)\s*$")
TITLE_CONTINUATION_PATTERN = re.compile(r"^( {3,}|\t)")

_HEADING_DECODE_PATTERN = re.compile(r"^(.*?)(?:\s*#([a-zA-Z0-9\-.]+)#)?$")
_CHARACTER_DECODE_PATTERN = re.compile(r"^([^(\^]+?)\s*(?:\((.*)\))?(?:\s*\^\s*)?$")


@dataclass(frozen=True)
class CharacterCue:
    """Decoded parts of a character cue."""

    name: str
    extension: str | None = None
    dual: bool = False


def strip_continued(text: str) -> str:
    """Remove a "(CONT'D)" marker, in either apostrophe form, and trim."""
    return CONTINUED_PATTERN.sub("", text).strip()


def decode_heading(text: str) -> tuple[str, str | None] | None:
    """Split a scene heading into its text and optional ``#number#`` tag.

    Args:
        text: Heading text, e.g. "INT. HOUSE - DAY #1A#"

    Returns:
        Tuple of (heading text, scene number), or None if the text cannot be
        decoded
    """
    match = _HEADING_DECODE_PATTERN.match(text)
    if not match:
        return None
    return match.group(1).strip(), match.group(2) or None


def decode_character(text: str) -> CharacterCue | None:
    """Split a character cue into name, extension and dual-dialogue flag.

    Args:
        text: Cue text, e.g. "JOHN (V.O.) ^"

    Returns:
        The decoded cue, or None if no name can be found
    """
    text = strip_continued(text)
    match = _CHARACTER_DECODE_PATTERN.match(text)
    if not match:
        return None
    extension = match.group(2)
    return CharacterCue(
        name=match.group(1).strip(),
        extension=extension.strip() if extension and extension.strip() else None,
        dual=text.endswith("^"),
    )
