"""Fountain screenplay format parser for FountainKit."""

from __future__ import annotations

from .document import FountainDocument
from .elements import (
    Action,
    Boneyard,
    Character,
    Dialogue,
    Element,
    ElementType,
    Lyric,
    Note,
    PageBreak,
    Parenthetical,
    SceneHeading,
    Section,
    Synopsis,
    TitleEntry,
    Transition,
)
from .fountain_parser import FountainParser, parse_file, parse_text

__all__ = [
    "Action",
    "Boneyard",
    "Character",
    "Dialogue",
    "Element",
    "ElementType",
    "FountainDocument",
    "FountainParser",
    "Lyric",
    "Note",
    "PageBreak",
    "Parenthetical",
    "SceneHeading",
    "Section",
    "Synopsis",
    "TitleEntry",
    "Transition",
    "parse_file",
    "parse_text",
]
