"""Deferred classifications that depend on whether the next line is blank."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fountainkit.parser.elements import Action, Character, Element, Transition


class ResolveRule(str, Enum):
    """Which candidate a blank next line selects."""

    # "CUT TO:" is a transition only when followed by a blank line
    BLANK_SELECTS_PRIMARY = "blank_selects_primary"
    # a cue is a character only when dialogue follows on the next line
    BLANK_SELECTS_BACKUP = "blank_selects_backup"


@dataclass(frozen=True)
class PendingElement:
    """Two candidate elements for one ambiguous line."""

    primary: Element
    backup: Element
    rule: ResolveRule

    def resolve(self, next_line_blank: bool) -> Element:
        """Pick the candidate selected by the next line's blankness."""
        if self.rule is ResolveRule.BLANK_SELECTS_PRIMARY:
            return self.primary if next_line_blank else self.backup
        return self.backup if next_line_blank else self.primary

    @classmethod
    def transition(cls, text: str) -> PendingElement:
        return cls(
            primary=Transition(text),
            backup=Action(text),
            rule=ResolveRule.BLANK_SELECTS_PRIMARY,
        )

    @classmethod
    def character(cls, character: Character) -> PendingElement:
        return cls(
            primary=character,
            backup=Action(character.raw_text),
            rule=ResolveRule.BLANK_SELECTS_BACKUP,
        )
