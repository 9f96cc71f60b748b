"""Tests for lookahead resolution of ambiguous lines."""

import pytest

from fountainkit.parser.elements import Action, Character, Transition
from fountainkit.parser.pending import PendingElement, ResolveRule


@pytest.mark.parametrize(
    ("next_line_blank", "expected"), [(True, Transition), (False, Action)]
)
def test_transition_candidate(next_line_blank, expected):
    pending = PendingElement.transition("CUT TO:")

    element = pending.resolve(next_line_blank)

    assert pending.rule is ResolveRule.BLANK_SELECTS_PRIMARY
    assert type(element) is expected
    assert element.raw_text == "CUT TO:"


@pytest.mark.parametrize(
    ("next_line_blank", "expected"), [(True, Action), (False, Character)]
)
def test_character_candidate(next_line_blank, expected):
    cue = Character("JOHN (V.O.)", name="JOHN", extension="V.O.")
    pending = PendingElement.character(cue)

    element = pending.resolve(next_line_blank)

    assert pending.rule is ResolveRule.BLANK_SELECTS_BACKUP
    assert type(element) is expected
    assert element.raw_text == "JOHN (V.O.)"


def test_resolved_character_is_the_original_cue():
    cue = Character("MARY ^", name="MARY", dual=True)

    assert PendingElement.character(cue).resolve(False) is cue
