"""Tests for ElementAssembler merging and blank-line padding."""

from fountainkit.parser.assembler import ElementAssembler
from fountainkit.parser.elements import Action, Character, Dialogue, SceneHeading


def make_assembler(merge_actions=True):
    return ElementAssembler([], merge_actions=merge_actions)


def test_blank_action_without_previous_action_is_dropped():
    assembler = make_assembler()

    assembler.add(Action(""))

    assert assembler.elements == []
    assert assembler.pad_actions == []


def test_blank_action_after_action_is_buffered():
    assembler = make_assembler()
    assembler.add(Action("Bob walks in."))

    assembler.add(Action("   "))

    assert len(assembler.elements) == 1
    assert [pad.raw_text for pad in assembler.pad_actions] == ["   "]


def test_buffered_blanks_fold_into_merged_action():
    assembler = make_assembler()
    assembler.add(Action("One."))
    assembler.add(Action(""))
    assembler.add(Action(""))
    assembler.add(Action("Two."))

    (action,) = assembler.elements
    assert action.lines() == ["One.", "", "", "Two."]
    assert assembler.pad_actions == []


def test_non_action_discards_buffered_blanks():
    assembler = make_assembler()
    assembler.add(Action("One."))
    assembler.add(Action(""))

    assembler.add(SceneHeading("INT. HOUSE - DAY"))

    assert [e.raw_text for e in assembler.elements] == ["One.", "INT. HOUSE - DAY"]
    assert assembler.pad_actions == []


def test_without_merging_blanks_become_elements():
    assembler = make_assembler(merge_actions=False)
    assembler.add(Action("One."))
    assembler.add(Action(""))
    assembler.add(Action("Two."))

    assert [e.raw_text for e in assembler.elements] == ["One.", "", "Two."]


def test_blanks_after_centered_text_are_kept_separately():
    assembler = make_assembler()
    assembler.add(Action("THE END", centered=True))
    assembler.add(Action(""))
    assembler.add(Action("Credits roll."))

    assert [e.raw_text for e in assembler.elements] == ["THE END", "", "Credits roll."]


def test_blank_centered_action_is_appended():
    assembler = make_assembler()

    assembler.add(Action("", centered=True))

    assert len(assembler.elements) == 1


def test_dialogue_tracking():
    assembler = make_assembler()

    assembler.add(Character("JOHN", name="JOHN"))
    assert assembler.in_dialogue is True

    assembler.add(Dialogue("Hello."))
    assert assembler.in_dialogue is True

    assembler.add(Action(""))
    assert assembler.in_dialogue is False

    assembler.add(Character("MARY", name="MARY"))
    assembler.add(Action("She leaves."))
    assert assembler.in_dialogue is False
    assert assembler.last.raw_text == "She leaves."
