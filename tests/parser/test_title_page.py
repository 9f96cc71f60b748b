"""Tests for the title page parser."""

from fountainkit.parser.title_page import TitlePageParser


def test_key_value_entries():
    entries = []
    parser = TitlePageParser(entries)

    assert parser.parse("Title: The Last Reel")
    assert parser.parse("  Draft date :  1/1/2024  ")

    assert [(e.key, e.text) for e in entries] == [
        ("Title", "The Last Reel"),
        ("Draft date", "1/1/2024"),
    ]
    assert parser.active is True


def test_continuation_lines_extend_empty_entry():
    entries = []
    parser = TitlePageParser(entries)

    parser.parse("Contact:")
    assert parser.multi_line is True
    assert parser.parse("    Jane Doe")
    assert parser.parse("\t555-0100")

    assert entries[0].text == "Jane Doe\n555-0100"


def test_indented_line_after_single_line_entry_ends_title_page():
    entries = []
    parser = TitlePageParser(entries)
    parser.parse("Title: Heat")

    assert parser.parse("    not a continuation") is False
    assert parser.active is False
    assert len(entries) == 1


def test_non_title_line_ends_title_page():
    entries = []
    parser = TitlePageParser(entries)

    assert parser.parse("INT. HOUSE - DAY") is False
    assert parser.active is False
    assert entries == []


def test_key_characters_are_restricted():
    parser = TitlePageParser([])

    assert parser.parse("Draft-date: 1/1/2024") is False
