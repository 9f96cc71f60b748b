"""Tests for CLI output formatters."""

import json

from rich.console import Console

from fountainkit.cli.formatters import DocumentFormatter, JsonFormatter, OutputFormat
from fountainkit.exceptions import ParseError
from fountainkit.parser import parse_text

SCRIPT = "Title: Tiny\n\nINT. ROOM - DAY\n\nJOHN\nHi.\n\nHe types [bold]loud[/bold].\n"


def recording_console():
    return Console(record=True, width=120, force_terminal=False)


class TestJsonFormatter:
    """Test JSON formatting."""

    def test_object_with_to_dict(self):
        document = parse_text(SCRIPT)

        data = json.loads(JsonFormatter().format(document))

        assert data["title_page"][0]["text"] == "Tiny"

    def test_plain_values(self):
        formatter = JsonFormatter()

        assert json.loads(formatter.format([1, 2])) == [1, 2]
        assert json.loads(formatter.format("text")) == {"value": "text"}

    def test_error_response_from_exception(self):
        error = ParseError("Cannot read", hint="Check encoding")

        data = json.loads(JsonFormatter().format_error_response(error, code=2))

        assert data == {
            "success": False,
            "code": 2,
            "error": "Cannot read",
            "hint": "Check encoding",
        }

    def test_error_response_from_string(self):
        data = json.loads(JsonFormatter().format_error_response("boom"))

        assert data["error"] == "boom"

    def test_emit_json_writes_plain_stdout(self, capsys):
        JsonFormatter().emit({"scenes": 1}, OutputFormat.JSON)

        assert json.loads(capsys.readouterr().out) == {"scenes": 1}


class TestDocumentFormatter:
    """Test document listing and statistics."""

    def test_plain_listing(self):
        document = parse_text(SCRIPT)

        listing = DocumentFormatter().format(document)

        lines = listing.splitlines()
        assert len(lines) == 4
        assert "scene_heading" in lines[0]
        assert "INT. ROOM - DAY" in lines[0]

    def test_json_format(self):
        document = parse_text(SCRIPT)

        data = json.loads(DocumentFormatter().format(document, OutputFormat.JSON))

        assert len(data["elements"]) == 4

    def test_markup_in_text_is_escaped(self):
        console = recording_console()
        formatter = DocumentFormatter(console)

        formatter.print_document(parse_text(SCRIPT))

        output = console.export_text()
        assert "He types [bold]loud[/bold]." in output
        assert "Title Page" in output

    def test_long_text_is_shortened(self):
        document = parse_text("\n" + "word " * 40)
        console = recording_console()

        console.print(DocumentFormatter(console).build_elements_table(document))

        assert "..." in console.export_text()

    def test_build_stats(self):
        stats = DocumentFormatter().build_stats(parse_text(SCRIPT))

        assert stats == {
            "title": "Tiny",
            "elements": 4,
            "element_counts": {
                "scene_heading": 1,
                "character": 1,
                "dialogue": 1,
                "action": 1,
            },
            "title_entries": 1,
            "boneyards": 0,
            "notes": 0,
            "scenes": ["INT. ROOM - DAY"],
            "characters": ["JOHN"],
        }
