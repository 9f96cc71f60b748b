"""Rich table output for parsed Fountain documents."""

from __future__ import annotations

from typing import Any

from rich.markup import escape
from rich.table import Table

from fountainkit.cli.formatters.base import OutputFormat, OutputFormatter
from fountainkit.cli.formatters.json_formatter import JsonFormatter
from fountainkit.parser import Element, FountainDocument

PREVIEW_LENGTH = 60

_TYPE_STYLES = {
    "scene_heading": "bold magenta",
    "character": "cyan",
    "dialogue": "green",
    "parenthetical": "green",
    "transition": "yellow",
    "section": "bold blue",
    "synopsis": "blue",
}


def _preview(text: str) -> str:
    flat = " ".join(text.split())
    if len(flat) > PREVIEW_LENGTH:
        return flat[: PREVIEW_LENGTH - 3] + "..."
    return flat


def _attributes(element: Element) -> str:
    data = element.to_dict()
    data.pop("raw_text")
    data.pop("type")
    return ", ".join(
        f"{key}={value}" for key, value in data.items() if value not in (None, False)
    )


class DocumentFormatter(OutputFormatter[FountainDocument]):
    """Formatter for parsed documents: element listing and statistics."""

    def format(
        self, data: FountainDocument, format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        """Format a document as JSON or as a plain element listing."""
        if format_type == OutputFormat.JSON:
            return JsonFormatter().format(data)
        return "\n".join(
            f"{index:>4}  {element.element_type.value:<14} {_preview(element.text)}"
            for index, element in enumerate(data.elements)
        )

    def build_elements_table(self, document: FountainDocument) -> Table:
        """Build a table listing every element of the document."""
        table = Table(title="Fountain Elements", show_lines=False)
        table.add_column("#", style="dim", justify="right", no_wrap=True)
        table.add_column("Type", no_wrap=True)
        table.add_column("Text", no_wrap=False)
        table.add_column("Attributes", style="dim")

        for index, element in enumerate(document.elements):
            kind = element.element_type.value
            style = _TYPE_STYLES.get(kind, "")
            table.add_row(
                str(index),
                f"[{style}]{kind}[/{style}]" if style else kind,
                escape(_preview(element.text)),
                escape(_attributes(element)),
            )
        return table

    def build_title_table(self, document: FountainDocument) -> Table:
        table = Table(title="Title Page")
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Value")
        for entry in document.title_entries:
            table.add_row(escape(entry.key), escape(entry.text))
        return table

    def build_stats(self, document: FountainDocument) -> dict[str, Any]:
        """Collect document statistics for the stats command."""
        return {
            "title": document.title,
            "elements": len(document.elements),
            "element_counts": document.counts(),
            "title_entries": len(document.title_entries),
            "boneyards": len(document.boneyards),
            "notes": len(document.notes),
            "scenes": [heading.text for heading in document.scene_headings],
            "characters": document.characters,
        }

    def build_stats_table(self, stats: dict[str, Any]) -> Table:
        table = Table(title="Document Statistics")
        table.add_column("Metric", style="cyan", no_wrap=True)
        table.add_column("Value", justify="right")
        table.add_row("Elements", str(stats["elements"]))
        for kind, count in stats["element_counts"].items():
            table.add_row(f"  {kind}", str(count))
        table.add_row("Title entries", str(stats["title_entries"]))
        table.add_row("Boneyards", str(stats["boneyards"]))
        table.add_row("Notes", str(stats["notes"]))
        table.add_row("Scenes", str(len(stats["scenes"])))
        table.add_row("Characters", str(len(stats["characters"])))
        return table

    def print_document(self, document: FountainDocument) -> None:
        """Print title page (if any) and element tables to the console."""
        if document.title_entries:
            self.console.print(self.build_title_table(document))
        if not document.elements:
            self.console.print("[yellow]No elements found.[/yellow]")
            return
        self.console.print(self.build_elements_table(document))
