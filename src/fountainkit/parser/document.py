"""Parsed Fountain document container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fountainkit.parser.elements import (
    Boneyard,
    Character,
    Element,
    ElementType,
    Note,
    SceneHeading,
    TitleEntry,
)


@dataclass
class FountainDocument:
    """Result of parsing a screenplay.

    ``elements`` is the ordered element sequence; title entries keep their
    source order. Boneyards and notes are only added once their closing
    marker has been seen.
    """

    elements: list[Element] = field(default_factory=list)
    title_entries: list[TitleEntry] = field(default_factory=list)
    boneyards: list[Boneyard] = field(default_factory=list)
    notes: list[Note] = field(default_factory=list)

    @property
    def title_values(self) -> dict[str, str]:
        """Title page values keyed by lower-cased key (last entry wins)."""
        return {entry.key.lower(): entry.text for entry in self.title_entries}

    def get_title(self, key: str, default: str | None = None) -> str | None:
        """Look up a title page value case-insensitively.

        Args:
            key: Title page key such as "Title" or "Author"
            default: Value returned when the key is absent

        Returns:
            The entry text, or ``default``
        """
        return self.title_values.get(key.lower(), default)

    @property
    def title(self) -> str | None:
        return self.get_title("title")

    def elements_of(self, *element_types: ElementType) -> list[Element]:
        """Return the elements whose kind is one of ``element_types``."""
        wanted = set(element_types)
        return [element for element in self.elements if element.element_type in wanted]

    @property
    def scene_headings(self) -> list[SceneHeading]:
        return [e for e in self.elements if isinstance(e, SceneHeading)]

    @property
    def characters(self) -> list[str]:
        """Names of every character cue, in first-appearance order."""
        names: dict[str, None] = {}
        for element in self.elements:
            if isinstance(element, Character) and element.name:
                names.setdefault(element.name, None)
        return list(names)

    def counts(self) -> dict[str, int]:
        """Number of elements per element type, in order of first appearance."""
        counts: dict[str, int] = {}
        for element in self.elements:
            key = element.element_type.value
            counts[key] = counts.get(key, 0) + 1
        return counts

    def to_dict(self) -> dict[str, Any]:
        """Serialize the whole document to a JSON-friendly dictionary."""
        return {
            "title_page": [entry.to_dict() for entry in self.title_entries],
            "elements": [element.to_dict() for element in self.elements],
            "boneyards": [boneyard.to_dict() for boneyard in self.boneyards],
            "notes": [note.to_dict() for note in self.notes],
        }
