"""Element assembly: merging, blank-line padding and dialogue tracking."""

from __future__ import annotations

from fountainkit.parser.elements import DIALOGUE_TYPES, Action, Element


class ElementAssembler:
    """Append classified elements to the document element list.

    Consecutive non-centered actions are folded into one element when
    ``merge_actions`` is set. Blank action lines that follow an action are
    held in a pad buffer until the next element shows whether they sit
    inside an action block (kept) or at its end (dropped).
    """

    def __init__(self, elements: list[Element], merge_actions: bool = True) -> None:
        """Initialize the assembler.

        Args:
            elements: Document element list to append to
            merge_actions: Fold consecutive action lines into one element
        """
        self.elements = elements
        self.merge_actions = merge_actions
        self.pad_actions: list[Action] = []
        self.in_dialogue = False

    @property
    def last(self) -> Element | None:
        """The most recently appended element, if any."""
        return self.elements[-1] if self.elements else None

    def add(self, element: Element) -> None:
        """Append an element, applying the merge and padding rules."""
        last = self.last

        if isinstance(element, Action) and not element.centered and element.is_empty():
            self.in_dialogue = False
            if isinstance(last, Action):
                self.pad_actions.append(element)
            return

        if isinstance(element, Action) and self.pad_actions:
            if self.merge_actions and isinstance(last, Action) and not last.centered:
                for pad in self.pad_actions:
                    last.append_line(pad.raw_text)
            else:
                self.elements.extend(self.pad_actions)

        self.pad_actions.clear()

        if (
            self.merge_actions
            and isinstance(element, Action)
            and not element.centered
            and isinstance(last, Action)
            and not last.centered
        ):
            last.append_line(element.raw_text)
            return

        self.elements.append(element)
        self.in_dialogue = element.element_type in DIALOGUE_TYPES
