"""Property-based tests for the Fountain line classifier using Hypothesis."""

from hypothesis import given, settings
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from fountainkit.parser import (
    Action,
    Character,
    Dialogue,
    ElementType,
    FountainParser,
    Parenthetical,
)
from fountainkit.parser.patterns import SCENE_HEADING_PATTERN

FOUNTAIN_ALPHABET = "ABCDEINOSTX abcdeostx.:/#!@>~=<()[]*^'\t-"

SAMPLE_LINES = [
    "",
    "   ",
    "JOHN",
    "MARY (V.O.) ^",
    "@bob",
    "INT. HOUSE - DAY #1#",
    ".MONTAGE",
    "CUT TO:",
    "> FADE OUT.",
    "> CENTERED <",
    "(quietly)",
    "Hello there.",
    "Title: Test",
    "    continued",
    "/* hidden",
    "*/",
    "[[note]]",
    "===",
    "= synopsis",
    "~ lyric",
    "# Act",
    "!FORCED ACTION",
]

fountain_lines = st.lists(
    st.one_of(
        st.sampled_from(SAMPLE_LINES),
        st.text(alphabet=FOUNTAIN_ALPHABET, max_size=24),
    ),
    max_size=40,
)

# Lowercase prose that no matcher claims: no colon, no sigil, no capital cue
plain_line = st.from_regex(r"[a-z][a-z ,]{0,30}", fullmatch=True).filter(
    lambda line: not SCENE_HEADING_PATTERN.match(line)
)


class TestParserProperties:
    """Structural guarantees that hold for any input."""

    @given(lines=fountain_lines)
    @settings(max_examples=200)
    def test_any_input_parses(self, lines):
        parser = FountainParser()
        document = parser.feed_all(lines)

        assert parser.finalize() is document
        assert all(e.element_type in ElementType for e in document.elements)

    @given(
        lines=fountain_lines,
        merge_actions=st.booleans(),
        merge_dialogue=st.booleans(),
    )
    def test_dialogue_elements_follow_a_cue(self, lines, merge_actions, merge_dialogue):
        document = FountainParser(
            merge_actions=merge_actions, merge_dialogue=merge_dialogue
        ).feed_all(lines)

        for previous, element in zip(document.elements, document.elements[1:]):
            if isinstance(element, Parenthetical):
                assert isinstance(previous, (Character, Dialogue))
            if isinstance(element, Dialogue):
                assert isinstance(previous, (Character, Parenthetical, Dialogue))
        if document.elements:
            assert not isinstance(document.elements[0], (Dialogue, Parenthetical))

    @given(lines=fountain_lines)
    def test_no_trailing_blank_action(self, lines):
        document = FountainParser().feed_all(lines)

        if document.elements:
            last = document.elements[-1]
            assert not (isinstance(last, Action) and not last.centered and last.is_empty())

    @given(lines=fountain_lines)
    def test_blocks_are_sealed_and_characters_named(self, lines):
        document = FountainParser().feed_all(lines)

        for block in [*document.boneyards, *document.notes]:
            assert block.is_closed()
            assert block.lines[0].startswith(block.open_marker)
        for element in document.elements:
            if isinstance(element, Character):
                assert element.name

    @given(
        paragraphs=st.lists(
            st.lists(plain_line, min_size=1, max_size=4), min_size=1, max_size=4
        )
    )
    def test_merged_action_preserves_source_lines(self, paragraphs):
        lines = []
        for paragraph in paragraphs:
            if lines:
                lines.append("")
            lines.extend(paragraph)

        document = FountainParser().feed_all(lines)

        (action,) = document.elements
        assert action.lines() == lines


class ParserStateMachine(RuleBasedStateMachine):
    """Feed lines one at a time and check the document only ever grows."""

    def __init__(self):
        super().__init__()
        self.parser = FountainParser()
        self.seen = []

    @rule(line=st.sampled_from(SAMPLE_LINES))
    def feed_sample(self, line):
        self.parser.feed(line)

    @rule(line=st.text(alphabet=FOUNTAIN_ALPHABET, max_size=16))
    def feed_text(self, line):
        self.parser.feed(line)

    @invariant()
    def elements_are_append_only(self):
        elements = self.parser.document.elements
        assert len(elements) >= len(self.seen)
        assert all(a is b for a, b in zip(self.seen, elements))
        self.seen = list(elements)

    def teardown(self):
        document = self.parser.finalize()
        assert self.parser.finalized
        assert len(document.elements) >= len(self.seen)


TestParserStateMachine = ParserStateMachine.TestCase
