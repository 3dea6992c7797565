"""Tests for locating the token and parser state at a cursor."""

from gqlcomplete.domains.query.completion import BREAK, Cursor, get_token_at_position, run_online_parser
from gqlcomplete.parser import RuleKind


class TestGetTokenAtPosition:
    """Tests for get_token_at_position."""

    def test_empty_document(self):
        """An empty document gives an empty token in the initial state."""
        token = get_token_at_position("", Cursor(0, 0))
        assert token.string == ""
        assert token.state.kind == RuleKind.DOCUMENT
        assert (token.start, token.end) == (0, 0)

    def test_token_ending_at_cursor(self):
        """A token ending exactly at the cursor is the cursor token."""
        token = get_token_at_position("{ hero", Cursor(0, 6))
        assert token.string == "hero"
        assert token.style == "property"
        assert token.state.kind == RuleKind.FIELD
        assert token.state.name == "hero"
        assert (token.start, token.end) == (2, 6)

    def test_token_past_cursor_is_ignored(self):
        """The scan stops at a token ending past the cursor and keeps the previous capture."""
        token = get_token_at_position("{ hero }", Cursor(0, 4))
        assert token.string == " "
        assert token.style == "ws"
        assert token.state.kind == RuleKind.SELECTION_SET
        assert (token.start, token.end, token.row) == (1, 2, 0)

    def test_captured_state_is_a_snapshot(self):
        """Parsing the next token must not change the captured state."""
        token = get_token_at_position("fragment Foo on Human", Cursor(0, 12))
        assert token.state.kind == RuleKind.FRAGMENT_DEFINITION
        assert token.state.name == "Foo"
        assert token.state.step == 1

    def test_cursor_row_selects_line(self):
        """Only tokens on the cursor's row are captured."""
        token = get_token_at_position("{\n  hero {\n    name\n  }\n}", Cursor(1, 6))
        assert token.string == "hero"
        assert token.state.kind == RuleKind.FIELD

    def test_first_token_past_cursor_is_returned_with_its_row(self):
        """When the row's first token already passes the cursor, that token is returned."""
        token = get_token_at_position("{ hero {\n  name }\n}", Cursor(1, 1))
        assert token.string == "  "
        assert (token.start, token.end, token.row) == (0, 2, 1)

    def test_blank_cursor_line_uses_scan_end(self):
        """A cursor on an empty line falls back to the state the scan ended in."""
        token = get_token_at_position("{\n", Cursor(1, 0))
        assert token.string == ""
        assert token.state.kind == RuleKind.SELECTION_SET

    def test_row_past_end_of_document(self):
        """A row past the last line gives the last token scanned."""
        token = get_token_at_position("{ hero", Cursor(5, 0))
        assert token.string == "hero"
        assert token.state.kind == RuleKind.FIELD

    def test_column_past_end_of_line(self):
        """A column past the end of the line captures the last token of the line."""
        token = get_token_at_position("{ hero", Cursor(0, 100))
        assert token.string == "hero"


class TestRunOnlineParser:
    """Tests for the shared scan loop."""

    def test_callback_sees_every_token_with_line_index(self):
        """The callback is called once per token, with the index of its line."""
        seen = []

        def callback(stream, state, style, index):
            seen.append((index, style, stream.current()))

        run_online_parser("{\n  hero\n}", callback)
        assert seen == [
            (0, "punctuation", "{"),
            (1, "ws", "  "),
            (1, "property", "hero"),
            (2, "punctuation", "}"),
        ]

    def test_break_stops_the_scan(self):
        """Returning BREAK stops scanning and returns the current token."""
        calls = []

        def callback(stream, state, style, index):
            calls.append(style)
            return BREAK

        token = run_online_parser("{ hero }\n{ droid }", callback)
        assert calls == ["punctuation"]
        assert token.string == "{"
        assert token.state.kind == RuleKind.SELECTION_SET

    def test_final_state_after_complete_document(self):
        """A complete document leaves the parser at the document level."""
        token = run_online_parser("{ hero { name } }", lambda stream, state, style, index: None)
        assert token.state.kind == RuleKind.DOCUMENT
        assert token.string == "}"
