"""Locate the token and parser state at a cursor position."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from gqlcomplete.parser import CharacterStream, OnlineParser, ParserState

from .core import ContextToken, Cursor

# Returned by a scan callback to stop the scan.
BREAK = "BREAK"

ScanCallback = Callable[[CharacterStream, ParserState, str, int], "str | None"]


def run_online_parser(query_text: str, callback: ScanCallback) -> ContextToken:
    """Parse ``query_text`` line by line, calling ``callback`` after every token.

    The callback receives the stream, the live parser state, the token style
    and the line index. The state keeps changing after the callback returns,
    so callbacks that keep it must snapshot it.

    Returns the last token scanned together with the final state.
    """
    parser = OnlineParser()
    state = parser.start_state()
    style = ""
    stream = CharacterStream("")
    row = 0

    for row, line in enumerate(query_text.split("\n")):
        stream = CharacterStream(line)
        while not stream.eol():
            style = parser.token(stream, state)
            if callback(stream, state, style, row) == BREAK:
                return _context_token(stream, state, style, row)

        if state.kind is None:
            state = parser.start_state()

    return _context_token(stream, state, style, row)


def _context_token(stream: CharacterStream, state: ParserState, style: str, row: int) -> ContextToken:
    return ContextToken(
        start=stream.get_start_of_token(),
        end=stream.get_current_position(),
        string=stream.current(),
        state=state,
        style=style,
        row=row,
    )


@dataclass
class CursorCapture:
    """Remembers the last token that ends at or before the cursor."""

    cursor: Cursor
    token: ContextToken | None = None

    def observe(self, stream: CharacterStream, state: ParserState, style: str, index: int) -> str | None:
        if index != self.cursor.row:
            return None
        if stream.get_current_position() > self.cursor.column:
            return BREAK
        self.token = _context_token(stream, state.snapshot(), style, index)
        return None


def get_token_at_position(query_text: str, cursor: Cursor) -> ContextToken:
    """Find the token at ``cursor`` and the parser state after it.

    Lines after the cursor's row are never scanned. When no token on the
    cursor's row ends at or before the cursor, the token the scan stopped on
    is used. That token can reach past the cursor, so filtering must only
    look at its text up to the cursor column.
    """
    lines = query_text.split("\n")[: max(cursor.row, 0) + 1]
    capture = CursorCapture(cursor=cursor)
    token = run_online_parser("\n".join(lines), capture.observe)
    return capture.token if capture.token is not None else token
