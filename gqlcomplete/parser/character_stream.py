"""Character stream over a single line of GraphQL source.

The online parser reads one line at a time through this stream. It tracks
the start of the current token and the current scan position.
"""

from __future__ import annotations

import re
from collections.abc import Callable


class CharacterStream:
    """Cursor over a line of text, consumed token by token."""

    def __init__(self, source_text: str):
        self._start = 0
        self._pos = 0
        self._source_text = source_text

    def get_start_of_token(self) -> int:
        return self._start

    def get_current_position(self) -> int:
        return self._pos

    def eol(self) -> bool:
        return self._pos >= len(self._source_text)

    def eat_while(self, predicate: Callable[[str], bool]) -> bool:
        """Consume characters while ``predicate`` holds for them.

        Returns True if at least one character was consumed. The token start
        moves to the first consumed character.
        """
        if self.eol() or not predicate(self._source_text[self._pos]):
            return False
        self._start = self._pos
        while not self.eol() and predicate(self._source_text[self._pos]):
            self._pos += 1
        return True

    def match(self, pattern: str | re.Pattern[str], consume: bool = True) -> str | None:
        """Match ``pattern`` at the current position.

        Returns the matched text, or None. When ``consume`` is true the token
        start moves to the current position and the position advances past
        the match.
        """
        token: str | None = None
        if isinstance(pattern, str):
            if self._source_text.startswith(pattern, self._pos):
                token = pattern
        else:
            found = pattern.match(self._source_text, self._pos)
            if found is not None:
                token = found.group(0)

        if token is None:
            return None
        if consume:
            self._start = self._pos
            self._pos += len(token)
        return token

    def current(self) -> str:
        return self._source_text[self._start : self._pos]
