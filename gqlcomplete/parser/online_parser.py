"""Incremental GraphQL parser.

The parser consumes one token per ``token()`` call and keeps everything it
knows in a ``ParserState``. Each pushed rule saves a copy of the enclosing
state in ``prev_state``, so a state is the innermost link of a chain that
reaches back to the ``Document`` rule. This chain is what completion uses to
reconstruct the type context at a cursor.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, fields, replace

from .character_stream import CharacterStream
from .rules import (
    LEX_RULES,
    PARSE_RULES,
    SPECIAL_PARSE_RULES,
    Rule,
    RuleKind,
    RuleStep,
    Terminal,
    Token,
    TokenKind,
    is_ignored,
)


@dataclass
class ParserState:
    """Parse position within the innermost open construct."""

    kind: RuleKind | None = None
    step: int = 0
    name: str | None = None
    type: str | None = None
    rule: Rule | None = None
    needs_separator: bool = False
    needs_advance: bool = False
    prev_state: ParserState | None = field(default=None, repr=False)

    def copy(self) -> ParserState:
        """Shallow copy sharing the enclosing chain."""
        return replace(self)

    def snapshot(self) -> ParserState:
        """Copy of this state and every enclosing state.

        The parser keeps updating enclosing states in place (a named type
        writes back to its fragment definition), so a state kept past the
        next ``token()`` call must be snapshotted.
        """
        copied: ParserState | None = None
        for state in reversed(list(self.ancestors())):
            copied = replace(state, prev_state=copied)
        return copied if copied is not None else replace(self)

    def restore(self, other: ParserState) -> None:
        for state_field in fields(self):
            setattr(self, state_field.name, getattr(other, state_field.name))

    def ancestors(self) -> Iterator[ParserState]:
        """Yield this state, then each enclosing state outwards."""
        state: ParserState | None = self
        while state is not None:
            yield state
            state = state.prev_state


EatWhitespace = Callable[[CharacterStream], bool]


_NON_SPACE = re.compile(r"\S+")
_SPACE = re.compile(r"\s")


def _eat_ignored(stream: CharacterStream) -> bool:
    return stream.eat_while(is_ignored)


class OnlineParser:
    """Tokenizes a GraphQL document line by line while tracking parse state."""

    def __init__(
        self,
        eat_whitespace: EatWhitespace = _eat_ignored,
        lex_rules=LEX_RULES,
        parse_rules=PARSE_RULES,
    ):
        self._eat_whitespace = eat_whitespace
        self._lex_rules = lex_rules
        self._parse_rules = parse_rules

    def start_state(self) -> ParserState:
        state = ParserState()
        push_rule(self._parse_rules, state, RuleKind.DOCUMENT)
        return state

    def token(self, stream: CharacterStream, state: ParserState) -> str:
        """Consume one token from ``stream``, update ``state`` and return its style."""
        # Leave an empty rule (Invalid, Comment) once its token is behind us.
        if isinstance(state.rule, list) and len(state.rule) == 0:
            pop_rule(state)
        elif state.needs_advance:
            state.needs_advance = False
            advance_rule(state, True)

        if self._eat_whitespace(stream):
            return "ws"

        token = lex(self._lex_rules, stream)

        if token is None:
            if stream.match(_NON_SPACE) is None:
                # Consume at least one character to make progress.
                stream.match(_SPACE)
            push_rule(SPECIAL_PARSE_RULES, state, RuleKind.INVALID)
            return "invalidchar"

        if token.kind == TokenKind.COMMENT:
            push_rule(SPECIAL_PARSE_RULES, state, RuleKind.COMMENT)
            return "comment"

        backup_state = state.copy()

        while state.rule is not None:
            expected = _expected_step(state, token, stream)

            if state.needs_separator:
                expected = expected.separator if isinstance(expected, RuleStep) else None

            if expected is not None:
                if isinstance(expected, RuleStep):
                    expected = expected.of_rule

                if isinstance(expected, RuleKind):
                    push_rule(self._parse_rules, state, expected)
                    continue

                if isinstance(expected, Terminal) and expected.match(token):
                    if expected.update is not None:
                        expected.update(state, token)

                    # Punctuation closes its step right away. Other tokens
                    # advance lazily so the state still describes them while
                    # they are being typed.
                    if token.kind == TokenKind.PUNCTUATION:
                        advance_rule(state, True)
                    else:
                        state.needs_advance = True

                    return expected.style

            unsuccessful(state)

        # The token fits nowhere: keep the previous state under an Invalid.
        state.restore(backup_state)
        push_rule(SPECIAL_PARSE_RULES, state, RuleKind.INVALID)
        return "invalidchar"


def _expected_step(state: ParserState, token: Token, stream: CharacterStream):
    rule = state.rule
    if callable(rule):
        return rule(token, stream) if state.step == 0 else None
    if state.step < len(rule):
        return rule[state.step]
    return None


def lex(lex_rules, stream: CharacterStream) -> Token | None:
    for kind, pattern in lex_rules.items():
        value = stream.match(pattern)
        if value is not None:
            return Token(kind=kind, value=value)
    return None


def push_rule(rules, state: ParserState, kind: RuleKind) -> None:
    if kind not in rules:
        raise TypeError(f"Unknown rule: {kind}")
    state.prev_state = state.copy()
    state.kind = kind
    state.name = None
    state.type = None
    state.rule = rules[kind]
    state.step = 0
    state.needs_separator = False


def pop_rule(state: ParserState) -> None:
    prev = state.prev_state
    if prev is None:
        state.kind = None
        state.rule = None
        return
    state.kind = prev.kind
    state.name = prev.name
    state.type = prev.type
    state.rule = prev.rule
    state.step = prev.step
    state.needs_separator = prev.needs_separator
    state.prev_state = prev.prev_state


def _current_step(state: ParserState):
    rule = state.rule
    if isinstance(rule, list) and state.step < len(rule):
        return rule[state.step]
    return None


def is_list(state: ParserState) -> bool:
    step = _current_step(state)
    return isinstance(step, RuleStep) and step.is_list


def advance_rule(state: ParserState, successful: bool) -> None:
    # A list step gets the chance to repeat itself.
    if is_list(state):
        step = _current_step(state)
        if step.separator is not None:
            separator = step.separator
            state.needs_separator = not state.needs_separator
            # An optional separator may be skipped.
            if not state.needs_separator and isinstance(separator, RuleStep):
                return
        if successful:
            return

    state.needs_separator = False
    state.step += 1

    # Pop every rule that has run out of steps.
    while state.rule is not None and not (isinstance(state.rule, list) and state.step < len(state.rule)):
        pop_rule(state)
        if state.rule is not None:
            if is_list(state):
                if _current_step(state).separator is not None:
                    state.needs_separator = not state.needs_separator
            else:
                state.needs_separator = False
                state.step += 1


def unsuccessful(state: ParserState) -> None:
    # Fall back to the nearest optional or list step and skip past it.
    while state.rule is not None and not isinstance(_current_step(state), RuleStep):
        pop_rule(state)
    if state.rule is not None:
        advance_rule(state, False)
