"""Incremental GraphQL parser used by the completion engine."""

from .character_stream import CharacterStream
from .online_parser import OnlineParser, ParserState
from .rules import LEX_RULES, PARSE_RULES, RuleKind, Token, TokenKind, is_ignored

__all__ = [
    "CharacterStream",
    "OnlineParser",
    "ParserState",
    "RuleKind",
    "Token",
    "TokenKind",
    "LEX_RULES",
    "PARSE_RULES",
    "is_ignored",
]
