"""Core GraphQL completion types and utilities.

Shared logic for suggestion filtering, parser state traversal and schema
field lookup.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, NamedTuple

from graphql import is_composite_type, is_interface_type, is_object_type
from graphql.type import SchemaMetaFieldDef, TypeMetaFieldDef, TypeNameMetaFieldDef

from gqlcomplete.parser import ParserState, RuleKind

if TYPE_CHECKING:
    from graphql import (
        GraphQLArgument,
        GraphQLDirective,
        GraphQLEnumValue,
        GraphQLField,
        GraphQLInputField,
        GraphQLSchema,
        GraphQLType,
    )


class SuggestionType(Enum):
    """Syntactic positions that produce completion suggestions."""

    DEFINITION_KEYWORD = auto()  # query, mutation, fragment, ...
    FIELD = auto()
    ARGUMENT = auto()
    OBJECT_FIELD = auto()  # Field of an input object literal
    INPUT_VALUE = auto()  # Enum member or boolean literal
    TYPE_CONDITION = auto()  # Type after "on"
    FRAGMENT_SPREAD = auto()
    VARIABLE_TYPE = auto()
    DIRECTIVE = auto()


class Cursor(NamedTuple):
    """A zero-indexed position in the document."""

    row: int
    column: int


@dataclass
class ContextToken:
    """The token at the cursor together with the parser state it left behind."""

    start: int
    end: int
    string: str
    state: ParserState
    style: str
    row: int = 0


@dataclass
class Suggestion:
    """A completion candidate."""

    text: str
    type: GraphQLType | None = None
    description: str | None = None
    is_deprecated: bool = False
    deprecation_reason: str | None = None


@dataclass
class TypeInfo:
    """Schema context reconstructed from a parser state chain.

    Any attribute is None when it could not be resolved.
    """

    type: GraphQLType | None = None
    parent_type: GraphQLType | None = None
    input_type: GraphQLType | None = None
    directive_def: GraphQLDirective | None = None
    enum_value: GraphQLEnumValue | None = None
    field_def: GraphQLField | None = None
    arg_def: GraphQLArgument | None = None
    arg_defs: list[tuple[str, GraphQLArgument]] | None = None
    object_field_defs: dict[str, GraphQLInputField] | None = None


# Names of the introspection meta-fields
SCHEMA_META_FIELD = "__schema"
TYPE_META_FIELD = "__type"
TYPENAME_META_FIELD = "__typename"

DEFINITION_KINDS = {
    RuleKind.QUERY,
    RuleKind.SHORT_QUERY,
    RuleKind.MUTATION,
    RuleKind.SUBSCRIPTION,
    RuleKind.FRAGMENT_DEFINITION,
}

_WORD_CHAR = re.compile(r"\w")


def state_chain(state: ParserState | None) -> list[ParserState]:
    """List the states enclosing ``state``, outermost first.

    Stops at the first state without a kind (the parser's root sentinel).
    """
    chain: list[ParserState] = []
    while state is not None and state.kind is not None:
        chain.append(state)
        state = state.prev_state
    chain.reverse()
    return chain


def get_definition_state(state: ParserState | None) -> ParserState | None:
    """Find the innermost operation or fragment definition enclosing ``state``."""
    definition_state = None
    for ancestor in state_chain(state):
        if ancestor.kind in DEFINITION_KINDS:
            definition_state = ancestor
    return definition_state


def get_field_def(schema: GraphQLSchema, type_: GraphQLType | None, field_name: str) -> GraphQLField | None:
    """Resolve ``field_name`` on ``type_``, including introspection meta-fields."""
    if field_name == SCHEMA_META_FIELD and schema.query_type is type_:
        return SchemaMetaFieldDef
    if field_name == TYPE_META_FIELD and schema.query_type is type_:
        return TypeMetaFieldDef
    if field_name == TYPENAME_META_FIELD and is_composite_type(type_):
        return TypeNameMetaFieldDef
    if is_object_type(type_) or is_interface_type(type_):
        return type_.fields.get(field_name)
    return None


def is_filterable(text: str) -> bool:
    """Whether typed text should narrow suggestions.

    Whitespace and punctuation (an opening brace, a colon) never filter.
    """
    stripped = text.strip()
    return bool(stripped) and _WORD_CHAR.search(stripped) is not None


def hint_list(cursor: Cursor, token: ContextToken, suggestions: list[Suggestion]) -> list[Suggestion]:
    """Filter suggestions by the text of the token up to the cursor column.

    Matching is a case-sensitive prefix match. The order of ``suggestions``
    is preserved.
    """
    text = token.string
    if token.row == cursor.row:
        text = text[: max(0, cursor.column - token.start)]
    text = text.strip()
    if not is_filterable(text):
        return list(suggestions)
    return [suggestion for suggestion in suggestions if suggestion.text.startswith(text)]


def describe(definition: Any) -> dict[str, Any]:
    """Description and deprecation metadata of a schema definition."""
    deprecation_reason = getattr(definition, "deprecation_reason", None)
    return {
        "description": getattr(definition, "description", None),
        "is_deprecated": deprecation_reason is not None,
        "deprecation_reason": deprecation_reason,
    }
