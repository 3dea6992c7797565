"""Main GraphQL completion engine.

Orchestrates token location, type context resolution and suggestion
generation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gqlcomplete.parser import ParserState, RuleKind

from .arguments import get_suggestions_for_arguments, get_suggestions_for_object_fields
from .core import ContextToken, Cursor, Suggestion, SuggestionType, TypeInfo, hint_list
from .directives import get_suggestions_for_directive
from .fields import get_suggestions_for_field_names
from .fragments import get_suggestions_for_fragment_spread, get_suggestions_for_fragment_type_conditions
from .token import get_token_at_position
from .type_info import get_type_info
from .values import get_suggestions_for_input_values
from .variables import get_suggestions_for_variable_definition

if TYPE_CHECKING:
    from graphql import GraphQLSchema

logger = logging.getLogger(__name__)

# Keywords that can start a top-level definition
DEFINITION_KEYWORDS = ["query", "mutation", "subscription", "fragment", "{"]

_SELECTION_KINDS = (RuleKind.SELECTION_SET, RuleKind.FIELD, RuleKind.ALIASED_FIELD)

# Rules that only choose between named, list and non-null type syntax
_TYPE_WRAPPER_KINDS = (RuleKind.TYPE, RuleKind.NON_NULL_TYPE)


def _enclosing_kind(state: ParserState) -> RuleKind | None:
    """Kind of the construct around ``state``, looking through type wrappers."""
    enclosing = state.prev_state
    while enclosing is not None and enclosing.kind in _TYPE_WRAPPER_KINDS:
        enclosing = enclosing.prev_state
    return enclosing.kind if enclosing is not None else None


def get_context(state: ParserState) -> SuggestionType | None:
    """Classify the cursor position from the innermost valid parser state.

    Returns None when nothing should be suggested.
    """
    kind = state.kind
    step = state.step

    if kind == RuleKind.DOCUMENT:
        return SuggestionType.DEFINITION_KEYWORD

    if kind in _SELECTION_KINDS:
        return SuggestionType.FIELD

    if kind == RuleKind.ARGUMENTS or (kind == RuleKind.ARGUMENT and step == 0):
        return SuggestionType.ARGUMENT

    if kind == RuleKind.OBJECT_VALUE or (kind == RuleKind.OBJECT_FIELD and step == 0):
        return SuggestionType.OBJECT_FIELD

    if (
        kind == RuleKind.ENUM_VALUE
        or (kind == RuleKind.LIST_VALUE and step == 1)
        or (kind == RuleKind.OBJECT_FIELD and step == 2)
        or (kind == RuleKind.ARGUMENT and step == 2)
    ):
        return SuggestionType.INPUT_VALUE

    if (kind == RuleKind.TYPE_CONDITION and step == 1) or (
        kind == RuleKind.NAMED_TYPE and _enclosing_kind(state) == RuleKind.TYPE_CONDITION
    ):
        return SuggestionType.TYPE_CONDITION

    if kind == RuleKind.FRAGMENT_SPREAD and step == 1:
        return SuggestionType.FRAGMENT_SPREAD

    if (
        (kind == RuleKind.VARIABLE_DEFINITION and step == 2)
        or (kind == RuleKind.LIST_TYPE and step == 1)
        or (
            kind == RuleKind.NAMED_TYPE
            and _enclosing_kind(state) in (RuleKind.VARIABLE_DEFINITION, RuleKind.LIST_TYPE)
        )
    ):
        return SuggestionType.VARIABLE_TYPE

    if kind == RuleKind.DIRECTIVE:
        return SuggestionType.DIRECTIVE

    return None


def get_autocomplete_suggestions(
    schema: GraphQLSchema,
    query_text: str,
    cursor: Cursor,
) -> list[Suggestion]:
    """Get completion suggestions for the given document and cursor position.

    Args:
        schema: Schema the document is written against
        query_text: The full document text
        cursor: Zero-indexed row and column of the cursor

    Returns:
        List of suggestions, empty when nothing applies
    """
    token = get_token_at_position(query_text, cursor)

    state: ParserState | None = token.state
    if state.kind == RuleKind.INVALID:
        state = state.prev_state
    if state is None:
        return []

    suggestion_type = get_context(state)
    if suggestion_type is None:
        logger.debug("No suggestions at %s (kind=%s, step=%s)", cursor, state.kind, state.step)
        return []

    type_info = get_type_info(schema, token.state)
    suggestions = _generate(suggestion_type, schema, query_text, cursor, token, state, type_info)
    logger.debug("%d %s suggestions at %s", len(suggestions), suggestion_type.name, cursor)
    return suggestions


def _generate(
    suggestion_type: SuggestionType,
    schema: GraphQLSchema,
    query_text: str,
    cursor: Cursor,
    token: ContextToken,
    state: ParserState,
    type_info: TypeInfo,
) -> list[Suggestion]:
    if suggestion_type == SuggestionType.DEFINITION_KEYWORD:
        return hint_list(cursor, token, [Suggestion(text=keyword) for keyword in DEFINITION_KEYWORDS])

    if suggestion_type == SuggestionType.FIELD:
        return get_suggestions_for_field_names(cursor, token, type_info, schema)

    if suggestion_type == SuggestionType.ARGUMENT:
        return get_suggestions_for_arguments(cursor, token, type_info)

    if suggestion_type == SuggestionType.OBJECT_FIELD:
        return get_suggestions_for_object_fields(cursor, token, type_info)

    if suggestion_type == SuggestionType.INPUT_VALUE:
        return get_suggestions_for_input_values(cursor, token, type_info)

    if suggestion_type == SuggestionType.TYPE_CONDITION:
        return get_suggestions_for_fragment_type_conditions(cursor, token, type_info, schema)

    if suggestion_type == SuggestionType.FRAGMENT_SPREAD:
        return get_suggestions_for_fragment_spread(cursor, token, type_info, schema, query_text)

    if suggestion_type == SuggestionType.VARIABLE_TYPE:
        return get_suggestions_for_variable_definition(cursor, token, schema)

    if suggestion_type == SuggestionType.DIRECTIVE:
        return get_suggestions_for_directive(cursor, token, state, schema)

    return []
