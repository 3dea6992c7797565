"""Type suggestions for variable definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphql import is_input_type

from .core import ContextToken, Cursor, Suggestion, hint_list

if TYPE_CHECKING:
    from graphql import GraphQLSchema


def get_suggestions_for_variable_definition(cursor: Cursor, token: ContextToken, schema: GraphQLSchema) -> list[Suggestion]:
    """Suggest every schema type a variable can be declared with."""
    input_types = [type_ for type_ in schema.type_map.values() if is_input_type(type_)]
    return hint_list(
        cursor,
        token,
        [Suggestion(text=type_.name, description=type_.description) for type_ in input_types],
    )
