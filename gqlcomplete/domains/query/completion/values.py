"""Enum and boolean literal suggestions."""

from __future__ import annotations

from graphql import GraphQLBoolean, get_named_type, is_enum_type

from .core import ContextToken, Cursor, Suggestion, TypeInfo, describe, hint_list


def get_suggestions_for_input_values(cursor: Cursor, token: ContextToken, type_info: TypeInfo) -> list[Suggestion]:
    """Suggest the enum members or boolean literals the expected input type accepts."""
    named_input_type = get_named_type(type_info.input_type)

    if is_enum_type(named_input_type):
        return hint_list(
            cursor,
            token,
            [
                Suggestion(text=value_name, type=named_input_type, **describe(value))
                for value_name, value in named_input_type.values.items()
            ],
        )

    if named_input_type is GraphQLBoolean:
        return hint_list(
            cursor,
            token,
            [
                Suggestion(text="true", type=GraphQLBoolean, description="Not false."),
                Suggestion(text="false", type=GraphQLBoolean, description="Not true."),
            ],
        )

    return []
