"""Argument and input object field name suggestions."""

from __future__ import annotations

from .core import ContextToken, Cursor, Suggestion, TypeInfo, hint_list


def get_suggestions_for_arguments(cursor: Cursor, token: ContextToken, type_info: TypeInfo) -> list[Suggestion]:
    """Suggest the arguments of the field or directive being called."""
    if type_info.arg_defs is None:
        return []
    return hint_list(
        cursor,
        token,
        [
            Suggestion(text=arg_name, type=arg_def.type, description=arg_def.description)
            for arg_name, arg_def in type_info.arg_defs
        ],
    )


def get_suggestions_for_object_fields(cursor: Cursor, token: ContextToken, type_info: TypeInfo) -> list[Suggestion]:
    """Suggest the fields of the input object literal being written."""
    if type_info.object_field_defs is None:
        return []
    return hint_list(
        cursor,
        token,
        [
            Suggestion(text=field_name, type=field.type, description=field.description)
            for field_name, field in type_info.object_field_defs.items()
        ],
    )
