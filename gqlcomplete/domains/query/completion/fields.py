"""Field name suggestions inside selection sets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphql import is_abstract_type, is_interface_type, is_object_type
from graphql.type import SchemaMetaFieldDef, TypeMetaFieldDef, TypeNameMetaFieldDef

from .core import (
    SCHEMA_META_FIELD,
    TYPE_META_FIELD,
    TYPENAME_META_FIELD,
    ContextToken,
    Cursor,
    Suggestion,
    TypeInfo,
    describe,
    hint_list,
)

if TYPE_CHECKING:
    from graphql import GraphQLField, GraphQLSchema


def get_suggestions_for_field_names(
    cursor: Cursor,
    token: ContextToken,
    type_info: TypeInfo,
    schema: GraphQLSchema,
) -> list[Suggestion]:
    """Suggest the fields of the enclosing selection set's type.

    Abstract types also offer ``__typename``; the query root also offers
    ``__schema`` and ``__type``.
    """
    parent_type = type_info.parent_type
    if parent_type is None:
        return []

    fields: list[tuple[str, GraphQLField]] = []
    if is_object_type(parent_type) or is_interface_type(parent_type):
        fields.extend(parent_type.fields.items())
    if is_abstract_type(parent_type):
        fields.append((TYPENAME_META_FIELD, TypeNameMetaFieldDef))
    if parent_type is schema.query_type:
        fields.append((SCHEMA_META_FIELD, SchemaMetaFieldDef))
        fields.append((TYPE_META_FIELD, TypeMetaFieldDef))

    return hint_list(
        cursor,
        token,
        [Suggestion(text=field_name, type=field.type, **describe(field)) for field_name, field in fields],
    )
