"""Reconstruct schema type context from a parser state chain."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphql import (
    get_named_type,
    get_nullable_type,
    is_enum_type,
    is_input_object_type,
    is_list_type,
)

from gqlcomplete.parser import ParserState, RuleKind

from .core import TypeInfo, get_field_def, state_chain

if TYPE_CHECKING:
    from graphql import GraphQLArgument, GraphQLSchema


def get_type_info(schema: GraphQLSchema, token_state: ParserState) -> TypeInfo:
    """Collect the type context valid at ``token_state``.

    States are folded from the outermost (the document) inwards, so each
    step only sees what enclosing constructs already established.
    """
    info = TypeInfo()

    for state in state_chain(token_state):
        kind = state.kind

        if kind in (RuleKind.QUERY, RuleKind.SHORT_QUERY):
            info.type = schema.query_type
        elif kind == RuleKind.MUTATION:
            info.type = schema.mutation_type
        elif kind == RuleKind.SUBSCRIPTION:
            info.type = schema.subscription_type
        elif kind in (RuleKind.INLINE_FRAGMENT, RuleKind.FRAGMENT_DEFINITION):
            if state.type:
                info.type = schema.get_type(state.type)
        elif kind in (RuleKind.FIELD, RuleKind.ALIASED_FIELD):
            if info.type is None or not state.name:
                info.field_def = None
            else:
                info.field_def = (
                    get_field_def(schema, info.parent_type, state.name) if info.parent_type is not None else None
                )
                info.type = info.field_def.type if info.field_def is not None else None
        elif kind == RuleKind.SELECTION_SET:
            info.parent_type = get_named_type(info.type)
        elif kind == RuleKind.DIRECTIVE:
            info.directive_def = schema.get_directive(state.name) if state.name else None
        elif kind == RuleKind.ARGUMENTS:
            info.arg_defs = _argument_definitions(schema, state, info)
        elif kind == RuleKind.ARGUMENT:
            info.arg_def = None
            for arg_name, arg_def in info.arg_defs or []:
                if arg_name == state.name:
                    info.arg_def = arg_def
                    break
            info.input_type = info.arg_def.type if info.arg_def is not None else None
        elif kind == RuleKind.ENUM_VALUE:
            enum_type = get_named_type(info.input_type)
            info.enum_value = enum_type.values.get(state.name) if is_enum_type(enum_type) and state.name else None
        elif kind == RuleKind.LIST_VALUE:
            nullable_type = get_nullable_type(info.input_type)
            info.input_type = nullable_type.of_type if is_list_type(nullable_type) else None
        elif kind == RuleKind.OBJECT_VALUE:
            object_type = get_named_type(info.input_type)
            info.object_field_defs = object_type.fields if is_input_object_type(object_type) else None
        elif kind == RuleKind.OBJECT_FIELD:
            object_field = (
                info.object_field_defs.get(state.name) if state.name and info.object_field_defs is not None else None
            )
            info.input_type = object_field.type if object_field is not None else None
        elif kind == RuleKind.NAMED_TYPE:
            if state.name:
                info.type = schema.get_type(state.name)

    return info


def _argument_definitions(
    schema: GraphQLSchema, state: ParserState, info: TypeInfo
) -> list[tuple[str, GraphQLArgument]] | None:
    """Arguments accepted by the field or directive that owns an argument list."""
    owner = state.prev_state
    if owner is None:
        return None

    if owner.kind == RuleKind.FIELD:
        return list(info.field_def.args.items()) if info.field_def is not None else None

    if owner.kind == RuleKind.DIRECTIVE:
        return list(info.directive_def.args.items()) if info.directive_def is not None else None

    if owner.kind == RuleKind.ALIASED_FIELD:
        if not owner.name or info.parent_type is None:
            return None
        field = get_field_def(schema, info.parent_type, owner.name)
        return list(field.args.items()) if field is not None else None

    return []
