"""Fragment type condition and fragment spread suggestions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from graphql import (
    FragmentDefinitionNode,
    NamedTypeNode,
    NameNode,
    SelectionSetNode,
    do_types_overlap,
    get_named_type,
    is_abstract_type,
    is_composite_type,
)

from gqlcomplete.parser import CharacterStream, ParserState, RuleKind

from .core import ContextToken, Cursor, Suggestion, TypeInfo, get_definition_state, hint_list
from .token import run_online_parser

if TYPE_CHECKING:
    from graphql import GraphQLNamedType, GraphQLSchema


def get_suggestions_for_fragment_type_conditions(
    cursor: Cursor,
    token: ContextToken,
    type_info: TypeInfo,
    schema: GraphQLSchema,
) -> list[Suggestion]:
    """Suggest the types a fragment inside the current selection can be on."""
    parent_type = type_info.parent_type
    possible_types: list[GraphQLNamedType]

    if parent_type is not None:
        if is_abstract_type(parent_type):
            # Both the possible object types and the interfaces they implement.
            possible_obj_types = schema.get_possible_types(parent_type)
            possible_ifaces: dict[str, GraphQLNamedType] = {}
            for obj_type in possible_obj_types:
                for iface in obj_type.interfaces:
                    possible_ifaces[iface.name] = iface
            possible_types = _unique_by_name([*possible_obj_types, *possible_ifaces.values()])
        else:
            # A concrete parent can only be spread on itself.
            possible_types = [parent_type]
    else:
        possible_types = [type_ for type_ in schema.type_map.values() if is_composite_type(type_)]

    return hint_list(
        cursor,
        token,
        [
            Suggestion(text=type_.name, description=get_named_type(type_).description or "")
            for type_ in possible_types
        ],
    )


def _unique_by_name(types: list[GraphQLNamedType]) -> list[GraphQLNamedType]:
    seen: set[str] = set()
    unique: list[GraphQLNamedType] = []
    for type_ in types:
        if type_.name not in seen:
            seen.add(type_.name)
            unique.append(type_)
    return unique


def get_suggestions_for_fragment_spread(
    cursor: Cursor,
    token: ContextToken,
    type_info: TypeInfo,
    schema: GraphQLSchema,
    query_text: str,
) -> list[Suggestion]:
    """Suggest fragments defined in the document that can be spread here.

    A fragment is offered when its type condition names a known composite
    type that overlaps the enclosing selection's type. A fragment never
    offers itself.
    """
    type_map = schema.type_map
    definition_state = get_definition_state(token.state)
    parent_type = type_info.parent_type

    def is_relevant(fragment: FragmentDefinitionNode) -> bool:
        fragment_type = type_map.get(fragment.type_condition.name.value)
        if fragment_type is None:
            return False
        if (
            definition_state is not None
            and definition_state.kind == RuleKind.FRAGMENT_DEFINITION
            and definition_state.name == fragment.name.value
        ):
            return False
        return (
            is_composite_type(parent_type)
            and is_composite_type(fragment_type)
            and do_types_overlap(schema, parent_type, fragment_type)
        )

    relevant_fragments = [fragment for fragment in get_fragment_definitions(query_text) if is_relevant(fragment)]

    return hint_list(
        cursor,
        token,
        [
            Suggestion(
                text=fragment.name.value,
                type=type_map[fragment.type_condition.name.value],
                description=f"fragment {fragment.name.value} on {fragment.type_condition.name.value}",
            )
            for fragment in relevant_fragments
        ],
    )


@dataclass
class FragmentCollector:
    """Collects named fragment definitions while the document is parsed."""

    type_conditions: dict[str, str] = field(default_factory=dict)

    def observe(self, stream: CharacterStream, state: ParserState, style: str, index: int) -> None:
        definition_state = get_definition_state(state)
        if (
            definition_state is not None
            and definition_state.kind == RuleKind.FRAGMENT_DEFINITION
            and definition_state.name
            and definition_state.type
        ):
            self.type_conditions.setdefault(definition_state.name, definition_state.type)


def get_fragment_definitions(query_text: str) -> list[FragmentDefinitionNode]:
    """Find every fragment definition in the document that has a name and a type condition.

    Only names and type conditions are recovered; selection sets are left
    empty. When a name is defined twice the first definition wins.
    """
    collector = FragmentCollector()
    run_online_parser(query_text, collector.observe)

    return [
        FragmentDefinitionNode(
            name=NameNode(value=fragment_name),
            type_condition=NamedTypeNode(name=NameNode(value=type_condition)),
            selection_set=SelectionSetNode(selections=[]),
        )
        for fragment_name, type_condition in collector.type_conditions.items()
    ]
