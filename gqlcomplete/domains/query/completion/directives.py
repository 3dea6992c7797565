"""Directive name suggestions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphql import DirectiveLocation

from gqlcomplete.parser import ParserState, RuleKind

from .core import ContextToken, Cursor, Suggestion, hint_list

if TYPE_CHECKING:
    from graphql import GraphQLDirective, GraphQLSchema


# Location a directive applies to, keyed by the construct it is attached to
DIRECTIVE_LOCATIONS = {
    RuleKind.QUERY: DirectiveLocation.QUERY,
    RuleKind.MUTATION: DirectiveLocation.MUTATION,
    RuleKind.SUBSCRIPTION: DirectiveLocation.SUBSCRIPTION,
    RuleKind.FIELD: DirectiveLocation.FIELD,
    RuleKind.ALIASED_FIELD: DirectiveLocation.FIELD,
    RuleKind.FRAGMENT_DEFINITION: DirectiveLocation.FRAGMENT_DEFINITION,
    RuleKind.FRAGMENT_SPREAD: DirectiveLocation.FRAGMENT_SPREAD,
    RuleKind.INLINE_FRAGMENT: DirectiveLocation.INLINE_FRAGMENT,
}


def can_use_directive(kind: RuleKind, directive: GraphQLDirective) -> bool:
    """Whether ``directive`` may be attached to a construct of the given kind."""
    location = DIRECTIVE_LOCATIONS.get(kind)
    return location is not None and location in directive.locations


def get_suggestions_for_directive(
    cursor: Cursor,
    token: ContextToken,
    state: ParserState,
    schema: GraphQLSchema,
) -> list[Suggestion]:
    """Suggest the directives allowed on the construct that encloses ``state``."""
    if state.prev_state is None or state.prev_state.kind is None:
        return []

    kind = state.prev_state.kind
    directives = [directive for directive in schema.directives if can_use_directive(kind, directive)]
    return hint_list(
        cursor,
        token,
        [Suggestion(text=directive.name, description=directive.description) for directive in directives],
    )
