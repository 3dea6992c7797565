"""Tests for reconstructing type context from parser states."""

import pytest
from graphql.type import SchemaMetaFieldDef, TypeNameMetaFieldDef

from gqlcomplete.domains.query.completion import Cursor, get_token_at_position, get_type_info


@pytest.fixture
def type_info_at(schema):
    """Type info at the end of a document."""

    def _type_info_at(query: str):
        lines = query.split("\n")
        token = get_token_at_position(query, Cursor(len(lines) - 1, len(lines[-1])))
        return get_type_info(schema, token.state)

    return _type_info_at


class TestOperationTypes:
    """Tests for root and fragment types."""

    def test_shorthand_query(self, type_info_at, schema):
        """A shorthand query selects on the query root."""
        info = type_info_at("{ ")
        assert info.type is schema.query_type
        assert info.parent_type is schema.query_type

    def test_mutation(self, type_info_at, schema):
        """A mutation selects on the mutation root."""
        assert type_info_at("mutation { ").parent_type is schema.mutation_type

    def test_missing_subscription_root(self, type_info_at):
        """A schema without subscriptions leaves the type unresolved."""
        info = type_info_at("subscription { ")
        assert info.type is None
        assert info.parent_type is None

    def test_fragment_definition(self, type_info_at, schema):
        """A fragment selects on its type condition."""
        info = type_info_at("fragment F on Human { ")
        assert info.parent_type is schema.get_type("Human")

    def test_inline_fragment(self, type_info_at, schema):
        """An inline fragment narrows the parent type."""
        assert type_info_at("{ hero { ... on Droid { ").parent_type is schema.get_type("Droid")

    def test_unknown_type_condition(self, type_info_at):
        """An unknown type condition leaves the parent type unresolved."""
        assert type_info_at("fragment F on Nope { ").parent_type is None


class TestFieldTypes:
    """Tests for field resolution."""

    def test_field_definition_and_type(self, type_info_at, schema):
        """A field resolves against its parent and takes its declared type."""
        info = type_info_at("{ hero")
        assert info.field_def is schema.query_type.fields["hero"]
        assert str(info.type) == "Character"

    def test_list_field_selection_uses_named_type(self, type_info_at, schema):
        """A list typed field selects on its element type."""
        info = type_info_at("{ heroes { ")
        assert str(info.type) == "[Character]"
        assert info.parent_type is schema.get_type("Character")

    def test_unknown_field(self, type_info_at):
        """An unknown field leaves definition and type unresolved."""
        info = type_info_at("{ villain")
        assert info.field_def is None
        assert info.type is None

    def test_typename_meta_field(self, type_info_at):
        """__typename resolves on any composite type."""
        assert type_info_at("{ hero { __typename").field_def is TypeNameMetaFieldDef

    def test_schema_meta_field(self, type_info_at, schema):
        """__schema resolves on the query root."""
        info = type_info_at("{ __schema { ")
        assert type_info_at("{ __schema").field_def is SchemaMetaFieldDef
        assert info.parent_type is schema.get_type("__Schema")

    def test_schema_meta_field_fields_are_suggested(self, suggest):
        """Fields of introspection types can be completed."""
        assert suggest("{ __schema { query") == ["queryType"]

    def test_aliased_field(self, type_info_at, schema):
        """An aliased field resolves the real field name."""
        info = type_info_at("{ luke: human")
        assert info.field_def is schema.query_type.fields["human"]


class TestArgumentTypes:
    """Tests for argument and input value resolution."""

    def test_argument_definitions(self, type_info_at, schema):
        """Arguments resolve the field's argument list and the named argument."""
        hero = schema.query_type.fields["hero"]
        info = type_info_at("{ hero(episode: ")
        assert [name for name, _ in info.arg_defs] == ["episode", "verbose"]
        assert info.arg_def is hero.args["episode"]
        assert info.input_type is schema.get_type("Episode")

    def test_unknown_argument(self, type_info_at):
        """An unknown argument leaves the input type unresolved."""
        info = type_info_at("{ hero(foo: ")
        assert info.arg_def is None
        assert info.input_type is None

    def test_aliased_field_arguments(self, type_info_at):
        """Arguments of an aliased field come from the real field."""
        assert [name for name, _ in type_info_at("{ h: human(").arg_defs] == ["id"]

    def test_directive_arguments(self, type_info_at, schema):
        """Arguments of a directive come from the directive."""
        info = type_info_at("{ hero @cached(")
        assert info.directive_def is schema.get_directive("cached")
        assert [name for name, _ in info.arg_defs] == ["ttl"]

    def test_enum_value(self, type_info_at, schema):
        """A known enum literal resolves to its member."""
        info = type_info_at("{ hero(episode: JEDI")
        assert info.enum_value is schema.get_type("Episode").values["JEDI"]

    def test_unknown_enum_value(self, type_info_at):
        """An unknown enum literal is unresolved."""
        assert type_info_at("{ hero(episode: SITH").enum_value is None

    def test_list_value_element_type(self, type_info_at, schema):
        """A list literal descends to the element type."""
        assert type_info_at("{ heroes(episodes: [").input_type is schema.get_type("Episode")

    def test_input_object_fields(self, type_info_at):
        """An input object literal resolves its fields and the named field's type."""
        info = type_info_at("mutation { createReview(review: { stars: ")
        assert list(info.object_field_defs) == ["stars", "commentary", "episode"]
        assert str(info.input_type) == "Int!"

    def test_variable_type(self, type_info_at, schema):
        """A named type in a variable definition resolves by name."""
        assert type_info_at("query Q($id: Episode").type is schema.get_type("Episode")


class TestResolutionIsPure:
    """Tests for resolving the same state more than once."""

    def test_same_state_resolves_identically(self, schema):
        """Two resolutions agree and leave the state chain untouched."""
        query = "{ hero(episode: "
        token = get_token_at_position(query, Cursor(0, len(query)))
        before = token.state.snapshot()

        first = get_type_info(schema, token.state)
        second = get_type_info(schema, token.state)

        assert first == second
        assert first.input_type is schema.get_type("Episode")
        assert token.state == before
