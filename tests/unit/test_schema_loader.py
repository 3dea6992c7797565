"""Tests for loading schemas from SDL and introspection files."""

from __future__ import annotations

import json

import pytest
from graphql import build_schema, get_introspection_query, graphql_sync

from gqlcomplete.domains.schema import SchemaLoadError, load_schema

SDL = """
type Query {
  hello(name: String): String
}
"""


def _introspection_result() -> dict:
    result = graphql_sync(build_schema(SDL), get_introspection_query())
    return result.data


class TestLoadSchema:
    """Tests for load_schema."""

    def test_sdl_file(self, tmp_path):
        """A .graphql file is read as SDL."""
        path = tmp_path / "schema.graphql"
        path.write_text(SDL)
        schema = load_schema(path)
        assert "hello" in schema.query_type.fields

    def test_unknown_suffix_is_sdl(self, tmp_path):
        """Files without a known suffix are read as SDL."""
        path = tmp_path / "schema.txt"
        path.write_text(SDL)
        assert load_schema(str(path)).query_type.name == "Query"

    def test_introspection_file(self, tmp_path):
        """A .json file is read as an introspection result."""
        path = tmp_path / "schema.json"
        path.write_text(json.dumps(_introspection_result()))
        schema = load_schema(path)
        assert "hello" in schema.query_type.fields

    def test_introspection_with_data_envelope(self, tmp_path):
        """The {"data": ...} wrapper of a response is accepted."""
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"data": _introspection_result()}))
        assert "hello" in load_schema(path).query_type.fields

    def test_missing_file(self, tmp_path):
        """A missing file raises SchemaLoadError."""
        with pytest.raises(SchemaLoadError, match="Cannot read schema file"):
            load_schema(tmp_path / "missing.graphql")

    def test_invalid_sdl(self, tmp_path):
        """Malformed SDL raises SchemaLoadError."""
        path = tmp_path / "schema.graphql"
        path.write_text("type Query {")
        with pytest.raises(SchemaLoadError, match="Invalid schema definition"):
            load_schema(path)

    def test_invalid_json(self, tmp_path):
        """Malformed JSON raises SchemaLoadError."""
        path = tmp_path / "schema.json"
        path.write_text("{not json")
        with pytest.raises(SchemaLoadError, match="Invalid introspection JSON"):
            load_schema(path)

    def test_json_without_schema(self, tmp_path):
        """JSON that is not an introspection result raises SchemaLoadError."""
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"data": {"hello": "world"}}))
        with pytest.raises(SchemaLoadError, match="no __schema entry"):
            load_schema(path)

    def test_error_is_a_value_error(self):
        """Callers may catch ValueError."""
        assert issubclass(SchemaLoadError, ValueError)
