"""Load a GraphQL schema from SDL or an introspection result."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from graphql import GraphQLError, GraphQLSchema, build_client_schema, build_schema

logger = logging.getLogger(__name__)

SDL_SUFFIXES = {".graphql", ".graphqls", ".gql"}
INTROSPECTION_SUFFIXES = {".json"}


class SchemaLoadError(ValueError):
    """Raised when a schema file cannot be read or built."""


def load_schema(path: str | Path) -> GraphQLSchema:
    """Build a schema from a file.

    ``.json`` files are read as an introspection query result, with or
    without the ``{"data": ...}`` envelope. Anything else is read as SDL.

    Raises:
        SchemaLoadError: If the file is missing or does not hold a valid schema.
    """
    schema_path = Path(path).expanduser()
    try:
        source = schema_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(f"Cannot read schema file '{schema_path}': {e}") from e

    if schema_path.suffix.lower() in INTROSPECTION_SUFFIXES:
        logger.debug("Loading introspection schema from %s", schema_path)
        return schema_from_introspection(source)

    logger.debug("Loading SDL schema from %s", schema_path)
    return schema_from_sdl(source)


def schema_from_sdl(source: str) -> GraphQLSchema:
    try:
        return build_schema(source)
    except (GraphQLError, TypeError) as e:
        raise SchemaLoadError(f"Invalid schema definition: {e}") from e


def schema_from_introspection(source: str) -> GraphQLSchema:
    try:
        data: Any = json.loads(source)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid introspection JSON: {e}") from e

    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        data = data["data"]
    if not isinstance(data, dict) or "__schema" not in data:
        raise SchemaLoadError("Introspection result has no __schema entry")

    try:
        return build_client_schema(data)
    except (GraphQLError, TypeError) as e:
        raise SchemaLoadError(f"Invalid introspection result: {e}") from e
