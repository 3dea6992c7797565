"""Schema loading."""

from .loader import SchemaLoadError, load_schema, schema_from_introspection, schema_from_sdl

__all__ = ["SchemaLoadError", "load_schema", "schema_from_introspection", "schema_from_sdl"]
