"""CLI command handlers for gqlcomplete."""

from __future__ import annotations

import json
import sys
from typing import Any

from rich.console import Console
from rich.table import Table

from .domains.query.completion import Cursor, Suggestion, get_autocomplete_suggestions
from .domains.schema import SchemaLoadError, load_schema
from .domains.settings import OUTPUT_FORMAT_SETTING, SCHEMA_PATH_SETTING, SettingsError, SettingsStore, load_settings


def suggestion_to_dict(suggestion: Suggestion) -> dict[str, Any]:
    return {
        "text": suggestion.text,
        "type": str(suggestion.type) if suggestion.type is not None else None,
        "description": suggestion.description,
        "isDeprecated": suggestion.is_deprecated,
        "deprecationReason": suggestion.deprecation_reason,
    }


def _end_of_document(query: str) -> Cursor:
    lines = query.split("\n")
    return Cursor(row=len(lines) - 1, column=len(lines[-1]))


def _read_query(args: Any) -> str | None:
    if args.query is not None:
        return args.query
    if args.file == "-":
        return sys.stdin.read()
    if args.file:
        try:
            with open(args.file, encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            print(f"Error: File '{args.file}' not found.")
            return None
        except OSError as e:
            print(f"Error reading file: {e}")
            return None
    print("Error: Either --query or --file must be provided.")
    return None


def _output_table(suggestions: list[Suggestion], console: Console) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Suggestion", style="cyan", no_wrap=True)
    table.add_column("Type", style="magenta")
    table.add_column("Description")
    table.add_column("Deprecated", style="yellow")

    for suggestion in suggestions:
        deprecated = ""
        if suggestion.is_deprecated:
            deprecated = suggestion.deprecation_reason or "yes"
        table.add_row(
            suggestion.text,
            str(suggestion.type) if suggestion.type is not None else "",
            suggestion.description or "",
            deprecated,
        )
    console.print(table)


def cmd_complete(args: Any, *, console: Console | None = None) -> int:
    """Print completion suggestions for a document at a cursor position.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    settings = load_settings()

    schema_path = args.schema or settings.get(SCHEMA_PATH_SETTING)
    if not schema_path:
        print(f"Error: No schema given. Pass --schema or set '{SCHEMA_PATH_SETTING}' in settings.")
        return 1

    query = _read_query(args)
    if query is None:
        return 1

    try:
        schema = load_schema(schema_path)
    except SchemaLoadError as e:
        print(f"Error: {e}")
        return 1

    cursor = _end_of_document(query)
    if args.row is not None:
        cursor = cursor._replace(row=args.row)
    if args.column is not None:
        cursor = cursor._replace(column=args.column)

    suggestions = get_autocomplete_suggestions(schema, query, cursor)

    output_format = args.format or settings.get(OUTPUT_FORMAT_SETTING) or "table"
    if output_format == "json":
        print(json.dumps([suggestion_to_dict(s) for s in suggestions], indent=2))
    else:
        _output_table(suggestions, console or Console())
    return 0


def cmd_settings_list(args: Any) -> int:
    for key, value in load_settings().items():
        print(f"{key} = {json.dumps(value)}")
    return 0


def cmd_settings_set(args: Any) -> int:
    try:
        SettingsStore().set(args.key, args.value)
    except SettingsError as e:
        print(f"Error: {e}")
        return 1
    print(f"{args.key} = {json.dumps(args.value)}")
    return 0


def cmd_settings_unset(args: Any) -> int:
    if not SettingsStore().delete(args.key):
        print(f"Setting '{args.key}' is not set.")
    return 0
