#!/usr/bin/env python3
"""gqlcomplete - Schema-aware GraphQL autocompletion."""

from __future__ import annotations

import argparse
import logging
import os
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gqlcomplete",
        description="Schema-aware autocompletion for GraphQL documents",
        epilog="Example: gqlcomplete complete --schema schema.graphql --query '{ us' --row 0 --column 4",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--settings",
        metavar="PATH",
        help="Path to settings JSON file (overrides ~/.gqlcomplete/settings.json)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debug output to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    complete_parser = subparsers.add_parser("complete", help="Suggest completions at a cursor position")
    complete_parser.add_argument("--schema", "-s", help="Schema file (SDL or introspection JSON)")
    complete_parser.add_argument("--query", "-q", help="GraphQL document text")
    complete_parser.add_argument("--file", "-f", help="GraphQL document file ('-' reads stdin)")
    complete_parser.add_argument(
        "--row",
        "-r",
        type=int,
        help="Zero-indexed cursor row (default: last line)",
    )
    complete_parser.add_argument(
        "--column",
        "-c",
        type=int,
        help="Zero-indexed cursor column (default: end of the row)",
    )
    complete_parser.add_argument(
        "--format",
        "-o",
        choices=["table", "json"],
        help="Output format (default: the 'output_format' setting, else table)",
    )

    settings_parser = subparsers.add_parser("settings", help="Manage saved settings")
    settings_subparsers = settings_parser.add_subparsers(dest="settings_command", help="Settings commands")
    settings_subparsers.add_parser("list", help="Show all settings")
    set_parser = settings_subparsers.add_parser("set", help="Change a setting")
    set_parser.add_argument("key", help="Setting name")
    set_parser.add_argument("value", help="Setting value")
    unset_parser = settings_subparsers.add_parser("unset", help="Reset a setting to its default")
    unset_parser.add_argument("key", help="Setting name")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.settings:
        os.environ["GQLCOMPLETE_SETTINGS_PATH"] = str(args.settings)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    from .commands import cmd_complete, cmd_settings_list, cmd_settings_set, cmd_settings_unset

    if args.command == "complete":
        return cmd_complete(args)

    if args.command == "settings":
        if args.settings_command == "list":
            return cmd_settings_list(args)
        if args.settings_command == "set":
            return cmd_settings_set(args)
        if args.settings_command == "unset":
            return cmd_settings_unset(args)
        print("Error: Choose a settings command: list, set, unset")
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
