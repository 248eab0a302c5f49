"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys

from dexbuild import __version__
from dexbuild.config import get_settings
from dexbuild.flows.build import build_all, store


def positive_int(value: str) -> int:
    """argparse type for ids: an integer >= 1."""
    try:
        number = int(value)
    except ValueError:
        msg = f"expected an integer, got {value!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if number < 1:
        msg = f"must be at least 1, got {number}"
        raise argparse.ArgumentTypeError(msg)
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="dexbuild",
        description="Generate per-generation species datasets from PokeAPI",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'build' command - fetch species and write every generation's dataset
    build_parser = subparsers.add_parser("build", help="Fetch species and write datasets")
    build_parser.add_argument(
        "--max-id",
        type=positive_int,
        default=None,
        help="Highest species id to fetch (default: max_id from settings)",
    )
    build_parser.add_argument(
        "--generation",
        dest="generations",
        action="append",
        default=None,
        help="Generation tag to write; repeatable (default: all from settings)",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show settings and existing datasets")

    return parser


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command: fetch, patch and write datasets."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    try:
        counts = build_all(max_id=args.max_id, generations=args.generations)
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Done: {counts}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"API: {settings.api_base_url}")
    print(f"Max id: {settings.max_id}")
    print(f"Output: {settings.output_dir}")
    print(f"Patches: {settings.patch_dir}")

    for generation in settings.generations:
        meta = store.read_meta(generation)
        if meta:
            print(f"  {generation}: {meta.get('count', '?')} species ({meta.get('generated_at', '?')})")
        else:
            print(f"  {generation}: not built")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "build": cmd_build,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
