"""Command-line interface."""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from pathlib import Path

from dotforge.paths import get_version

__all__ = ["build_parser", "main"]


class _HelpFormatter(argparse.HelpFormatter):
    def add_usage(self, usage, actions, groups, prefix=None):
        if prefix is None:
            prefix = "Usage: "
        super().add_usage(usage, actions, groups, prefix)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="dotforge",
        description="A powerful symlink management tool designed as a modern "
        "alternative to GNU Stow",
        formatter_class=_HelpFormatter,
    )
    parser.add_argument(
        "-I", "--interactive", action="store_true", help="Use interactive mode"
    )
    parser.add_argument("-V", "--version", action="version", version=f"dotforge {get_version()}")

    commands = parser.add_subparsers(dest="command")

    heat = commands.add_parser(
        "heat", help="Heat (stage) files for symlinking", formatter_class=_HelpFormatter
    )
    heat.add_argument("files", nargs="*", type=Path, help="Files to heat")

    commands.add_parser(
        "forge", help="Create the symlinks for all heated files", formatter_class=_HelpFormatter
    )

    cool = commands.add_parser(
        "cool", help="Remove symlinks for specific files", formatter_class=_HelpFormatter
    )
    cool.add_argument("files", nargs="*", type=Path, help="Files to cool")

    profile = commands.add_parser(
        "profile", help="Manage profiles", formatter_class=_HelpFormatter
    )
    actions = profile.add_subparsers(dest="action", required=True)
    create = actions.add_parser(
        "create", help="Create a new profile", formatter_class=_HelpFormatter
    )
    create.add_argument("name", help="Profile name")
    actions.add_parser(
        "list", help="List available profiles", formatter_class=_HelpFormatter
    )
    switch = actions.add_parser(
        "switch", help="Switch to a profile", formatter_class=_HelpFormatter
    )
    switch.add_argument("name", help="Profile name")

    return parser


def _format_files(files: Sequence[Path]) -> str:
    return json.dumps([str(path) for path in files])


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = build_parser().parse_args(argv)

    if args.command == "heat":
        print(f"Heating files: {_format_files(args.files)}")
    elif args.command == "forge":
        print("Forging symlinks")
    elif args.command == "cool":
        print(f"Cooling files: {_format_files(args.files)}")
    elif args.command == "profile":
        if args.action == "create":
            print(f"Creating profile: {args.name}")
        elif args.action == "list":
            print("Listing profiles")
        else:
            print(f"Switching to profile: {args.name}")
    elif args.interactive:
        print("Starting interactive mode")
    else:
        print("No command provided. Use --help for more information.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())