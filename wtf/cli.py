"""Command-line entry point: global options and the alias, setup and wizard commands."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Sequence

from wtf.aliases import add_alias, get_alias_dir, list_aliases, quick_setup, remove_alias
from wtf.wizard import Prompter, WizardAborted, WizardCancelled, run_wizard

VERSION = "1.2.0"

_SHORT = "What's The Function - A CLI tool to find shell commands using natural language"
_LONG = """WTF (What's The Function) helps you discover shell commands by searching through a curated database
of common command-line tools and their usage examples. Simply describe what you want to do
in natural language, and WTF will suggest relevant commands.

When you can't remember a command, you think "What's The Function I need?" - that's WTF! 😄"""

_ALIAS_ADD_EPILOG = """Examples:
  wtf alias add hey
  wtf alias add miko
  wtf alias add cmd-help"""

_SETUP_EPILOG = """Examples:
  wtf setup hey     # Creates 'hey' command
  wtf setup miko    # Creates 'miko' command
  wtf setup cmd     # Creates 'cmd' command

This automatically handles all the complexity of setting up aliases for your system."""

_WIZARD_EPILOG = """Examples:
  wtf wizard tar      # Interactive tar archive builder
  wtf wizard find     # Interactive find command builder
  wtf wizard ffmpeg   # Interactive ffmpeg converter
  wtf wizard          # Show available wizards"""


class _StringSliceAction(argparse.Action):
    """Collect comma-separated values, accumulating over repeated options."""

    def __call__(self, parser, namespace, values, option_string=None):
        current = list(getattr(namespace, self.dest, None) or [])
        current.extend(part.strip() for part in values.split(",") if part.strip())
        setattr(namespace, self.dest, current)


def _is_windows() -> bool:
    return os.name == "nt"


def _executable_path() -> str:
    return os.path.abspath(sys.argv[0]) if sys.argv and sys.argv[0] else sys.executable


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``wtf`` command and its subcommands."""
    parser = argparse.ArgumentParser(
        prog="wtf",
        description=_SHORT + "\n\n" + _LONG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"wtf version {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("-d", "--database", default="", help="Path to custom database file")
    parser.add_argument(
        "-l",
        "--limit",
        type=int,
        default=0,
        help="Maximum number of results to display (default: 5)",
    )
    parser.add_argument(
        "-p",
        "--platform",
        action=_StringSliceAction,
        default=[],
        help="Filter by platform (linux, macos, windows, cross-platform)",
    )
    parser.add_argument(
        "-a",
        "--all-platforms",
        action="store_true",
        help="Show commands from all platforms (ignore platform filtering)",
    )
    parser.add_argument(
        "--no-cross-platform",
        action="store_true",
        help="Exclude cross-platform commands when using platform filter",
    )

    commands = parser.add_subparsers(dest="command", metavar="<command>")

    alias = commands.add_parser(
        "alias",
        help="Manage command aliases for WTF",
        description=(
            "Easily set up custom command names like 'hey', 'miko', or any name you prefer.\n"
            "WTF will automatically create the necessary files and setup for your system."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    alias_commands = alias.add_subparsers(dest="alias_command", metavar="<action>")
    alias_add = alias_commands.add_parser(
        "add",
        help="Add a new alias for WTF",
        epilog=_ALIAS_ADD_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    alias_add.add_argument("name")
    alias_commands.add_parser("list", help="List all configured aliases")
    alias_remove = alias_commands.add_parser("remove", help="Remove an alias")
    alias_remove.add_argument("name")

    setup = commands.add_parser(
        "setup",
        help="Quick setup for WTF with custom command name",
        description=(
            "One-command setup for WTF. This creates everything you need "
            "to use a custom command name."
        ),
        epilog=_SETUP_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    setup.add_argument("alias_name")

    wizard = commands.add_parser(
        "wizard",
        help="Interactive command builder for complex commands",
        description=(
            "Launch an interactive wizard to build complex commands step-by-step.\n"
            "Supports popular commands like tar, find, ffmpeg, and more."
        ),
        epilog=_WIZARD_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    wizard.add_argument("name", nargs="?", default=None)

    return parser


def _run_alias(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    windows = _is_windows()
    alias_dir = get_alias_dir(Path.home(), windows)

    if args.alias_command == "add":
        try:
            add_alias(args.name, _executable_path(), alias_dir, windows)
        except OSError as exc:
            print(f"❌ Error adding alias '{args.name}': {exc}")
            return 0
        print(f"✅ Added alias '{args.name}' successfully!")
        print(f'💡 You can now use: {args.name} "your query"')
        return 0

    if args.alias_command == "list":
        aliases = list_aliases(alias_dir, windows)
        if not aliases:
            print("No aliases configured yet.")
            print("💡 Add one with: wtf alias add hey")
            return 0
        print("Configured aliases:")
        for name in aliases:
            print(f"  • {name}")
        return 0

    if args.alias_command == "remove":
        try:
            remove_alias(args.name, alias_dir, windows)
        except OSError as exc:
            print(f"❌ Error removing alias '{args.name}': {exc}")
            return 0
        print(f"✅ Removed alias '{args.name}'")
        return 0

    parser.parse_args(["alias", "--help"])
    return 0


def _run_setup(alias_name: str) -> int:
    windows = _is_windows()
    print(f"🚀 Setting up '{alias_name}' as your WTF command...\n")
    try:
        quick_setup(alias_name, _executable_path(), Path.home(), windows)
    except OSError as exc:
        print(f"❌ Setup failed: {exc}")
        return 0

    print("🎉 Setup complete!\n")
    print(f'✅ You can now use: {alias_name} "your query"')
    print(f'💡 Example: {alias_name} "compress files"')
    if windows:
        print(
            "\n📝 Note: You may need to restart your command prompt "
            "or add the alias directory to PATH"
        )
    else:
        print("\n📝 Note: You may need to restart your terminal or run 'source ~/.bashrc'")
    return 0


def _run_wizard(name: str | None) -> int:
    try:
        run_wizard(name, Prompter())
    except WizardCancelled:
        return 0
    except WizardAborted:
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line with ``argv`` (default: the process arguments)."""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.command is None:
        parser.print_help(sys.stderr)
        print("Error: requires a command", file=sys.stderr)
        return 1

    try:
        if args.command == "alias":
            return _run_alias(args, parser)
        if args.command == "setup":
            return _run_setup(args.alias_name)
        if args.command == "wizard":
            return _run_wizard(args.name)
    except KeyboardInterrupt:
        return 1
    print(f"Error: unknown command {args.command!r}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())