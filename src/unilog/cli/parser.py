"""CLI argument parser for unilog.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from unilog.levels import LogLevel

_LEVEL_CHOICES = [level.name for level in LogLevel]


class CLIParser:
    """Command-line argument parser for unilog."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self.create_parser()
        return parser.parse_args(argv)

    def create_parser(self) -> argparse.ArgumentParser:
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser

    def _create_main_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser.

        Returns:
            argparse.ArgumentParser: The configured main ArgumentParser
                instance.

        """
        return argparse.ArgumentParser(
            prog="unilog",
            description="Inspect and change unilog settings",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Show where an application logs and at which threshold
  %(prog)s --app-name myapp config show
  %(prog)s --app-name myapp config show --json

  # Change the persisted settings
  %(prog)s --app-name myapp config set-threshold DEBUG
  %(prog)s --app-name myapp config set-path ~/.myapp myapp.log
  %(prog)s --app-name myapp config reset

  # Write one line through the logger (truncates the log file first)
  %(prog)s --app-name myapp emit WARNING "disk almost full"
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show unilog version and exit",
        )
        parser.add_argument(
            "--app-name",
            metavar="NAME",
            help="Application identity whose settings are used",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )
        self._add_config_command(subparsers)
        self._add_emit_command(subparsers)

    def _add_config_command(self, subparsers) -> None:
        """Add config command parser.

        Args:
            subparsers: The subparsers object to add the config command
                to.

        """
        config_parser = subparsers.add_parser(
            "config", help="Show or change persisted logger settings"
        )
        actions = config_parser.add_subparsers(
            dest="config_action", required=True
        )

        show_parser = actions.add_parser("show", help="Show current settings")
        show_parser.add_argument(
            "--json", action="store_true", help="Print settings as JSON"
        )

        threshold_parser = actions.add_parser(
            "set-threshold", help="Store the log threshold"
        )
        threshold_parser.add_argument(
            "level", type=str.upper, choices=_LEVEL_CHOICES
        )

        path_parser = actions.add_parser(
            "set-path", help="Store the log directory and filename"
        )
        path_parser.add_argument("directory")
        path_parser.add_argument("filename")

        actions.add_parser("reset", help="Forget all logger settings")

    def _add_emit_command(self, subparsers) -> None:
        emit_parser = subparsers.add_parser(
            "emit", help="Log a single message through the logger"
        )
        emit_parser.add_argument(
            "level",
            type=str.upper,
            choices=[name for name in _LEVEL_CHOICES if name != "NONE"],
        )
        emit_parser.add_argument("message")
        emit_parser.add_argument(
            "--no-console",
            action="store_true",
            help="Write to the log file only",
        )
