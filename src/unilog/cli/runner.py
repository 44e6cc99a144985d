"""CLI runner for unilog.

Orchestrates the execution of CLI commands by routing parsed
arguments to the appropriate command handlers.
"""

from argparse import Namespace
from collections.abc import Sequence

from unilog import __version__
from unilog.cli.commands import BaseCommandHandler, ConfigHandler, EmitHandler
from unilog.cli.parser import CLIParser
from unilog.config import SettingsStore
from unilog.exceptions import UnilogError


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, settings: SettingsStore | None = None) -> None:
        """Initialize CLI runner.

        Args:
            settings: Settings store to use instead of the one derived
                from --app-name (for tests)

        """
        self.settings = settings

    def _create_handlers(
        self, settings: SettingsStore
    ) -> dict[str, BaseCommandHandler]:
        return {
            "config": ConfigHandler(settings),
            "emit": EmitHandler(settings),
        }

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Parse arguments and run the selected command.

        Returns:
            Process exit code

        """
        args = CLIParser().parse_args(argv)

        if args.version:
            print(__version__)
            return 0

        if not args.command:
            print("No command specified. Use --help.")
            return 1

        return self._execute_command(args)

    def _execute_command(self, args: Namespace) -> int:
        settings = self.settings or SettingsStore(app_name=args.app_name)
        handler = self._create_handlers(settings)[args.command]
        try:
            return handler.execute(args)
        except UnilogError as e:
            print(f"Error: {e}")
            return 1
