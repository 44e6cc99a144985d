"""Command handlers for the unilog CLI.

Config commands work on the settings store directly and never open the
log file; only emit goes through a Logger.
"""

from abc import ABC, abstractmethod
from argparse import Namespace

import orjson

from unilog.config import SettingsStore
from unilog.constants import (
    DEFAULT_LOG_THRESHOLD,
    KEY_LOG_FILENAME,
    KEY_LOG_PATH,
    KEY_LOG_THRESHOLD,
)
from unilog.levels import LogLevel
from unilog.logger import Logger


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    CLIRunner acts as the composition root and injects the settings store.
    """

    def __init__(self, settings: SettingsStore) -> None:
        self.settings = settings

    @abstractmethod
    def execute(self, args: Namespace) -> int:
        """Run the command and return the process exit code."""


class ConfigHandler(BaseCommandHandler):
    """Handler for config command operations."""

    def execute(self, args: Namespace) -> int:
        action = args.config_action
        if action == "show":
            self._show(as_json=args.json)
        elif action == "set-threshold":
            self.settings.set_value(
                KEY_LOG_THRESHOLD, LogLevel.parse(args.level).name
            )
            print(f"Log threshold set to {args.level}")
        elif action == "set-path":
            self.settings.set_value(KEY_LOG_PATH, args.directory)
            self.settings.set_value(KEY_LOG_FILENAME, args.filename)
            print(f"Log file set to {args.directory}/{args.filename}")
        elif action == "reset":
            self.settings.remove()
            print("Logger settings reset to defaults")
        return 0

    def current_settings(self) -> dict[str, str]:
        """Return effective settings, defaults filled in."""
        paths = self.settings.paths
        return {
            "app_name": paths.app_name,
            "settings_file": str(self.settings.settings_file),
            KEY_LOG_PATH: self.settings.value(
                KEY_LOG_PATH, str(paths.default_log_dir)
            ),
            KEY_LOG_FILENAME: self.settings.value(
                KEY_LOG_FILENAME, paths.default_log_filename
            ),
            KEY_LOG_THRESHOLD: self.settings.value(
                KEY_LOG_THRESHOLD, DEFAULT_LOG_THRESHOLD
            ),
        }

    def _show(self, *, as_json: bool) -> None:
        current = self.current_settings()
        if as_json:
            print(orjson.dumps(current, option=orjson.OPT_INDENT_2).decode())
            return
        print("Current logger settings:")
        print(f"  Application:   {current['app_name']}")
        print(f"  Settings file: {current['settings_file']}")
        print(f"  Log path:      {current[KEY_LOG_PATH]}")
        print(f"  Log filename:  {current[KEY_LOG_FILENAME]}")
        print(f"  Threshold:     {current[KEY_LOG_THRESHOLD]}")


class EmitHandler(BaseCommandHandler):
    """Handler writing one message through a Logger."""

    def execute(self, args: Namespace) -> int:
        log = Logger(self.settings, install=False)
        try:
            log.set_log_to_console(not args.no_console)
            log.log(LogLevel.parse(args.level), args.message)
            if not log.is_open():
                print("Log file could not be opened; nothing was written")
                return 1
        finally:
            log.close()
        return 0
