"""Path utilities for unilog settings and default log locations.

Everything here is computed on demand instead of at import time so that
environment overrides set by tests (or by an embedding application before
its first log call) are honoured.
"""

import os
import sys
from pathlib import Path

from unilog.constants import (
    DEFAULT_APP_NAME,
    ENV_APP_NAME,
    ENV_CONFIG_DIR,
    SETTINGS_BASE_SUBDIR,
    SETTINGS_FILE_NAME,
)


def application_name() -> str:
    """Return the identity used to name settings and log files.

    Resolution order: ``UNILOG_APP_NAME``, the stem of ``sys.argv[0]``,
    then ``"python"``.
    """
    env_name = os.getenv(ENV_APP_NAME)
    if env_name:
        return env_name
    argv0 = sys.argv[0] if sys.argv else ""
    stem = Path(argv0).stem if argv0 else ""
    # Interactive sessions and "python -c" report "" or "-c"
    if not stem or stem.startswith("-"):
        return DEFAULT_APP_NAME
    return stem


class Paths:
    """Settings and log file locations for one application identity."""

    def __init__(self, app_name: str | None = None) -> None:
        """Initialize paths for an application.

        Args:
            app_name: Application identity (defaults to application_name())

        """
        self.app_name = app_name or application_name()

    @property
    def settings_dir(self) -> Path:
        """Directory holding settings.conf (overridable by UNILOG_CONFIG_DIR)."""
        env_dir = os.getenv(ENV_CONFIG_DIR)
        if env_dir:
            return Path(env_dir).expanduser() / self.app_name
        return Path.home() / SETTINGS_BASE_SUBDIR / self.app_name

    @property
    def settings_file(self) -> Path:
        return self.settings_dir / SETTINGS_FILE_NAME

    @property
    def default_log_dir(self) -> Path:
        """Dot-directory named after the application in the home directory."""
        return Path.home() / f".{self.app_name}"

    @property
    def default_log_filename(self) -> str:
        return f"{self.app_name}.log"

    @staticmethod
    def expand_path(path_str: str) -> Path:
        """Expand ~ in a path string without requiring it to exist.

        Example:
            >>> Paths.expand_path("~/logs")
            PosixPath('/home/user/logs')
        """
        return Path(path_str).expanduser()
