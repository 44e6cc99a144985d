"""Line formatting for the log file and the console echo.

Every line has the same shape, in the file and on the console:

    [14:03:27] [WARNING]  disk almost full
    [14:03:27] [DEBUG]      entering nested scope

The console copy may additionally be wrapped in ANSI colour codes.
"""

import os
import sys
from datetime import datetime

from unilog.constants import (
    ENV_LOG_COLOR,
    LOG_COLOR_RESET,
    LOG_COLOR_START,
    LOG_COLORS,
    LOG_LABEL_WIDTH,
    LOG_TIME_FORMAT,
)
from unilog.debug.indent import Indent
from unilog.levels import LogLevel


class LineFormatter:
    """Build timestamped, labelled log lines.

    DEBUG lines are indented by the current Indent depth so nested scopes
    read as a tree.

    Thread Safety:
        Stateless apart from the Indent lookup, which is context-local.

    """

    def format(
        self,
        level: LogLevel,
        message: str,
        now: datetime | None = None,
    ) -> str:
        """Format one newline-terminated log line.

        Args:
            level: Severity of the message (never NONE)
            message: Message text
            now: Timestamp to use (defaults to the current local time)

        Returns:
            The complete line including the trailing newline

        """
        timestamp = (now or datetime.now()).strftime(LOG_TIME_FORMAT)
        label = f"[{level.label}]".ljust(LOG_LABEL_WIDTH)
        indent = ""
        if level is LogLevel.DEBUG:
            indent = " " * max(Indent.get_indent(), 0)
        return f"[{timestamp}] {label}{indent}{message}\n"


class ColoredLineFormatter:
    """Wraps already formatted lines in ANSI colour codes for the console.

    Colours:
        DEBUG: Grey
        INFO: White
        WARNING: Brown
        CRITICAL: Red

    Colours are only used on Linux and only when LOG_COLOR is set to a
    non-empty value; the variable is read on every call.
    """

    @staticmethod
    def enabled() -> bool:
        return sys.platform.startswith("linux") and bool(
            os.environ.get(ENV_LOG_COLOR)
        )

    def colorize(self, level: LogLevel, line: str) -> str:
        r"""Return line wrapped in colour codes when colours are enabled.

        Example:
            An INFO line "[10:00:00] [INFO]     hi\n" becomes
            "\x1b[1m[10:00:00] [INFO]     hi\x1b[00;39m\n"

        """
        if not self.enabled() or level.label not in LOG_COLORS:
            return line
        body = line[:-1] if line.endswith("\n") else line
        start = LOG_COLOR_START.format(LOG_COLORS[level.label])
        return f"{start}{body}{LOG_COLOR_RESET}\n"
