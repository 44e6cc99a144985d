"""Severity levels understood by the Logger."""

import logging
from enum import IntEnum

from unilog.constants import FATAL_LEVEL
from unilog.exceptions import InvalidLevelError


class LogLevel(IntEnum):
    """Ordered severities; NONE is only meaningful as a threshold."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    CRITICAL = 3
    NONE = 4

    @property
    def label(self) -> str:
        """Label written between brackets in the log line."""
        return self.name

    @classmethod
    def parse(cls, value: "str | LogLevel") -> "LogLevel":
        """Convert a level name (case-insensitive) to a LogLevel.

        Args:
            value: Level name such as "info", or a LogLevel

        Returns:
            The matching LogLevel

        Raises:
            InvalidLevelError: If the name is not a known level

        """
        if isinstance(value, LogLevel):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise InvalidLevelError(
                f"expected one of {', '.join(cls.__members__)}",
                target=str(value),
            ) from None

    @classmethod
    def from_stdlib(cls, levelno: int) -> "LogLevel":
        """Map a stdlib logging level number onto a LogLevel.

        ERROR and above (including the fatal level) collapse to CRITICAL.
        """
        if levelno >= logging.ERROR:
            return cls.CRITICAL
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG


def is_fatal(levelno: int) -> bool:
    """Return True for records emitted at the fatal level."""
    return levelno >= FATAL_LEVEL
