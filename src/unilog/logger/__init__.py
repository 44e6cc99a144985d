"""Logging sink for unilog.

This package provides:
- Logger: one synchronous sink writing leveled lines to a file and stderr
- Line-count truncation of the log file
- Colored console output with ANSI color codes (opt-in via LOG_COLOR)
- Interception of the standard logging channel (and warnings)
- Thread-safe shared instance via Logger.instance()

Usage:
    Shared instance:
        >>> from unilog.logger import get_logger
        >>> log = get_logger()
        >>> log.info("Processing %s", item)

    Everything logged through the logging module ends up in the same file:
        >>> import logging
        >>> logging.getLogger(__name__).warning("cache outdated")

Environment Variables:
    LOG_COLOR: any non-empty value colours the console echo on Linux
    UNILOG_CONFIG_DIR: overrides the settings directory
    UNILOG_APP_NAME: overrides the application identity
"""

from unilog.logger.formatters import ColoredLineFormatter, LineFormatter
from unilog.logger.handlers import (
    ChannelHandler,
    ChannelRegistration,
    fatal,
    terminate_process,
)
from unilog.logger.logger import Logger, close_logger
from unilog.logger.state import _state, get_state

__all__ = [
    "ChannelHandler",
    "ChannelRegistration",
    "ColoredLineFormatter",
    "LineFormatter",
    "Logger",
    "_state",  # For testing only
    "close_logger",
    "fatal",
    "get_logger",
    "get_state",
    "terminate_process",
]


def get_logger() -> Logger:
    """Return the shared Logger, creating it on first use."""
    return Logger.instance()
