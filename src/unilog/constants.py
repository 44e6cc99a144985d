"""Centralized constants module for unilog.

This module serves as the single source of truth for all shared constants
across the unilog codebase. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from unilog.constants import KEY_LOG_THRESHOLD
"""

from typing import Final

# =============================================================================
# Settings Constants
# =============================================================================

# Settings file name inside the per-application settings directory
SETTINGS_FILE_NAME: Final[str] = "settings.conf"

# Base directory (under the user's home) holding per-application settings
SETTINGS_BASE_SUBDIR: Final[str] = ".config"

# Section holding every logger key
SECTION_LOG: Final[str] = "Log"

KEY_LOG_PATH: Final[str] = "log_path"
KEY_LOG_FILENAME: Final[str] = "log_filename"
KEY_LOG_THRESHOLD: Final[str] = "log_threshold"

# Fallback application identity when nothing better is known
DEFAULT_APP_NAME: Final[str] = "python"

# Threshold used when the settings store has none (or an unknown one)
DEFAULT_LOG_THRESHOLD: Final[str] = "WARNING"

# =============================================================================
# Environment Variables
# =============================================================================

# Opt-in for ANSI colours on the console echo (read on every log call)
ENV_LOG_COLOR: Final[str] = "LOG_COLOR"

# Overrides the settings directory (used by the test-suite for isolation)
ENV_CONFIG_DIR: Final[str] = "UNILOG_CONFIG_DIR"

# Overrides the application identity derived from sys.argv[0]
ENV_APP_NAME: Final[str] = "UNILOG_APP_NAME"

# Disables the log_function decorator at decoration time
ENV_NO_LOG_FUNCTION: Final[str] = "UNILOG_NO_LOG_FUNCTION"

# =============================================================================
# Log Line Constants
# =============================================================================

# Timestamp prefix of every line, local time
LOG_TIME_FORMAT: Final[str] = "%H:%M:%S"

# Width of the "[LABEL]" column including trailing padding, so that
# "[CRITICAL] " and "[DEBUG]    " line up
LOG_LABEL_WIDTH: Final[int] = 11

# Spaces added to DEBUG lines per nesting level
SPACES_PER_LEVEL: Final[int] = 2

# Stdlib level number used for fatal messages on the logging channel
FATAL_LEVEL: Final[int] = 60

# Colour codes for console output, keyed by level label
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "01;30",  # Grey
    "INFO": "1",  # White
    "WARNING": "00;33",  # Brown
    "CRITICAL": "01;31",  # Red
}
LOG_COLOR_START: Final[str] = "\x1b[{}m"
LOG_COLOR_RESET: Final[str] = "\x1b[00;39m"
