"""Top-level package for unilog.

A single process-wide log sink with threshold filtering, line-count
truncation, console echo and interception of the standard logging channel.
"""

from importlib.metadata import PackageNotFoundError, version

from unilog.debug import Indent, Scope, log_function
from unilog.levels import LogLevel
from unilog.logger import Logger, close_logger, fatal, get_logger

try:
    __version__ = version("unilog")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"

__all__ = [
    "Indent",
    "LogLevel",
    "Logger",
    "Scope",
    "__version__",
    "close_logger",
    "fatal",
    "get_logger",
    "log_function",
]
