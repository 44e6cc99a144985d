"""Logger state management module.

This module provides the global holder for the shared Logger instance
returned by Logger.instance(). The creation lock lives here, apart from
each Logger's own operational lock, because constructing a Logger calls
set_log_path(), which takes the operational lock.

CRITICAL: This module uses a module-level singleton pattern.
DO NOT modify without understanding threading and singleton implications.
"""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from unilog.logger.logger import Logger


class _LoggerState:
    """Container for the shared Logger (avoids module-level mutable globals).

    Attributes:
        lock: Thread lock for singleton creation and teardown
        instance: The shared Logger, or None before first use / after close

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.instance: Logger | None = None


# CRITICAL: Global logger state singleton
# This is the single source of truth for the shared Logger
_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton.

    Returns:
        The global logger state instance

    """
    return _state
