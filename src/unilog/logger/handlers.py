"""Interception of the standard logging channel.

Any code that logs through the ``logging`` module, including third-party
libraries, reaches the unilog Logger once a ChannelHandler is registered on
the root logger. Registration replaces the channel's handlers and
remembers the previous ones so that it can be undone exactly, which keeps
nested installs composable.

Level mapping:
    DEBUG (and NOTSET) -> DEBUG
    INFO -> INFO
    WARNING -> WARNING
    ERROR, CRITICAL -> CRITICAL
    FATAL_LEVEL -> CRITICAL, then the fatal hook terminates the process
"""

import _thread
import logging
import os
import signal
import sys
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from unilog.constants import FATAL_LEVEL
from unilog.levels import LogLevel, is_fatal

if TYPE_CHECKING:
    from unilog.logger.logger import Logger


def terminate_process() -> None:
    """Default fatal hook: end the process in an orderly fashion.

    On the main thread this raises SystemExit so that finally blocks and
    atexit handlers run. A worker thread interrupts the main thread, which
    then unwinds through KeyboardInterrupt, and ends itself. SIGTERM is
    sent only when the main thread cannot be interrupted: it has already
    finished, or SIGINT is ignored or left to the OS default.
    """
    main = threading.main_thread()
    if threading.current_thread() is main:
        sys.exit(1)

    sigint = signal.getsignal(signal.SIGINT)
    uninterruptible = sigint in (signal.SIG_DFL, signal.SIG_IGN, None)
    if uninterruptible or not main.is_alive():
        os.kill(os.getpid(), signal.SIGTERM)
        return

    _thread.interrupt_main()
    sys.exit(1)


def fatal(msg: str, *args: object, **kwargs: object) -> None:
    """Log msg on the root channel at the fatal level.

    With a unilog Logger installed the message is written as CRITICAL and
    the process is then terminated.
    """
    logging.getLogger().log(FATAL_LEVEL, msg, *args, **kwargs)


class ChannelHandler(logging.Handler):
    """logging.Handler forwarding every record to a unilog Logger.

    Records below the sink's threshold are filtered out before they are
    formatted. Fatal records always pass so the fatal hook still runs.
    """

    def __init__(
        self,
        sink: "Logger",
        on_fatal: Callable[[], None] | None = None,
    ) -> None:
        """Initialize handler.

        Args:
            sink: Logger receiving the records
            on_fatal: Called after a fatal record has been logged
                (defaults to terminate_process)

        """
        super().__init__(logging.NOTSET)
        self.sink = sink
        self.on_fatal = on_fatal or terminate_process
        # Message plus any exception/stack text, nothing else
        self.setFormatter(logging.Formatter("%(message)s"))
        self.addFilter(self._passes_threshold)

    def _passes_threshold(self, record: logging.LogRecord) -> bool:
        if is_fatal(record.levelno):
            return True
        level = LogLevel.from_stdlib(record.levelno)
        return level >= self.sink.log_threshold()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
        except Exception:  # noqa: BLE001
            self.handleError(record)
            return

        self.sink.log(LogLevel.from_stdlib(record.levelno), message)

        if is_fatal(record.levelno):
            self.on_fatal()


@dataclass
class ChannelRegistration:
    """A ChannelHandler installed on a channel, with what it replaced."""

    channel: logging.Logger
    handler: ChannelHandler
    previous_handlers: list[logging.Handler] = field(default_factory=list)
    previous_level: int = logging.NOTSET
    previous_propagate: bool = True

    @classmethod
    def install(
        cls, channel: logging.Logger, handler: ChannelHandler
    ) -> "ChannelRegistration":
        """Replace channel's handlers with handler and record the old state.

        The channel is opened to every level and, unless it is the root,
        stops propagating so records are not written twice.
        """
        registration = cls(
            channel=channel,
            handler=handler,
            previous_handlers=channel.handlers[:],
            previous_level=channel.level,
            previous_propagate=channel.propagate,
        )
        for old in registration.previous_handlers:
            channel.removeHandler(old)
        channel.addHandler(handler)
        channel.setLevel(logging.DEBUG)
        if channel is not logging.getLogger():
            channel.propagate = False
        return registration

    def restore(self) -> None:
        """Put the channel back the way install() found it."""
        self.channel.removeHandler(self.handler)
        for old in self.previous_handlers:
            self.channel.addHandler(old)
        self.channel.setLevel(self.previous_level)
        self.channel.propagate = self.previous_propagate
        self.handler.close()
