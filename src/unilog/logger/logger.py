"""The unilog Logger: one synchronous sink for the whole process.

The Logger owns a single log file, a severity threshold, an optional echo
to standard error and an optional line limit after which the file is
truncated. It can be created explicitly by an application's composition
root and handed to subsystems, or shared process-wide through
Logger.instance().

Failures never reach the caller: a log file that cannot be opened leaves
the Logger closed and every log() call becomes a no-op.
"""

import contextlib
import logging
import sys
import threading
import warnings
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from unilog.config.paths import Paths
from unilog.config.settings import SettingsStore
from unilog.constants import (
    DEFAULT_LOG_THRESHOLD,
    KEY_LOG_FILENAME,
    KEY_LOG_PATH,
    KEY_LOG_THRESHOLD,
)
from unilog.exceptions import InvalidLevelError, SettingsError
from unilog.levels import LogLevel
from unilog.logger.formatters import ColoredLineFormatter, LineFormatter
from unilog.logger.handlers import (
    ChannelHandler,
    ChannelRegistration,
    terminate_process,
)
from unilog.logger.state import get_state


class Logger:
    """Process-wide log sink writing to one file and optionally stderr.

    Thread Safety:
        All file access, the line counter and the threshold check happen
        under one operational lock, so concurrent log() calls produce whole,
        non-interleaved lines. Creation of the shared instance is guarded by
        a separate lock in logger.state.

    Example:
        >>> log = Logger.instance()
        >>> log.set_log_threshold(LogLevel.INFO)
        >>> log.log(LogLevel.INFO, "service started")

    """

    def __init__(
        self,
        settings: SettingsStore | None = None,
        *,
        app_name: str | None = None,
        install: bool = True,
        on_fatal: Callable[[], None] | None = None,
    ) -> None:
        """Open the log file and take over the logging channel.

        Path, filename and threshold come from the settings store, falling
        back to ~/.<app-name>/<app-name>.log and WARNING.

        Args:
            settings: Persisted settings (defaults to the app's store)
            app_name: Application identity used for defaults
            install: Register on the root logging channel and capture
                warnings
            on_fatal: Hook run after a fatal channel message is logged

        """
        self._settings = settings or SettingsStore(app_name=app_name)
        self._paths = Paths(app_name or self._settings.paths.app_name)
        self._lock = threading.Lock()
        self._file: TextIO | None = None
        self._threshold = LogLevel.NONE
        self._log_to_console = True
        self._log_limit = 0
        self._lines_logged = 0
        self._closed = False
        self._formatter = LineFormatter()
        self._console_formatter = ColoredLineFormatter()
        self._on_fatal = on_fatal or terminate_process
        self._registrations: list[ChannelRegistration] = []
        self._previous_showwarning: Callable[..., None] | None = None

        directory = self._settings.value(
            KEY_LOG_PATH, str(self._paths.default_log_dir)
        )
        filename = self._settings.value(
            KEY_LOG_FILENAME, self._paths.default_log_filename
        )
        threshold = self._settings.value(
            KEY_LOG_THRESHOLD, DEFAULT_LOG_THRESHOLD
        )

        self.set_log_path(directory, filename)

        try:
            self._threshold = LogLevel.parse(threshold)
        except InvalidLevelError:
            self._threshold = LogLevel.parse(DEFAULT_LOG_THRESHOLD)

        if install:
            self.register()
            self._capture_warnings()

    # ------------------------------------------------------------------
    # Shared instance
    # ------------------------------------------------------------------

    @classmethod
    def instance(cls) -> "Logger":
        """Return the shared Logger, creating it on first use.

        Safe under concurrent first access: every caller gets the same
        object. After close() a new instance is created.
        """
        state = get_state()
        with state.lock:
            if state.instance is None:
                state.instance = cls()
            return state.instance

    def close(self) -> None:
        """Close the file and give the logging channel back.

        If this is the shared instance the next instance() call creates a
        fresh one. Calling close() again is a no-op.
        """
        state = get_state()
        with state.lock:
            if state.instance is self:
                state.instance = None

        with self._lock:
            if self._closed:
                return
            self._closed = True

        # Registrations are undone newest first so nested installs unwind
        while self._registrations:
            self._registrations.pop().restore()
        self._release_warnings()

        with self._lock:
            self._close_file()

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def log(self, level: LogLevel | str, message: str) -> None:
        """Write message to the log file (and console) if level passes.

        Does nothing when the file is closed, when level is below the
        threshold, or when level is NONE. With a line limit set, the file
        is truncated before the line that would exceed it.

        Args:
            level: Severity of the message
            message: Message text

        """
        try:
            level = LogLevel.parse(level)
        except InvalidLevelError:
            return

        text = str(message)

        with self._lock:
            if self._file is None or level is LogLevel.NONE:
                return
            if level < self._threshold:
                return

            if self._log_limit and self._lines_logged >= self._log_limit:
                try:
                    self._file.truncate(0)
                    self._file.seek(0)
                except (OSError, ValueError):
                    return
                self._lines_logged = 0

            self._lines_logged += 1

            line = self._formatter.format(level, text)
            with contextlib.suppress(OSError, ValueError):
                self._file.write(line)
                self._file.flush()

            if self._log_to_console:
                self._echo(level, line)

    def debug(self, message: str, *args: object) -> None:
        self.log(LogLevel.DEBUG, _render(message, args))

    def info(self, message: str, *args: object) -> None:
        self.log(LogLevel.INFO, _render(message, args))

    def warning(self, message: str, *args: object) -> None:
        self.log(LogLevel.WARNING, _render(message, args))

    def critical(self, message: str, *args: object) -> None:
        self.log(LogLevel.CRITICAL, _render(message, args))

    def _echo(self, level: LogLevel, line: str) -> None:
        stream = sys.stderr
        if stream is None:
            return
        with contextlib.suppress(OSError, ValueError):
            stream.write(self._console_formatter.colorize(level, line))
            stream.flush()

    # ------------------------------------------------------------------
    # Log file
    # ------------------------------------------------------------------

    def set_log_path(self, directory: str | Path, filename: str) -> None:
        """Log to <directory>/<filename> from now on and remember it.

        The directory is created if missing and the file is truncated.
        If either step fails the Logger stays closed. Both values are
        stored in the settings so later runs use them. Does nothing once
        the Logger has been closed.

        Args:
            directory: Directory the log file is created in
            filename: Name of the log file

        """
        directory = str(directory)
        with self._lock:
            if self._closed:
                return
            self._close_file()
            try:
                log_dir = Paths.expand_path(directory)
                log_dir.mkdir(parents=True, exist_ok=True)
                self._file = (log_dir / filename).open(
                    "w+", encoding="utf-8"
                )
            except OSError:
                self._file = None
            self._lines_logged = 0

            self._persist(KEY_LOG_PATH, directory)
            self._persist(KEY_LOG_FILENAME, filename)

    def log_path(self) -> str:
        """Return the stored log directory."""
        return self._settings.value(KEY_LOG_PATH, "") or ""

    def log_filename(self) -> str:
        """Return the stored log filename."""
        return self._settings.value(KEY_LOG_FILENAME, "") or ""

    def is_open(self) -> bool:
        file = self._file
        return file is not None and not file.closed

    def _close_file(self) -> None:
        if self._file is not None:
            with contextlib.suppress(OSError, ValueError):
                self._file.close()
            self._file = None

    def _persist(self, key: str, value: str) -> None:
        with contextlib.suppress(SettingsError):
            self._settings.set_value(key, value)

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def set_log_threshold(self, level: LogLevel | str) -> None:
        """Set the minimum level written and store it in the settings.

        DEBUG logs everything, NONE logs nothing.

        Raises:
            InvalidLevelError: If level is a string naming no known level

        """
        level = LogLevel.parse(level)
        self._threshold = level
        self._persist(KEY_LOG_THRESHOLD, level.name)

    def log_threshold(self) -> LogLevel:
        return self._threshold

    def set_log_to_console(self, enabled: bool) -> None:  # noqa: FBT001
        """Echo lines to stderr as well as the file (enabled by default)."""
        self._log_to_console = bool(enabled)

    def log_to_console(self) -> bool:
        return self._log_to_console

    def set_log_limit(self, num_lines: int) -> None:
        """Truncate the file after num_lines lines; 0 removes the limit.

        Takes effect on the next log() call that would exceed the limit,
        never retroactively.
        """
        self._log_limit = max(int(num_lines), 0)

    def log_limit(self) -> int:
        return self._log_limit

    # ------------------------------------------------------------------
    # Logging channel
    # ------------------------------------------------------------------

    def register(self, channel: logging.Logger | None = None) -> None:
        """Route records of a logging channel into this Logger.

        Args:
            channel: Logger to take over (defaults to the root logger,
                which receives every propagating record in the process)

        """
        channel = channel if channel is not None else logging.getLogger()
        handler = ChannelHandler(self, on_fatal=self._on_fatal)
        self._registrations.append(
            ChannelRegistration.install(channel, handler)
        )

    def unregister(self, channel: logging.Logger) -> None:
        """Undo the most recent registration on channel, if any."""
        for index in range(len(self._registrations) - 1, -1, -1):
            if self._registrations[index].channel is channel:
                self._registrations.pop(index).restore()
                return

    def _capture_warnings(self) -> None:
        self._previous_showwarning = warnings.showwarning
        logging.captureWarnings(True)

    def _release_warnings(self) -> None:
        if self._previous_showwarning is None:
            return
        logging.captureWarnings(False)
        warnings.showwarning = self._previous_showwarning
        self._previous_showwarning = None


def _render(message: str, args: tuple[object, ...]) -> str:
    """Apply %-style args, falling back to appending them on a mismatch."""
    if not args:
        return str(message)
    try:
        return str(message) % args
    except (TypeError, ValueError):
        return " ".join([str(message), *map(str, args)])


def close_logger() -> None:
    """Close the shared Logger if one exists; safe to call repeatedly."""
    state = get_state()
    with state.lock:
        current = state.instance
    if current is not None:
        current.close()
