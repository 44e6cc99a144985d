"""Persisted key-value settings backed by an INI file.

One store exists per application identity. Keys live in a single section
(``[Log]`` for the Logger) so the file stays readable and hand-editable:

    [Log]
    log_path = /home/user/.myapp
    log_filename = myapp.log
    log_threshold = WARNING
"""

import configparser
import os
import tempfile
import threading
from pathlib import Path

from unilog.config.paths import Paths
from unilog.constants import SECTION_LOG
from unilog.exceptions import SettingsError


class SettingsStore:
    """INI-backed settings for one application."""

    def __init__(
        self,
        settings_file: Path | None = None,
        section: str = SECTION_LOG,
        app_name: str | None = None,
    ) -> None:
        """Initialize settings store.

        Args:
            settings_file: INI file to use (defaults to Paths.settings_file)
            section: Section holding the keys
            app_name: Application identity used for the default location

        """
        self.paths = Paths(app_name)
        self.settings_file = settings_file or self.paths.settings_file
        self.section = section
        self._lock = threading.Lock()

    def _read(self) -> configparser.ConfigParser:
        config = configparser.ConfigParser(interpolation=None)
        try:
            config.read(self.settings_file, encoding="utf-8")
        except (configparser.Error, OSError, UnicodeDecodeError):
            # Unreadable settings degrade to defaults
            config = configparser.ConfigParser(interpolation=None)
        return config

    def _write(self, config: configparser.ConfigParser) -> None:
        """Write the whole file atomically (temp file + replace)."""
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.settings_file.parent,
                prefix=f".{self.settings_file.name}.",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    config.write(f)
                os.replace(tmp_name, self.settings_file)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise SettingsError(str(e), target=str(self.settings_file)) from e

    def value(self, key: str, default: str | None = None) -> str | None:
        """Return the stored value for key, or default when unset."""
        config = self._read()
        return config.get(self.section, key, fallback=default)

    def set_value(self, key: str, value: str) -> None:
        """Store value under key and write the file immediately.

        Raises:
            SettingsError: If the settings file cannot be written

        """
        with self._lock:
            config = self._read()
            if not config.has_section(self.section):
                config.add_section(self.section)
            config.set(self.section, key, str(value))
            self._write(config)

    def remove(self, key: str | None = None) -> None:
        """Remove one key, or the whole section when key is None."""
        with self._lock:
            config = self._read()
            if key is None:
                changed = config.remove_section(self.section)
            elif config.has_section(self.section):
                changed = config.remove_option(self.section, key)
            else:
                changed = False
            if changed:
                self._write(config)

    def as_dict(self) -> dict[str, str]:
        config = self._read()
        if not config.has_section(self.section):
            return {}
        return dict(config.items(self.section))
