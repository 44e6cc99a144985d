"""Configuration management - persisted settings and path utilities.

This package provides:
- SettingsStore: INI-backed key-value settings (from settings.py)
- Paths: settings and default log locations (from paths.py)
- application_name: the identity every default is derived from
"""

from unilog.config.paths import Paths, application_name
from unilog.config.settings import SettingsStore

__all__ = [
    "Paths",
    "SettingsStore",
    "application_name",
]
