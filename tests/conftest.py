"""Pytest configuration and fixtures for unilog tests."""

from pathlib import Path

import pytest

from unilog.debug import Indent
from unilog.levels import LogLevel
from unilog.logger import Logger, close_logger

APP_NAME = "unilog-tests"


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep settings, default log files and env switches inside tmp_path.

    Also tears down the shared Logger so every test starts without one.
    """
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("UNILOG_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("UNILOG_APP_NAME", APP_NAME)
    monkeypatch.delenv("LOG_COLOR", raising=False)
    monkeypatch.delenv("UNILOG_NO_LOG_FUNCTION", raising=False)
    Indent.reset()

    yield

    close_logger()
    Indent.reset()


@pytest.fixture
def log_file(tmp_path) -> Path:
    """Return the path the shared test logger writes to."""
    return tmp_path / "logs" / "test_logger.log"


@pytest.fixture
def log(log_file) -> Logger:
    """Shared Logger at DEBUG threshold writing to log_file."""
    logger = Logger.instance()
    logger.set_log_threshold(LogLevel.DEBUG)
    logger.set_log_path(log_file.parent, log_file.name)
    return logger


@pytest.fixture
def log_lines(log_file):
    """Return a callable reading the lines currently in log_file."""

    def _read() -> list[str]:
        return log_file.read_text(encoding="utf-8").splitlines()

    return _read
