"""Tests for line formatting and console colours."""

import sys
from datetime import datetime

import pytest

from unilog.debug import Indent
from unilog.levels import LogLevel
from unilog.logger import ColoredLineFormatter, LineFormatter

NOW = datetime(2024, 5, 17, 9, 5, 3)


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (LogLevel.DEBUG, "[09:05:03] [DEBUG]    msg\n"),
        (LogLevel.INFO, "[09:05:03] [INFO]     msg\n"),
        (LogLevel.WARNING, "[09:05:03] [WARNING]  msg\n"),
        (LogLevel.CRITICAL, "[09:05:03] [CRITICAL] msg\n"),
    ],
)
def test_line_format(level, expected):
    """Test every label is padded to the same column."""
    assert LineFormatter().format(level, "msg", now=NOW) == expected


def test_debug_line_uses_indent():
    formatter = LineFormatter()
    Indent.push()
    Indent.push()
    try:
        assert formatter.format(LogLevel.DEBUG, "deep", now=NOW) == (
            "[09:05:03] [DEBUG]        deep\n"
        )
        assert formatter.format(LogLevel.INFO, "flat", now=NOW) == (
            "[09:05:03] [INFO]     flat\n"
        )
    finally:
        Indent.reset()


def test_negative_indent_renders_as_none():
    """Test an unpaired pop() does not break the line."""
    Indent.pop()
    assert LineFormatter().format(LogLevel.DEBUG, "x", now=NOW) == (
        "[09:05:03] [DEBUG]    x\n"
    )


@pytest.mark.parametrize(
    ("level", "code"),
    [
        (LogLevel.DEBUG, "01;30"),
        (LogLevel.INFO, "1"),
        (LogLevel.WARNING, "00;33"),
        (LogLevel.CRITICAL, "01;31"),
    ],
)
def test_colorize_wraps_line(monkeypatch, level, code):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("LOG_COLOR", "yes")

    colored = ColoredLineFormatter().colorize(level, "line\n")
    assert colored == f"\x1b[{code}mline\x1b[00;39m\n"


def test_colorize_is_noop_without_env(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("LOG_COLOR", raising=False)
    assert ColoredLineFormatter().colorize(LogLevel.INFO, "x\n") == "x\n"


def test_colorize_is_noop_off_linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.setenv("LOG_COLOR", "1")
    assert ColoredLineFormatter().colorize(LogLevel.INFO, "x\n") == "x\n"


def test_empty_log_color_counts_as_unset(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("LOG_COLOR", "")
    assert not ColoredLineFormatter.enabled()
