"""Tests for the unilog command-line interface."""

import orjson
import pytest

from unilog import __version__
from unilog.cli import CLIParser, CLIRunner
from unilog.config import SettingsStore


@pytest.fixture
def settings() -> SettingsStore:
    return SettingsStore(app_name="cli-app")


@pytest.fixture
def runner(settings) -> CLIRunner:
    return CLIRunner(settings)


def test_version(runner, capsys):
    assert runner.run(["--version"]) == 0
    assert capsys.readouterr().out.strip() == __version__


def test_no_command_fails(runner, capsys):
    assert runner.run([]) == 1
    assert "No command specified" in capsys.readouterr().out


def test_config_show_json_reports_defaults(runner, settings, capsys, tmp_path):
    assert runner.run(["config", "show", "--json"]) == 0

    shown = orjson.loads(capsys.readouterr().out)
    assert shown["app_name"] == "cli-app"
    assert shown["log_path"] == str(tmp_path / "home" / ".cli-app")
    assert shown["log_filename"] == "cli-app.log"
    assert shown["log_threshold"] == "WARNING"
    assert shown["settings_file"] == str(settings.settings_file)


def test_config_show_text(runner, capsys):
    assert runner.run(["config", "show"]) == 0
    out = capsys.readouterr().out
    assert "Current logger settings:" in out
    assert "Threshold:     WARNING" in out


def test_config_set_threshold(runner, settings):
    assert runner.run(["config", "set-threshold", "debug"]) == 0
    assert settings.value("log_threshold") == "DEBUG"


def test_config_set_threshold_rejects_unknown_level(runner):
    with pytest.raises(SystemExit) as exc_info:
        runner.run(["config", "set-threshold", "verbose"])
    assert exc_info.value.code == 2


def test_config_set_path_and_reset(runner, settings):
    assert runner.run(["config", "set-path", "/var/log/x", "x.log"]) == 0
    assert settings.value("log_path") == "/var/log/x"
    assert settings.value("log_filename") == "x.log"

    assert runner.run(["config", "reset"]) == 0
    assert settings.as_dict() == {}


def test_emit_writes_one_line(runner, settings, tmp_path, capsys):
    log_dir = tmp_path / "emit-logs"
    settings.set_value("log_path", str(log_dir))
    settings.set_value("log_filename", "emit.log")

    assert runner.run(["emit", "warning", "disk almost full", "--no-console"]) == 0

    lines = (log_dir / "emit.log").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert lines[0].endswith("[WARNING]  disk almost full")
    assert capsys.readouterr().err == ""


def test_emit_reports_unopenable_log(runner, settings, tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    settings.set_value("log_path", str(blocker / "sub"))

    assert runner.run(["emit", "critical", "lost"]) == 1
    assert "could not be opened" in capsys.readouterr().out


def test_settings_errors_are_reported(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    runner = CLIRunner(SettingsStore(blocker / "settings.conf"))

    assert runner.run(["config", "set-threshold", "INFO"]) == 1
    assert capsys.readouterr().out.startswith("Error: Settings update failed")


def test_app_name_option_selects_settings(capsys, tmp_path):
    assert CLIRunner().run(["--app-name", "other", "config", "set-threshold", "NONE"]) == 0
    assert SettingsStore(app_name="other").value("log_threshold") == "NONE"


def test_parser_rejects_none_for_emit():
    with pytest.raises(SystemExit):
        CLIParser().parse_args(["emit", "NONE", "message"])
