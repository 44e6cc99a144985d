"""Tests for the INI settings store."""

from pathlib import Path

import pytest

from unilog.config import SettingsStore
from unilog.exceptions import SettingsError


@pytest.fixture
def settings(tmp_path) -> SettingsStore:
    return SettingsStore(tmp_path / "settings" / "settings.conf")


def test_value_defaults_when_file_missing(settings):
    assert settings.value("log_path") is None
    assert settings.value("log_path", "/fallback") == "/fallback"
    assert settings.as_dict() == {}


def test_set_value_round_trip(settings):
    settings.set_value("log_threshold", "INFO")
    settings.set_value("log_filename", "app.log")

    # A second store on the same file sees the values
    other = SettingsStore(settings.settings_file)
    assert other.value("log_threshold") == "INFO"
    assert other.as_dict() == {
        "log_threshold": "INFO",
        "log_filename": "app.log",
    }


def test_file_is_plain_ini(settings):
    settings.set_value("log_path", "/var/log/app")
    content = settings.settings_file.read_text(encoding="utf-8")
    assert "[Log]" in content
    assert "log_path = /var/log/app" in content


def test_values_with_percent_are_stored_verbatim(settings):
    settings.set_value("log_path", "/tmp/100%done")
    assert settings.value("log_path") == "/tmp/100%done"


def test_remove_key_and_section(settings):
    settings.set_value("log_path", "/a")
    settings.set_value("log_filename", "b.log")

    settings.remove("log_path")
    assert settings.value("log_path") is None
    assert settings.value("log_filename") == "b.log"

    settings.remove()
    assert settings.as_dict() == {}

    # Removing from an empty store is a no-op
    settings.remove("log_path")


def test_corrupt_file_degrades_to_defaults(settings):
    settings.settings_file.parent.mkdir(parents=True)
    settings.settings_file.write_text("this is [[ not ini", encoding="utf-8")

    assert settings.value("log_threshold", "WARNING") == "WARNING"


def test_unwritable_location_raises_settings_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not directory")
    settings = SettingsStore(blocker / "settings.conf")

    with pytest.raises(SettingsError) as exc_info:
        settings.set_value("log_path", "/x")
    assert str(blocker / "settings.conf") in str(exc_info.value)


def test_no_temp_files_left_behind(settings):
    settings.set_value("log_path", "/a")
    settings.set_value("log_path", "/b")
    names = [p.name for p in Path(settings.settings_file.parent).iterdir()]
    assert names == ["settings.conf"]


def test_default_location_uses_app_identity(tmp_path):
    store = SettingsStore(app_name="myapp")
    assert store.settings_file == tmp_path / "config" / "myapp" / "settings.conf"
