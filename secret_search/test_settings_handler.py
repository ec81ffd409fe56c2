import json
import pytest
from . import settings_handler
from .settings_handler import DEFAULT_SETTINGS, get_settings, change_settings, reset_settings, setting_is_yes


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr(settings_handler, "SETTINGS_FILE", str(path))
    return path


def feed_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_missing_file_gives_defaults(settings_file):
    assert get_settings() == DEFAULT_SETTINGS


def test_partial_file_filled_with_defaults(settings_file):
    settings_file.write_text(json.dumps({"arithmetic": "float"}))
    settings = get_settings()
    assert settings["arithmetic"] == "float"
    assert settings["testCaseFiles"] == DEFAULT_SETTINGS["testCaseFiles"]


@pytest.mark.parametrize("saved", [
    {"arithmetic": "decimal"},
    {"strictDigits": True},
    {"combinationWarningThreshold": -1},
    {"testCaseFiles": "testcase1.json"},
    [],
])
def test_invalid_values(settings_file, saved):
    settings_file.write_text(json.dumps(saved))
    with pytest.raises(ValueError):
        get_settings()


def test_reset_settings(settings_file):
    settings_file.write_text(json.dumps({"arithmetic": "float"}))
    reset_settings()
    assert json.loads(settings_file.read_text()) == DEFAULT_SETTINGS


def test_change_setting(settings_file, monkeypatch):
    keys = list(DEFAULT_SETTINGS.keys())
    # invalid choice first, then a valid one, then an invalid value and a valid one
    feed_input(monkeypatch, ["99", str(keys.index("arithmetic")), "decimal", "float"])
    change_settings()
    assert get_settings()["arithmetic"] == "float"


def test_change_file_list(settings_file, monkeypatch):
    keys = list(DEFAULT_SETTINGS.keys())
    feed_input(monkeypatch, [str(keys.index("testCaseFiles")), " a.json, b.json ,"])
    change_settings()
    assert get_settings()["testCaseFiles"] == ["a.json", "b.json"]


def test_change_threshold_validated(settings_file, monkeypatch):
    keys = list(DEFAULT_SETTINGS.keys())
    feed_input(monkeypatch, [str(keys.index("combinationWarningThreshold")), "lots", "-5", "10"])
    change_settings()
    assert get_settings()["combinationWarningThreshold"] == 10


def test_setting_is_yes():
    assert setting_is_yes({"strictDigits": "yes"}, "strictDigits")
    assert not setting_is_yes({"strictDigits": "no"}, "strictDigits")
    assert setting_is_yes({}, "showParsedPoints")
