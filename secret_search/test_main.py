import json
import pytest
from . import settings_handler
from .main import main, run_test_cases
from .settings_handler import DEFAULT_SETTINGS


CASE = '{"keys": {"n": 5, "k": 3}, "1": {"base": "10", "value": "4"}, "2": {"base": "2", "value": "111"}, "3": {"base": "10", "value": "12"}, "6": {"base": "4", "value": "213"}}'


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr(settings_handler, "SETTINGS_FILE", str(path))
    return path


@pytest.fixture
def case_file(tmp_path):
    path = tmp_path / "testcase1.json"
    path.write_text(CASE)
    return path


def test_run_test_cases_output(case_file, tmp_path, capsys):
    settings = dict(DEFAULT_SETTINGS, combinationWarningThreshold=1)
    ok = run_test_cases([case_file, tmp_path / "missing.json"], settings)
    out = capsys.readouterr().out
    assert not ok
    assert "\n----- testcase1.json -----\n" in out
    assert f"----- {case_file} -----" not in out
    assert "Parsed: x = 6, y = 39 (base 4)" in out
    assert "Parsed: x = 2, y = 7 (base 2)" in out
    assert "declares n = 5 but has 4 points" in out
    assert "Warning: 4 subsets" in out
    assert "Secret for testcase1.json: 3" in out
    assert "No secret could be determined for missing.json" in out


def test_hide_parsed_points(case_file, capsys):
    settings = dict(DEFAULT_SETTINGS, showParsedPoints="no")
    assert run_test_cases([case_file], settings)
    out = capsys.readouterr().out
    assert "Parsed:" not in out
    assert "Warning" not in out


def test_main_with_files(settings_file, case_file, tmp_path, capsys):
    assert main([str(case_file)]) == 0
    assert main([str(case_file), str(tmp_path / "missing.json")]) == 1


def test_main_bad_settings(settings_file, case_file, capsys):
    settings_file.write_text(json.dumps({"arithmetic": "decimal"}))
    assert main([str(case_file)]) == 2
    assert "Error:" in capsys.readouterr().out


def test_main_menu(settings_file, case_file, monkeypatch, capsys):
    settings_file.write_text(json.dumps({"testCaseFiles": [str(case_file)]}))
    answers = iter(["x", "s", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Secret for testcase1.json: 3" in out
    assert "Exiting..." in out


def test_main_interrupted(settings_file, monkeypatch, capsys):
    def interrupt(prompt=""):
        raise KeyboardInterrupt
    monkeypatch.setattr("builtins.input", interrupt)
    assert main([]) == 130
