from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from layoutpreview.settings import DEFAULT_SETTINGS, HOME_ENV_VAR, Settings, app_data_dir


def test_defaults_are_written_on_first_load(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    settings = Settings(path)
    assert settings.get("default_tab") == "preview"
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_SETTINGS


def test_set_persists_values(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    Settings(path).set("window_width", "900")
    assert Settings(path).get_int("window_width") == 900


def test_unreadable_file_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{broken", encoding="utf-8")
    settings = Settings(path)
    assert settings.get_int("window_height") == 800


def test_get_int_falls_back_on_bad_values(tmp_path: Path) -> None:
    settings = Settings(tmp_path / "settings.json")
    settings.set("code_font_size", "large")
    assert settings.get_int("code_font_size", 11) == 11


def test_app_data_dir_honours_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(HOME_ENV_VAR, str(tmp_path / "home"))
    assert app_data_dir() == tmp_path / "home"
    assert (tmp_path / "home").is_dir()
