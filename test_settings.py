import calendar
import json

import pytest

import settings
from settings import config_from_settings, load_settings, save_settings


@pytest.fixture
def settings_path(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr(settings, "_SETTINGS_PATH", str(path))
    return path


def test_defaults_when_missing(settings_path):
    loaded = load_settings()
    assert loaded == {
        "first_weekday": "sunday",
        "title_format": "%m-%Y",
        "window_width": None,
        "window_height": None,
    }


def test_save_and_load(settings_path):
    data = load_settings()
    data["first_weekday"] = "monday"
    data["window_width"] = 420
    save_settings(data)

    loaded = load_settings()
    assert loaded["first_weekday"] == "monday"
    assert loaded["window_width"] == 420
    assert loaded["window_height"] is None


def test_invalid_values_fall_back(settings_path):
    settings_path.write_text(json.dumps({
        "first_weekday": "friday",
        "title_format": 12,
        "window_width": "wide",
        "window_height": 300,
    }), encoding="utf-8")
    loaded = load_settings()
    assert loaded["first_weekday"] == "sunday"
    assert loaded["title_format"] == "%m-%Y"
    assert loaded["window_width"] is None
    assert loaded["window_height"] == 300


def test_corrupt_file_gives_defaults(settings_path):
    settings_path.write_text("{not json", encoding="utf-8")
    assert load_settings()["first_weekday"] == "sunday"


def test_non_object_file_gives_defaults(settings_path):
    settings_path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_settings()["title_format"] == "%m-%Y"


def test_config_from_settings():
    config = config_from_settings({"first_weekday": "monday", "title_format": "%B %Y"})
    assert config.first_weekday == calendar.MONDAY
    assert config.title_format == "%B %Y"

    config = config_from_settings({})
    assert config.first_weekday == calendar.SUNDAY
    assert config.title_format == "%m-%Y"


@pytest.mark.parametrize("width, height", [
    (True, -40),
    (0, False),
    (-1, 1.5),
])
def test_window_size_must_be_positive_int(settings_path, width, height):
    settings_path.write_text(json.dumps({
        "window_width": width,
        "window_height": height,
    }), encoding="utf-8")
    loaded = load_settings()
    assert loaded["window_width"] is None
    assert loaded["window_height"] is None


def test_empty_title_format_falls_back(settings_path):
    settings_path.write_text(json.dumps({"title_format": ""}), encoding="utf-8")
    assert load_settings()["title_format"] == "%m-%Y"
    assert config_from_settings({"title_format": ""}).title_format == "%m-%Y"
