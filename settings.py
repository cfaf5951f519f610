"""JSON-based settings persistence for the month calendar."""

import calendar
import json
import logging
import os

from calendar_logic import CalendarConfig

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".month-calendar-settings.json")

_WEEK_STARTS = {"sunday": calendar.SUNDAY, "monday": calendar.MONDAY}

_DEFAULTS = {
    "first_weekday": "sunday",
    "title_format": "%m-%Y",
    "window_width": None,
    "window_height": None,
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, e)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", _SETTINGS_PATH)
        return settings

    if stored.get("first_weekday") in _WEEK_STARTS:
        settings["first_weekday"] = stored["first_weekday"]
    if isinstance(stored.get("title_format"), str) and stored["title_format"]:
        settings["title_format"] = stored["title_format"]
    for key in ("window_width", "window_height"):
        value = stored.get(key)
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            settings[key] = value
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def config_from_settings(settings: dict) -> CalendarConfig:
    """Build the calendar configuration described by ``settings``."""
    return CalendarConfig(
        first_weekday=_WEEK_STARTS.get(settings.get("first_weekday"), calendar.SUNDAY),
        title_format=settings.get("title_format") or _DEFAULTS["title_format"],
    )
