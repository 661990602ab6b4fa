"""JSON-based settings persistence for the calendar picker."""

import json
import os

from app_logger import get_logger
from calendar_logic import WeekConvention

log = get_logger("settings")

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".calendar-picker-settings.json")

_DEFAULTS = {
    "first_weekday": 6,  # Sunday
}


def settings_path(path: str | None = None) -> str:
    """Return the settings file location (argument, then env, then home)."""
    if path:
        return path
    return os.environ.get("CALENDAR_PICKER_SETTINGS", _SETTINGS_PATH)


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    target = settings_path(path)
    try:
        with open(target, "r", encoding="utf-8") as f:
            stored = json.load(f)
        first = stored.get("first_weekday") if isinstance(stored, dict) else None
        # bool is an int subclass; reject it
        if isinstance(first, int) and not isinstance(first, bool) and 0 <= first <= 6:
            settings["first_weekday"] = first
    except FileNotFoundError:
        pass
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        log.warning("Ignoring unreadable settings file %s: %s", target, exc)
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    target = settings_path(path)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    log.debug("Saved settings to %s", target)


def convention_from_settings(settings: dict) -> WeekConvention:
    return WeekConvention(first_weekday=settings.get("first_weekday", _DEFAULTS["first_weekday"]))
