"""
Settings Module - Persistent solver preferences.

config.json in the working directory remembers the last solving method,
an optional search deadline and state budget, the directory scanned for
bundled puzzles, and whether debug logging is on. Values that fail their
type check are replaced by the default with a warning, so a hand-edited
file can never crash a run.
"""

import json
import logging
from numbers import Real
from pathlib import Path
from typing import Any, Callable, Dict, Union

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("config.json")

# Relative puzzle directories are taken from the project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "strategy_name": "hybrid",
    "timeout_sec": None,
    "max_states": None,
    "puzzle_dir": "puzzles",
}


def _is_positive_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and value > 0


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


_VALIDATORS: Dict[str, Callable[[Any], bool]] = {
    "debug_enabled": lambda value: isinstance(value, bool),
    "strategy_name": lambda value: isinstance(value, str) and bool(value),
    "timeout_sec": lambda value: value is None or _is_positive_number(value),
    "max_states": lambda value: value is None or _is_positive_int(value),
    "puzzle_dir": lambda value: isinstance(value, str) and bool(value),
}


def _checked(stored: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay stored values on the defaults, keeping only well-typed ones."""
    result = DEFAULT_SETTINGS.copy()
    for key, value in stored.items():
        validator = _VALIDATORS.get(key)
        if validator is None:
            result[key] = value
        elif validator(value):
            result[key] = value
        else:
            logger.warning(
                f"Ignoring setting {key}={value!r}, using {DEFAULT_SETTINGS[key]!r}"
            )
    return result


def load_settings() -> Dict[str, Any]:
    """
    Read config.json.

    Returns:
        A fresh settings dictionary. Missing keys and rejected values come
        from DEFAULT_SETTINGS; an absent or unreadable file yields the
        defaults alone.
    """
    if not SETTINGS_FILE.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(SETTINGS_FILE, 'r', encoding='utf-8') as f:
            stored = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(stored, dict):
        logger.warning("Settings file is not a JSON object, using defaults")
        return DEFAULT_SETTINGS.copy()

    settings = _checked(stored)
    logger.debug(f"Settings loaded: {settings}")
    return settings


def save_settings(settings: Dict[str, Any]) -> None:
    """Write settings to config.json; failures are logged, not raised."""
    try:
        with open(SETTINGS_FILE, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved to {SETTINGS_FILE}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")


def remember_strategy(settings: Dict[str, Any], name: str) -> None:
    """Record name as the last used strategy, saving only when it changed."""
    if settings.get("strategy_name") == name:
        return
    settings["strategy_name"] = name
    save_settings(settings)


def puzzle_directory(settings: Dict[str, Any]) -> Path:
    """
    Directory holding the bundled puzzles.

    Args:
        settings: Loaded settings

    Returns:
        puzzle_dir as an absolute path; relative values are resolved
        against the project root rather than the working directory
    """
    directory = Path(settings.get("puzzle_dir") or DEFAULT_SETTINGS["puzzle_dir"])
    if not directory.is_absolute():
        directory = PROJECT_ROOT / directory
    return directory
