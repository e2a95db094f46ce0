"""Data locations and display preferences.

Preferences are kept in a small YAML file beside the store and are
independent of it; nothing in the workspace reads them.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from stackman.constants import APP_NAME, DB_FILENAME, HOME_ENV, PREFERENCES_FILENAME

logger = logging.getLogger(__name__)

THEMES = ("system", "light", "dark")
_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def data_dir(home: str | Path | None = None) -> Path:
    """Directory holding the store and preferences.

    Explicit home wins, then $STACKMAN_HOME, then ~/.local/share/stackman.
    """
    if home:
        return Path(home).expanduser()
    env = os.environ.get(HOME_ENV)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".local" / "share" / APP_NAME


def db_path(home: str | Path | None = None) -> Path:
    return data_dir(home) / DB_FILENAME


def preferences_path(home: str | Path | None = None) -> Path:
    return data_dir(home) / PREFERENCES_FILENAME


@dataclass
class Preferences:
    """Display settings. Background effects are percentages (blur in px)."""

    accent_color: str = "#0ea5e9"
    bg_blur: int = 0
    bg_grain: int = 0
    bg_darken: int = 0
    show_hero: bool = True
    theme: str = "system"


def _coerce(name: str, value: Any) -> Any:
    """Validate one preference value, raising ValueError if it's unusable."""
    if name == "accent_color":
        if not isinstance(value, str) or not _HEX_COLOR.match(value):
            raise ValueError(f"not a #rrggbb colour: {value!r}")
        return value
    if name == "theme":
        if value not in THEMES:
            raise ValueError(f"theme must be one of {', '.join(THEMES)}")
        return value
    if name == "show_hero":
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("true", "false", "yes", "no", "on", "off"):
            return value.lower() in ("true", "yes", "on")
        raise ValueError(f"not a boolean: {value!r}")
    # bg_* sliders
    number = int(value)
    if not 0 <= number <= 100:
        raise ValueError(f"{name} must be between 0 and 100")
    return number


def preference_names() -> list[str]:
    return [f.name for f in fields(Preferences)]


def set_preference(prefs: Preferences, name: str, value: Any) -> Preferences:
    """Set one preference from user input. Raises KeyError or ValueError."""
    if name not in preference_names():
        raise KeyError(name)
    setattr(prefs, name, _coerce(name, value))
    return prefs


def load_preferences(path: Path) -> Preferences:
    """Read preferences, falling back to defaults for anything missing or bad."""
    prefs = Preferences()
    if not path.exists():
        return prefs
    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        logger.warning("ignoring unreadable preferences %s: %s", path, exc)
        return prefs
    if not isinstance(raw, dict):
        logger.warning("ignoring preferences %s: not a mapping", path)
        return prefs
    for name in preference_names():
        if name not in raw:
            continue
        try:
            setattr(prefs, name, _coerce(name, raw[name]))
        except (TypeError, ValueError) as exc:
            logger.warning("preference %s: %s, using default", name, exc)
    return prefs


def save_preferences(prefs: Preferences, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(asdict(prefs), sort_keys=False))
