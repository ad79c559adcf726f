"""Persistent JSON defaults for listing options.

Stores hidden-entry, numeric-id and colour preferences plus a fallback width
used when no terminal is attached. All access is defensive: malformed or
missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyls"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored so a read-only config
    directory never breaks a listing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _load_bool(key: str) -> bool:
    """Only explicit booleans count; anything else reads as ``False``."""
    value = load_config().get(key)
    return bool(value) if isinstance(value, bool) else False


def load_show_hidden() -> bool:
    return _load_bool("show_hidden")


def load_numeric_ids() -> bool:
    return _load_bool("numeric_ids")


def load_no_color() -> bool:
    return _load_bool("no_color")


def load_fallback_width() -> int | None:
    """Return the width to assume without a terminal, or ``None`` when unset/invalid."""
    value = load_config().get("fallback_width")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None

