"""JSON-backed settings file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from tempsweep.locations import config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "tempsweep"
_SETTINGS_FILE = "settings.json"


def default_settings_path() -> Path:
    return config_home() / _SETTINGS_DIR / _SETTINGS_FILE


class Settings:
    """Read-only settings backed by a JSON file.

    Uses dot-notation keys for nested access:
        settings.get("age.default_days")  # reads data["age"]["default_days"]
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or default_settings_path()
        self._data: dict[str, Any] = {}
        self._load()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_days(self, key: str, default: int) -> int:
        """Get a positive whole number of days, falling back on bad values."""
        value = self.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            log.warning("Ignoring invalid value for %s in %s: %r", key, self._path, value)
            return default
        return value

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Settings file %s does not contain an object", self._path)
            return
        self._data = data
