# folderrunner/config_loader.py
"""Load and cache the JSON configuration files."""

import json
import pathlib

from folderrunner.errors import ConfigError
from folderrunner.locations import Locations

LOCATIONS_FILE = "locations.json"
SETTINGS_FILE = "settings.json"

DEFAULT_SETTINGS = {
    "log_path": None,
    "log_level": "INFO",
    "wake_on_events": False,
}


class ConfigLoader:
    """Loads config files from the config directory and caches them in memory."""

    def __init__(self, config_path: str):
        self._root = pathlib.Path(config_path)
        self._cache: dict = {}

    @property
    def root(self) -> pathlib.Path:
        return self._root

    def _load(self, relative_path: str) -> dict:
        """Load a JSON file relative to the config root, with caching."""
        if relative_path not in self._cache:
            full = self._root / relative_path
            try:
                text = full.read_text(encoding="utf-8")
            except OSError as e:
                raise ConfigError(f"cannot read {full}: {e}") from e
            try:
                self._cache[relative_path] = json.loads(text)
            except json.JSONDecodeError as e:
                raise ConfigError(f"invalid JSON in {full}: {e}") from e
        return self._cache[relative_path]

    def _save(self, relative_path: str, data: dict):
        """Write JSON data to a config file and update the cache."""
        full = self._root / relative_path
        full.parent.mkdir(parents=True, exist_ok=True)
        full.write_text(
            json.dumps(data, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        self._cache[relative_path] = data

    def reload(self, relative_path: str | None = None):
        """Clear cache for one file or all files, forcing a fresh read."""
        if relative_path:
            self._cache.pop(relative_path, None)
        else:
            self._cache.clear()

    @property
    def settings(self) -> dict:
        """Ambient settings merged over the defaults; the file is optional."""
        if not (self._root / SETTINGS_FILE).exists():
            return dict(DEFAULT_SETTINGS)
        data = self._load(SETTINGS_FILE)
        if not isinstance(data, dict):
            raise ConfigError(f"{SETTINGS_FILE} must be a JSON object")
        merged = dict(DEFAULT_SETTINGS)
        merged.update(data)
        return merged

    @property
    def locations(self) -> Locations:
        return Locations.from_dict(self._load(LOCATIONS_FILE))

    def save_locations(self, locations: Locations):
        """Persist a configuration root in its serialized JSON form."""
        self._save(LOCATIONS_FILE, locations.to_dict())
