"""Persisted literacy level preference."""

from pathlib import Path
from typing import Any, Optional

import yaml

from resource_directory.core.entities import LiteracyLevel
from resource_directory.core.interfaces import PreferenceStore

DEFAULT_KEY = "literacyLevel"


def validate_level(value: Any) -> Optional[LiteracyLevel]:
    """Return the level for a stored value, or None if it is not one."""
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    try:
        return LiteracyLevel(value)
    except ValueError:
        return None


class YamlPreferenceStore(PreferenceStore):
    """Keep preferences in a small YAML file, one key per preference."""

    def __init__(self, path: Path, key: str = DEFAULT_KEY) -> None:
        self.path = path
        self.key = key

    def load(self) -> Optional[LiteracyLevel]:
        """Read the stored level, falling back to None on anything invalid."""
        stored = self._read().get(self.key)
        if stored is None:
            return None

        level = validate_level(stored)
        if level is None:
            print(f"⚠️  Warning: Ignoring invalid stored {self.key}: {stored!r}")
        return level

    def save(self, level: LiteracyLevel) -> None:
        """Overwrite the stored level, keeping any other keys in the file."""
        try:
            data = self._read()
            data[self.key] = LiteracyLevel(level).value

            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, allow_unicode=True, default_flow_style=False, sort_keys=False)

        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"⚠️  Warning: Could not save {self.key}: {e}")

    def _read(self) -> dict:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            print(f"⚠️  Warning: Could not read preferences from {self.path}: {e}")
            return {}

        return data if isinstance(data, dict) else {}


class InMemoryPreferenceStore(PreferenceStore):
    """Preference store that lives for the process only."""

    def __init__(self, initial: Optional[Any] = None) -> None:
        self.value = initial
        self.writes: list[LiteracyLevel] = []

    def load(self) -> Optional[LiteracyLevel]:
        if self.value is None:
            return None
        return validate_level(self.value)

    def save(self, level: LiteracyLevel) -> None:
        self.value = LiteracyLevel(level)
        self.writes.append(self.value)
