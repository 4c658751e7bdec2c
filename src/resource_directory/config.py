"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from resource_directory.core.schema import parse_flag


@dataclass
class PathsConfig:
    """Path settings."""
    content_dir: Path = Path("content")
    preferences_file: Path = Path(".preferences.yaml")


@dataclass
class FiltersConfig:
    """Filter engine settings."""
    compositional: bool = False
    filter_by_city: bool = False


@dataclass
class PreferencesConfig:
    """Preference storage settings."""
    key: str = "literacyLevel"


@dataclass
class DisplayConfig:
    """Listing display settings."""
    title: str = "Recommendations"
    library_title: str = "Library"


@dataclass
class Settings:
    """Application settings."""

    paths: PathsConfig = field(default_factory=PathsConfig)
    filters: FiltersConfig = field(default_factory=FiltersConfig)
    preferences: PreferencesConfig = field(default_factory=PreferencesConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @property
    def content_dir(self) -> Path:
        return self.paths.content_dir

    @property
    def preferences_file(self) -> Path:
        return self.paths.preferences_file


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)
    settings = Settings()

    if "paths" in config:
        for key, value in config["paths"].items():
            setattr(settings.paths, key, Path(value))

    if "filters" in config:
        for key, value in config["filters"].items():
            setattr(settings.filters, key, parse_flag(value))

    if "preferences" in config:
        settings.preferences = PreferencesConfig(**config["preferences"])

    if "display" in config:
        settings.display = DisplayConfig(**config["display"])

    # Environment wins over the file
    content_dir = os.getenv("DIRECTORY_CONTENT_DIR")
    if content_dir:
        settings.paths.content_dir = Path(content_dir)

    preferences_file = os.getenv("DIRECTORY_PREFERENCES_FILE")
    if preferences_file:
        settings.paths.preferences_file = Path(preferences_file)

    return settings
