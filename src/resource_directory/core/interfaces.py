"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Optional

from resource_directory.core.entities import (
    Entry,
    FilteredView,
    LibraryItem,
    LiteracyLevel,
)


class PreferenceStore(ABC):
    """Interface for the persisted literacy level preference."""

    @abstractmethod
    def load(self) -> Optional[LiteracyLevel]:
        """Return the stored level, or None if absent or invalid."""
        pass

    @abstractmethod
    def save(self, level: LiteracyLevel) -> None:
        """Overwrite the stored level."""
        pass


class CatalogSource(ABC):
    """Interface for supplying catalog records."""

    @abstractmethod
    def load_recommendations(self) -> list[Entry]:
        """Load validated recommendation entries in catalog order."""
        pass

    @abstractmethod
    def load_library(self) -> list[LibraryItem]:
        """Load validated library items in catalog order."""
        pass


class ListingRenderer(ABC):
    """Interface for rendering listings."""

    @abstractmethod
    def render(self, title: str, view: FilteredView) -> str:
        """Render a filtered recommendation view."""
        pass

    @abstractmethod
    def render_library(self, title: str, items: list[LibraryItem]) -> str:
        """Render library items."""
        pass
