"""Core domain layer."""

from resource_directory.core.entities import (
    City,
    Entry,
    Feed,
    FilteredView,
    FilterState,
    LibraryItem,
    LiteracyLevel,
    Membership,
    OperatingSystem,
    Pricing,
    RecommendationCategory,
)
from resource_directory.core.filters import apply_filters, filter_catalog, parse_level
from resource_directory.core.interfaces import CatalogSource, ListingRenderer, PreferenceStore
from resource_directory.core.preference_store import InMemoryPreferenceStore, YamlPreferenceStore
from resource_directory.core.schema import SchemaError, parse_flag, parse_library_item, parse_recommendation

__all__ = [
    "City",
    "Entry",
    "Feed",
    "FilteredView",
    "FilterState",
    "LibraryItem",
    "LiteracyLevel",
    "Membership",
    "OperatingSystem",
    "Pricing",
    "RecommendationCategory",
    "apply_filters",
    "filter_catalog",
    "parse_level",
    "CatalogSource",
    "ListingRenderer",
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "YamlPreferenceStore",
    "SchemaError",
    "parse_flag",
    "parse_library_item",
    "parse_recommendation",
]
