"""Record shapes for content files.

Content files use the site's camelCase keys (``literacyLevel``,
``dateAdded``...). These helpers turn one parsed YAML mapping into an
entity, raising :class:`SchemaError` on anything that does not fit.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from resource_directory.core.entities import (
    City,
    Entry,
    Feed,
    LibraryItem,
    LiteracyLevel,
    Membership,
    OperatingSystem,
    Pricing,
    RecommendationCategory,
)

E = TypeVar("E", bound=Enum)


class SchemaError(ValueError):
    """Record does not match the expected shape."""


def parse_recommendation(data: dict[str, Any]) -> Entry:
    """Validate a recommendation record and build an Entry."""
    if not isinstance(data, dict):
        raise SchemaError(f"Expected a mapping, got {type(data).__name__}")

    os_values = data.get("operatingSystem", data.get("os"))

    try:
        return Entry(
            url=_require_str(data, "url"),
            title=_require_str(data, "title"),
            headline=_require_str(data, "headline"),
            category=_enum_list(RecommendationCategory, data.get("category"), "category"),
            operating_system=_enum_list(OperatingSystem, os_values, "operatingSystem"),
            pricing=_enum_list(Pricing, data.get("pricing"), "pricing"),
            membership=_optional_enum(Membership, data.get("membership"), "membership"),
            literacy_level=_literacy_level(data.get("literacyLevel")),
            date_added=_date(data.get("dateAdded"), "dateAdded"),
            last_updated=_date(data["lastUpdated"], "lastUpdated") if data.get("lastUpdated") else date.today(),
            city=_enum_value(City, data.get("city") or City.DIGITAL_FIRST.value, "city"),
            feeds=_enum_list(Feed, data["feeds"], "feeds") if data.get("feeds") else (),
        )
    except SchemaError:
        raise
    except ValueError as e:
        raise SchemaError(str(e)) from e


def parse_library_item(data: dict[str, Any]) -> LibraryItem:
    """Validate a library record and build a LibraryItem."""
    if not isinstance(data, dict):
        raise SchemaError(f"Expected a mapping, got {type(data).__name__}")

    tags = data.get("tags")
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise SchemaError("Field 'tags' must be a list of strings")

    try:
        return LibraryItem(
            url=_require_str(data, "url"),
            title=_require_str(data, "title"),
            author=_require_str(data, "author"),
            tags=tuple(tags),
        )
    except SchemaError:
        raise
    except ValueError as e:
        raise SchemaError(str(e)) from e


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise SchemaError(f"Field '{key}' is required and must be a string")
    return value


def _enum_value(enum_cls: Type[E], value: Any, key: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise SchemaError(f"Field '{key}' has invalid value {value!r}") from None


def _optional_enum(enum_cls: Type[E], value: Any, key: str) -> Optional[E]:
    if value is None:
        return None
    return _enum_value(enum_cls, value, key)


def _enum_list(enum_cls: Type[E], values: Any, key: str) -> tuple[E, ...]:
    if not isinstance(values, list) or not values:
        raise SchemaError(f"Field '{key}' must be a non-empty list")
    return tuple(_enum_value(enum_cls, value, key) for value in values)


def _literacy_level(value: Any) -> LiteracyLevel:
    # YAML reads an unquoted 2 as int
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    return _enum_value(LiteracyLevel, value, "literacyLevel")


def _date(value: Any, key: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
    raise SchemaError(f"Field '{key}' must be a date")


TRUE_STRINGS = {"true", "1", "on", "yes"}
FALSE_STRINGS = {"false", "0", "off", "no", ""}


def parse_flag(value: Any) -> bool:
    """Read a checkbox or config value as a bool.

    Strings must spell out a boolean; anything else goes through bool().
    """
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
        raise ValueError(f"Not a boolean: {value!r}")
    return bool(value)
