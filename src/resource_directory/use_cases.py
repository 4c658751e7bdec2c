"""Business logic use cases."""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Sequence

from resource_directory.core import (
    City,
    Entry,
    FilteredView,
    FilterState,
    LiteracyLevel,
    PreferenceStore,
    RecommendationCategory,
    filter_catalog,
    parse_flag,
)

FILTER_FIELDS = tuple(f.name for f in fields(FilterState))


def default_filter_state() -> FilterState:
    """Canonical form values, used on reset."""
    return FilterState(
        free_only=False,
        category=RecommendationCategory.ALL,
        max_complexity=LiteracyLevel.LEVEL_4,
        city=City.ALL,
    )


def to_level(value: Any) -> LiteracyLevel:
    """Convert a form value such as "2" or 2 to a LiteracyLevel."""
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    return LiteracyLevel(value)


def coerce_field(name: str, value: Any) -> Any:
    """Convert a raw form value to the type of the given field."""
    if name == "free_only":
        return parse_flag(value)
    if name == "category":
        return RecommendationCategory(value)
    if name == "max_complexity":
        return to_level(value)
    if name == "city":
        return City(value)
    raise ValueError(f"Unknown filter field: {name}")


class FilterFormController:
    """Hold the listing filter form and derive the visible entries."""

    def __init__(
        self,
        entries: Sequence[Entry],
        store: PreferenceStore,
        default_options: Optional[Mapping[str, Any]] = None,
        hide_options: Optional[Mapping[str, bool]] = None,
        compositional: bool = False,
        filter_by_city: bool = False,
    ) -> None:
        self.entries = tuple(entries)
        self.store = store
        self.hide_options = dict(hide_options or {})
        self.compositional = compositional
        self.filter_by_city = filter_by_city

        initial = default_filter_state()
        initial.max_complexity = store.load() or LiteracyLevel.LEVEL_4

        overrides = {name: coerce_field(name, value) for name, value in (default_options or {}).items()}
        self.state = replace(initial, **overrides)

    @property
    def visible_fields(self) -> list[str]:
        """Form fields the rendering layer should show."""
        return [name for name in FILTER_FIELDS if not self.hide_options.get(name, False)]

    def set_free_only(self, value: Any) -> None:
        self.state.free_only = coerce_field("free_only", value)

    def set_category(self, value: Any) -> None:
        self.state.category = coerce_field("category", value)

    def set_max_complexity(self, value: Any) -> None:
        """Change the complexity cap and persist it as the literacy preference."""
        level = coerce_field("max_complexity", value)
        self.state.max_complexity = level
        self.store.save(level)

    def set_city(self, value: Any) -> None:
        self.state.city = coerce_field("city", value)

    def update(self, name: str, value: Any) -> None:
        """Apply a form change event for one field."""
        setters = {
            "free_only": self.set_free_only,
            "category": self.set_category,
            "max_complexity": self.set_max_complexity,
            "city": self.set_city,
        }
        if name not in setters:
            raise ValueError(f"Unknown filter field: {name}")
        setters[name](value)

    def reset_to_defaults(self) -> None:
        """Restore canonical defaults and store the default complexity."""
        self.state = default_filter_state()
        self.store.save(self.state.max_complexity)

    def view(self) -> FilteredView:
        return filter_catalog(
            self.entries,
            self.state,
            compositional=self.compositional,
            filter_by_city=self.filter_by_city,
        )

    @property
    def filtered_entries(self) -> list[Entry]:
        return self.view().entries

    @property
    def hidden_count(self) -> int:
        return self.view().hidden_count


@dataclass(frozen=True)
class LiteracyOption:
    """One choice of the literacy level selector."""

    level: LiteracyLevel
    description: str
    url: Optional[str] = None


LITERACY_OPTIONS = (
    LiteracyOption(LiteracyLevel.LEVEL_0, "I can just barely operate a web browser."),
    LiteracyOption(LiteracyLevel.LEVEL_1, "I know what a .zip file is, and what it's used for."),
    LiteracyOption(LiteracyLevel.LEVEL_2, 'I know what happens if I type "%appdata%" into Windows Explorer.'),
    LiteracyOption(LiteracyLevel.LEVEL_3, "I've dabbled with HTML / CSS (or other programming / markup languages)."),
    LiteracyOption(
        LiteracyLevel.LEVEL_4,
        '"I don\'t even see the code."',
        url="https://www.youtube.com/watch?v=fBDifUjNzbQ",
    ),
)


class LiteracyLevelSelector:
    """Single choice over the five literacy levels, saved on every change."""

    def __init__(self, store: PreferenceStore) -> None:
        self.store = store
        self.level = store.load() or LiteracyLevel.LEVEL_0

    def options(self) -> list[LiteracyOption]:
        return list(LITERACY_OPTIONS)

    def select(self, level: Any) -> LiteracyLevel:
        """Select a level and persist it immediately."""
        self.level = to_level(level)
        self.store.save(self.level)
        return self.level
