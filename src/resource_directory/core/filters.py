"""Filtering of catalog entries by listing facets."""

import unicodedata
from typing import Callable, Sequence

from resource_directory.core.entities import (
    City,
    Entry,
    FilteredView,
    FilterState,
    LiteracyLevel,
    Pricing,
    RecommendationCategory,
)

Predicate = Callable[[Entry], bool]


def parse_level(value: object) -> int:
    """
    Ordinal value of a literacy level.

    Args:
        value: A LiteracyLevel, its string value or an int

    Returns:
        The integer level, or 0 if the value cannot be parsed
    """
    if isinstance(value, LiteracyLevel):
        value = value.value
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


# Letters NFKD leaves whole but collation expands
LIGATURES = str.maketrans({
    "Æ": "AE", "æ": "ae",
    "Œ": "OE", "œ": "oe",
    "Ø": "O", "ø": "o",
    "Đ": "D", "đ": "d",
    "Ð": "D", "ð": "d",
    "Þ": "TH", "þ": "th",
    "Ł": "L", "ł": "l",
})


def _char_rank(ch: str) -> int:
    """Whitespace, punctuation, symbols, digits, then letters."""
    category = unicodedata.category(ch)
    if category.startswith("Z") or ch.isspace():
        return 0
    if category.startswith("P"):
        return 1
    if category.startswith("S"):
        return 2
    if category.startswith("N"):
        return 3
    return 4


def title_sort_key(title: str) -> tuple[tuple[tuple[int, str], ...], str, str]:
    """Sort key approximating a locale-aware title comparison.

    Case and accents are ignored first, with spaces, punctuation, symbols
    and digits ahead of letters. Accents then decide, then lowercase sorts
    before uppercase.
    """
    decomposed = unicodedata.normalize("NFKD", title.translate(LIGATURES))
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    primary = tuple((_char_rank(ch), ch) for ch in base)
    return primary, decomposed.casefold(), title.swapcase()


def sort_by_title(entries: Sequence[Entry]) -> list[Entry]:
    return sorted(entries, key=lambda entry: title_sort_key(entry.title))


def active_predicates(state: FilterState, filter_by_city: bool = False) -> list[Predicate]:
    """Build predicates for every active facet, in stage order."""
    predicates: list[Predicate] = []

    if state.free_only:
        predicates.append(lambda entry: Pricing.FREE in entry.pricing)

    if state.category != RecommendationCategory.ALL:
        category = state.category
        predicates.append(lambda entry: category in entry.category)

    if state.max_complexity != LiteracyLevel.LEVEL_4:
        max_level = parse_level(state.max_complexity)
        predicates.append(lambda entry: parse_level(entry.literacy_level) <= max_level)

    # City is part of the form but only narrows when explicitly enabled
    if filter_by_city and state.city != City.ALL:
        city = state.city
        predicates.append(lambda entry: entry.city == city)

    return predicates


def apply_filters(
    entries: Sequence[Entry],
    state: FilterState,
    *,
    compositional: bool = False,
    filter_by_city: bool = False,
) -> list[Entry]:
    """
    Filter and sort entries for the given form state.

    By default every active stage narrows the original entries rather than
    the previous stage's result, so only the last active stage shows in the
    output. With compositional=True all active stages must match.

    Args:
        entries: Catalog entries, never modified
        state: Current filter form values
        compositional: AND all active facets together
        filter_by_city: Narrow by the selected city

    Returns:
        New list of matching entries sorted by title
    """
    predicates = active_predicates(state, filter_by_city)

    if compositional:
        result = [entry for entry in entries if all(p(entry) for p in predicates)]
    else:
        result = list(entries)
        for predicate in predicates:
            result = [entry for entry in entries if predicate(entry)]

    return sort_by_title(result)


def filter_catalog(
    entries: Sequence[Entry],
    state: FilterState,
    *,
    compositional: bool = False,
    filter_by_city: bool = False,
) -> FilteredView:
    """Apply filters and report how many entries were hidden."""
    filtered = apply_filters(
        entries, state, compositional=compositional, filter_by_city=filter_by_city
    )
    return FilteredView(entries=filtered, total=len(entries))
