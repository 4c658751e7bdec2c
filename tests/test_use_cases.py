"""Tests for use cases."""

from datetime import date
from unittest.mock import Mock

import pytest

from resource_directory.core import (
    City,
    Entry,
    FilterState,
    InMemoryPreferenceStore,
    LiteracyLevel,
    OperatingSystem,
    Pricing,
    RecommendationCategory,
    YamlPreferenceStore,
)
from resource_directory.use_cases import (
    FilterFormController,
    LiteracyLevelSelector,
    default_filter_state,
)


def make_entry(title: str, pricing: Pricing, category: RecommendationCategory, level: str) -> Entry:
    return Entry(
        url=f"https://example.com/{title.lower()}",
        title=title,
        headline="",
        category=(category,),
        operating_system=(OperatingSystem.WEB,),
        pricing=(pricing,),
        literacy_level=LiteracyLevel(level),
        date_added=date(2024, 1, 1),
    )


@pytest.fixture
def entries() -> list[Entry]:
    return [
        make_entry("B", Pricing.FREE, RecommendationCategory.BLOG, "2"),
        make_entry("A", Pricing.PAID, RecommendationCategory.NEWSPAPER, "0"),
        make_entry("C", Pricing.FREE, RecommendationCategory.FORUM, "4"),
    ]


def test_controller_defaults_without_stored_preference(entries) -> None:
    controller = FilterFormController(entries, InMemoryPreferenceStore())

    assert controller.state == default_filter_state()
    assert [e.title for e in controller.filtered_entries] == ["A", "B", "C"]
    assert controller.hidden_count == 0


def test_controller_reads_stored_preference(entries) -> None:
    store = InMemoryPreferenceStore(LiteracyLevel.LEVEL_2)

    controller = FilterFormController(entries, store)

    assert controller.state.max_complexity == LiteracyLevel.LEVEL_2
    assert [e.title for e in controller.filtered_entries] == ["A", "B"]
    assert controller.hidden_count == 1


def test_controller_ignores_invalid_stored_preference(entries) -> None:
    controller = FilterFormController(entries, InMemoryPreferenceStore("9"))

    assert controller.state.max_complexity == LiteracyLevel.LEVEL_4


def test_default_options_override_stored_preference(entries) -> None:
    store = InMemoryPreferenceStore(LiteracyLevel.LEVEL_1)

    controller = FilterFormController(
        entries,
        store,
        default_options={"max_complexity": "3", "category": "blog", "city": "Chicago, IL, USA"},
    )

    assert controller.state == FilterState(
        free_only=False,
        category=RecommendationCategory.BLOG,
        max_complexity=LiteracyLevel.LEVEL_3,
        city=City.CHICAGO,
    )
    # Construction never writes
    assert store.writes == []


def test_unknown_default_option(entries) -> None:
    with pytest.raises(ValueError, match="Unknown filter field"):
        FilterFormController(entries, InMemoryPreferenceStore(), default_options={"color": "red"})


def test_hide_options_only_affect_visible_fields(entries) -> None:
    controller = FilterFormController(
        entries,
        InMemoryPreferenceStore(),
        hide_options={"city": True, "category": False},
    )

    assert controller.visible_fields == ["free_only", "category", "max_complexity"]
    assert controller.state.city == City.ALL


def test_only_max_complexity_persists(entries) -> None:
    store = Mock()
    store.load.return_value = None
    controller = FilterFormController(entries, store)

    controller.set_free_only(True)
    controller.set_category("forum")
    controller.set_city("Chicago, IL, USA")
    store.save.assert_not_called()

    controller.set_max_complexity("1")
    store.save.assert_called_once_with(LiteracyLevel.LEVEL_1)


def test_rapid_changes_last_write_wins(entries) -> None:
    store = InMemoryPreferenceStore()
    controller = FilterFormController(entries, store)

    for level in ["0", "3", "1", "2"]:
        controller.update("max_complexity", level)

    assert store.load() == LiteracyLevel.LEVEL_2
    assert store.writes[-1] == LiteracyLevel.LEVEL_2
    assert len(store.writes) == 4


def test_update_dispatches_fields(entries) -> None:
    controller = FilterFormController(entries, InMemoryPreferenceStore())

    controller.update("free_only", True)
    controller.update("category", "blog")
    controller.update("max_complexity", 3)

    assert controller.state == FilterState(
        free_only=True,
        category=RecommendationCategory.BLOG,
        max_complexity=LiteracyLevel.LEVEL_3,
        city=City.ALL,
    )


def test_update_rejects_unknown_values(entries) -> None:
    controller = FilterFormController(entries, InMemoryPreferenceStore())

    with pytest.raises(ValueError):
        controller.update("category", "podcast")
    with pytest.raises(ValueError, match="Unknown filter field"):
        controller.update("sort", "title")


def test_filters_follow_last_active_stage(entries) -> None:
    controller = FilterFormController(entries, InMemoryPreferenceStore())

    controller.set_free_only(True)
    assert [e.title for e in controller.filtered_entries] == ["B", "C"]

    controller.set_category("newspaper")
    assert [e.title for e in controller.filtered_entries] == ["A"]


def test_compositional_controller(entries) -> None:
    controller = FilterFormController(entries, InMemoryPreferenceStore(), compositional=True)

    controller.set_free_only(True)
    controller.set_category("newspaper")

    assert controller.filtered_entries == []
    assert controller.hidden_count == 3


def test_reset_to_defaults(entries) -> None:
    store = InMemoryPreferenceStore()
    controller = FilterFormController(entries, store)
    controller.update("free_only", True)
    controller.update("category", "blog")
    controller.update("max_complexity", "1")
    controller.update("city", "Brisbane, QLD, AU")

    controller.reset_to_defaults()

    assert controller.state == default_filter_state()
    assert store.load() == LiteracyLevel.LEVEL_4
    assert controller.hidden_count == 0


def test_selector_defaults_to_lowest_level() -> None:
    """Selector and controller keep their own defaults."""
    store = InMemoryPreferenceStore()

    selector = LiteracyLevelSelector(store)
    controller = FilterFormController([], store)

    assert selector.level == LiteracyLevel.LEVEL_0
    assert controller.state.max_complexity == LiteracyLevel.LEVEL_4
    assert store.writes == []


def test_selector_reads_stored_level() -> None:
    selector = LiteracyLevelSelector(InMemoryPreferenceStore("3"))

    assert selector.level == LiteracyLevel.LEVEL_3


def test_selector_select_persists() -> None:
    store = InMemoryPreferenceStore()
    selector = LiteracyLevelSelector(store)

    selector.select("2")
    selector.select(LiteracyLevel.LEVEL_1)

    assert selector.level == LiteracyLevel.LEVEL_1
    assert store.writes == [LiteracyLevel.LEVEL_2, LiteracyLevel.LEVEL_1]
    # Controller picks up the selector's choice
    assert FilterFormController([], store).state.max_complexity == LiteracyLevel.LEVEL_1


def test_selector_options() -> None:
    options = LiteracyLevelSelector(InMemoryPreferenceStore()).options()

    assert [option.level for option in options] == list(LiteracyLevel)
    assert options[0].description == "I can just barely operate a web browser."
    assert options[4].url is not None
    assert all(option.url is None for option in options[:4])


def test_selector_rejects_unknown_level() -> None:
    store = InMemoryPreferenceStore()
    selector = LiteracyLevelSelector(store)

    with pytest.raises(ValueError):
        selector.select("5")
    assert store.writes == []


@pytest.mark.parametrize("raw, expected", [
    ("false", False),
    ("0", False),
    ("off", False),
    ("", False),
    ("true", True),
    ("on", True),
    (" Yes ", True),
    (False, False),
    (1, True),
])
def test_free_only_form_values(entries, raw, expected) -> None:
    controller = FilterFormController(entries, InMemoryPreferenceStore())
    controller.set_free_only(True)

    controller.update("free_only", raw)

    assert controller.state.free_only is expected


def test_free_only_rejects_unknown_string(entries) -> None:
    controller = FilterFormController(entries, InMemoryPreferenceStore())

    with pytest.raises(ValueError, match="Not a boolean"):
        controller.update("free_only", "maybe")
    assert controller.state.free_only is False


def test_free_only_default_option_string(entries) -> None:
    controller = FilterFormController(entries, InMemoryPreferenceStore(), default_options={"free_only": "false"})

    assert controller.state.free_only is False
    assert controller.hidden_count == 0


def test_undecodable_preference_file_uses_defaults(tmp_path) -> None:
    path = tmp_path / "prefs.yaml"
    path.write_bytes(b"\xff\xfe\x00")
    store = YamlPreferenceStore(path)

    assert FilterFormController([], store).state.max_complexity == LiteracyLevel.LEVEL_4
    assert LiteracyLevelSelector(store).level == LiteracyLevel.LEVEL_0
