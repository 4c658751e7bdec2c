"""Core domain entities."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class RecommendationCategory(str, Enum):
    """Category of a recommendation."""

    NEWSPAPER = "newspaper"
    MAGAZINE = "magazine"
    BLOG = "blog"
    SOFTWARE = "software"
    SOCIAL_NETWORK = "social network"
    SITE_BUILDER = "site builder"
    FORUM = "forum"
    ORGANIZATION = "organization"
    EVENTS = "events"
    OTHER = "other"
    ALL = "all"


class OperatingSystem(str, Enum):
    """Platform a recommendation runs on."""

    IOS = "ios"
    ANDROID = "android"
    WINDOWS = "windows"
    MAC = "mac"
    LINUX = "linux"
    WEB = "web"


class Pricing(str, Enum):
    FREE = "free"
    PAID = "paid"


class Membership(str, Enum):
    OPEN = "open"
    APPLICATION = "application"
    QUEUE = "queue"


class Feed(str, Enum):
    RSS = "RSS"
    NEWSLETTER = "Newsletter"


class LiteracyLevel(str, Enum):
    """Self-reported technical sophistication, lowest first."""

    LEVEL_0 = "0"
    LEVEL_1 = "1"
    LEVEL_2 = "2"
    LEVEL_3 = "3"
    LEVEL_4 = "4"


class City(str, Enum):
    """Declared city labels.

    ALL means "no filter", DIGITAL_FIRST means "not city specific".
    """

    ALL = "All"
    DIGITAL_FIRST = "Digital First"
    NEW_YORK = "New York, NY, USA"
    CHICAGO = "Chicago, IL, USA"
    WORCHESTER = "Worchester, MA, USA"
    BRISBANE = "Brisbane, QLD, AU"

    @property
    def is_specific(self) -> bool:
        return self not in (City.ALL, City.DIGITAL_FIRST)

    @property
    def short_name(self) -> str:
        """City name without region and country."""
        return self.value.split(",")[0]


@dataclass(frozen=True)
class Entry:
    """A single recommendation in the catalog."""

    url: str
    title: str
    headline: str
    category: tuple[RecommendationCategory, ...]
    operating_system: tuple[OperatingSystem, ...]
    pricing: tuple[Pricing, ...]
    literacy_level: LiteracyLevel
    date_added: date
    membership: Optional[Membership] = None
    last_updated: date = field(default_factory=date.today)
    city: City = City.DIGITAL_FIRST
    feeds: tuple[Feed, ...] = ()

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("Title cannot be empty")
        if not self.url:
            raise ValueError("URL cannot be empty")


@dataclass(frozen=True)
class LibraryItem:
    """Reading material listed in the library."""

    url: str
    title: str
    author: str
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("Title cannot be empty")
        if not self.url:
            raise ValueError("URL cannot be empty")


@dataclass
class FilterState:
    """Current values of the listing filter form."""

    free_only: bool = False
    category: RecommendationCategory = RecommendationCategory.ALL
    max_complexity: LiteracyLevel = LiteracyLevel.LEVEL_4
    city: City = City.ALL


@dataclass
class FilteredView:
    """Filtered entries plus how many catalog entries were hidden."""

    entries: list[Entry]
    total: int

    @property
    def hidden_count(self) -> int:
        return self.total - len(self.entries)
