"""Activity domain records - catalog entries, templates and placeholders."""

from dataclasses import dataclass, field, asdict
from enum import Enum

CATALOG_CATEGORIES = (
    "food",
    "outdoor",
    "entertainment",
    "wellness",
    "social",
    "creative",
    "learning",
    "home",
)

# Display categories used by activities synthesized from a place lookup
LOCATION_CATEGORIES = (
    "Food & Dining",
    "Culture",
    "Fitness",
    "Shopping",
    "Adventure",
    "Outdoor",
    "Entertainment",
)

MOODS = ("energetic", "relaxed", "happy", "adventurous", "cozy", "productive", "social")

UNRESOLVED_DURATION = 60


class WeekendTheme(Enum):
    """Overall flavour of a weekend plan."""

    LAZY = "lazy"
    ADVENTUROUS = "adventurous"
    FAMILY = "family"
    ROMANTIC = "romantic"
    PRODUCTIVE = "productive"
    SOCIAL = "social"
    WELLNESS = "wellness"
    CULTURAL = "cultural"


@dataclass(frozen=True)
class LocationData:
    """Where a location-derived activity takes place."""

    name: str
    address: str
    lat: float
    lng: float
    rating: float | None = None
    price_level: int | None = None
    is_open: bool | None = None
    photo_url: str | None = None


@dataclass(frozen=True)
class Activity:
    """An activity that can be placed on a day. Never mutated."""

    id: str
    name: str
    category: str
    description: str
    duration: int
    icon: str
    mood: tuple[str, ...] = ()
    is_flexible: bool = True
    tags: tuple[str, ...] = ()
    color: str = "#3B82F6"
    is_location_based: bool = False
    location: LocationData | None = None

    def __post_init__(self):
        if self.duration <= 0:
            raise ValueError(f"Activity {self.id!r} needs a positive duration, got {self.duration}")
        if self.category not in CATALOG_CATEGORIES + LOCATION_CATEGORIES:
            raise ValueError(f"Activity {self.id!r} has unknown category {self.category!r}")
        unknown_moods = [m for m in self.mood if m not in MOODS]
        if unknown_moods:
            raise ValueError(f"Activity {self.id!r} has unknown moods {unknown_moods}")

    def to_dict(self) -> dict:
        data = asdict(self)
        data["mood"] = list(self.mood)
        data["tags"] = list(self.tags)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Activity":
        location = data.get("location")
        return cls(
            id=data["id"],
            name=data["name"],
            category=data["category"],
            description=data.get("description", ""),
            duration=int(data["duration"]),
            icon=data.get("icon", ""),
            mood=tuple(data.get("mood", ())),
            is_flexible=data.get("is_flexible", True),
            tags=tuple(data.get("tags", ())),
            color=data.get("color", "#3B82F6"),
            is_location_based=data.get("is_location_based", False),
            location=LocationData(**location) if location else None,
        )


@dataclass(frozen=True)
class UnresolvedActivity:
    """
    Stand-in for a scheduled activity whose id is in neither the
    inline snapshot nor the catalog.

    Carries a fixed default duration so aggregates stay computable.
    """

    id: str
    name: str = "Unknown Activity"
    category: str = "outdoor"
    description: str = "Location-based activity"
    duration: int = UNRESOLVED_DURATION
    icon: str = "📍"
    mood: tuple[str, ...] = ("happy",)
    is_flexible: bool = True
    tags: tuple[str, ...] = ("location-based",)
    color: str = "#3B82F6"
    is_location_based: bool = False
    location: LocationData | None = None

    @classmethod
    def for_id(cls, activity_id: str) -> "UnresolvedActivity":
        name = "Location Activity" if activity_id.startswith("loc-") else "Unknown Activity"
        return cls(id=activity_id, name=name)


@dataclass(frozen=True)
class WeekendTemplate:
    """A canned set of activity suggestions for a themed weekend."""

    id: str
    name: str
    description: str
    theme: WeekendTheme
    icon: str
    suggested_activities: tuple[str, ...] = field(default_factory=tuple)
