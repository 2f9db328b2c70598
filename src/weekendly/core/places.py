"""Turn nearby place records into schedulable activities - pure, no I/O."""

import math
from dataclasses import dataclass, field

from .activities import Activity, LocationData

EARTH_RADIUS_KM = 6371
MAX_RESULTS = 20


@dataclass
class PlaceRecord:
    """A place returned by a lookup service."""

    name: str
    address: str
    lat: float
    lng: float
    categories: list[str] = field(default_factory=list)
    place_id: str = ""
    phone: str | None = None
    website: str | None = None
    opening_hours: str | None = None


@dataclass(frozen=True)
class ActivityType:
    """How one kind of place becomes an activity."""

    categories: tuple[str, ...]
    category: str
    icon: str
    duration: int
    moods: tuple[str, ...]
    color: str
    description: str


# Checked in order; the first type sharing a category with the place wins
ACTIVITY_TYPES: dict[str, ActivityType] = {
    "restaurant": ActivityType(
        categories=("catering.restaurant", "catering.fast_food", "catering.food_court"),
        category="Food & Dining",
        icon="🍽️",
        duration=90,
        moods=("happy", "social"),
        color="#F59E0B",
        description="Enjoy a delicious meal at this local restaurant",
    ),
    "cafe": ActivityType(
        categories=("catering.cafe", "catering.ice_cream"),
        category="Food & Dining",
        icon="☕",
        duration=60,
        moods=("relaxed", "cozy"),
        color="#F59E0B",
        description="Relax with coffee and treats at this cozy spot",
    ),
    "park": ActivityType(
        categories=("leisure.park", "natural.water", "natural.forest"),
        category="Outdoor",
        icon="🌳",
        duration=120,
        moods=("relaxed", "energetic"),
        color="#10B981",
        description="Spend time outdoors in this beautiful park",
    ),
    "museum": ActivityType(
        categories=("entertainment.museum", "entertainment.culture", "tourism.attraction"),
        category="Culture",
        icon="🏛️",
        duration=180,
        moods=("productive", "happy"),
        color="#3B82F6",
        description="Explore culture and history at this museum",
    ),
    "fitness": ActivityType(
        categories=("sport.fitness", "sport.swimming_pool", "sport.sports_centre"),
        category="Fitness",
        icon="💪",
        duration=90,
        moods=("energetic", "productive"),
        color="#EC4899",
        description="Stay active with a workout session",
    ),
    "shopping": ActivityType(
        categories=("commercial.shopping_mall", "commercial.marketplace", "commercial.department_store"),
        category="Shopping",
        icon="🛍️",
        duration=120,
        moods=("happy", "social"),
        color="#8B5CF6",
        description="Browse shops and discover new finds",
    ),
    "entertainment": ActivityType(
        categories=("entertainment.cinema", "entertainment", "entertainment.activity_park"),
        category="Entertainment",
        icon="🎬",
        duration=150,
        moods=("relaxed", "happy"),
        color="#8B5CF6",
        description="Enjoy entertainment and activities",
    ),
    "attraction": ActivityType(
        categories=("tourism.attraction", "tourism.sights", "entertainment.zoo"),
        category="Adventure",
        icon="🎢",
        duration=240,
        moods=("adventurous", "energetic"),
        color="#EF4444",
        description="Experience this popular local attraction",
    ),
}

DEFAULT_ACTIVITY_TYPE = "restaurant"

# Used when a search names no activity types
DEFAULT_SEARCH_CATEGORIES = (
    "catering.restaurant",
    "catering.cafe",
    "leisure.park",
    "entertainment.museum",
    "sport.fitness",
    "commercial.shopping_mall",
    "entertainment.cinema",
    "tourism.attraction",
)


def expand_categories(activity_types: list[str] | None) -> list[str]:
    """Translate activity type names into lookup categories. Unknown names are skipped."""
    if not activity_types:
        return list(DEFAULT_SEARCH_CATEGORIES)
    expanded = []
    for name in activity_types:
        mapping = ACTIVITY_TYPES.get(name)
        if mapping:
            expanded.extend(c for c in mapping.categories if c not in expanded)
    return expanded or list(DEFAULT_SEARCH_CATEGORIES)


def determine_activity_type(categories: list[str]) -> str:
    for name, mapping in ACTIVITY_TYPES.items():
        if any(c in categories for c in mapping.categories):
            return name
    return DEFAULT_ACTIVITY_TYPE


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two coordinates in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def filter_within_radius(
    places: list[PlaceRecord],
    lat: float,
    lng: float,
    radius_meters: int,
    limit: int = MAX_RESULTS,
) -> list[PlaceRecord]:
    """Keep places within the radius, nearest first, capped at `limit`."""
    with_distance = [(haversine_km(lat, lng, p.lat, p.lng), p) for p in places]
    nearby = [(d, p) for d, p in with_distance if d <= radius_meters / 1000]
    nearby.sort(key=lambda item: item[0])
    return [p for _, p in nearby[:limit]]


def describe_place(place: PlaceRecord, activity_type: str) -> str:
    """Short description from the place's categories and contact details."""
    readable = [c.split(".")[-1].replace("_", " ") for c in place.categories][:2]
    description = ", ".join(r for r in readable if r)

    contact = []
    if place.phone:
        contact.append("📞")
    if place.website:
        contact.append("🌐")
    if contact:
        description = f"{description} • {' '.join(contact)}" if description else " ".join(contact)

    if place.opening_hours and "24" in place.opening_hours.lower():
        description = f"{description} • 24h" if description else "24h"

    return description or ACTIVITY_TYPES[activity_type].description


def place_to_activity(place: PlaceRecord, index: int = 0) -> Activity:
    """Synthesize a location-based Activity from a place record."""
    activity_type = determine_activity_type(place.categories)
    mapping = ACTIVITY_TYPES[activity_type]
    place_id = place.place_id or f"geoapify-{round(place.lat * 1000)}-{round(place.lng * 1000)}-{index}"
    name = place.name or "Unnamed Location"

    return Activity(
        id=f"loc-{place_id}",
        name=name,
        category=mapping.category,
        description=describe_place(place, activity_type),
        duration=mapping.duration,
        icon=mapping.icon,
        mood=mapping.moods,
        is_flexible=True,
        tags=("location-based", activity_type),
        color=mapping.color,
        is_location_based=True,
        location=LocationData(
            name=name,
            address=place.address or "Address not available",
            lat=place.lat,
            lng=place.lng,
        ),
    )


def places_to_activities(places: list[PlaceRecord]) -> list[Activity]:
    return [place_to_activity(place, i) for i, place in enumerate(places)]
