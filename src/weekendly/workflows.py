"""Shared workflow layer between the CLI and the plan store.

Each workflow loads state through the repository, runs store operations,
and writes state back.
"""

import logging
from datetime import datetime, time

from .adapters.file_plans import FilePlanRepository
from .adapters.geoapify import GeoapifyPlacesAdapter
from .catalog import Catalog
from .config import Config
from .core.activities import Activity, WeekendTheme
from .core.bounds import weekend_date
from .core.places import places_to_activities
from .core.schedule import Day, WeekendPlan
from .ports import PlaceLookup, PlanRepository
from .store import PlanStore

logger = logging.getLogger(__name__)


def get_repository(config: Config) -> FilePlanRepository:
    """Resolve the plan data directory from config."""
    return FilePlanRepository(config.resolved_data_dir())


def load_store(repo: PlanRepository, catalog: Catalog | None = None) -> PlanStore:
    """Rebuild a store from the last persisted state."""
    return PlanStore(catalog=catalog, current_plan=repo.load(), saved_plans=repo.load_all())


def save_store(store: PlanStore, repo: PlanRepository) -> None:
    repo.save(store.current_plan)
    repo.save_all(store.saved_plans)


def ensure_plan(
    store: PlanStore,
    config: Config,
    name: str | None = None,
    theme: WeekendTheme | None = None,
) -> WeekendPlan:
    """Return the current plan, creating one with configured hours if needed."""
    if store.current_plan is None:
        store.create_new_plan(
            name=name or config.plan_name,
            theme=theme,
            time_bounds={day: config.time_bounds(day) for day in Day},
        )
        logger.info(f"Started new plan {store.current_plan.id}")
    return store.current_plan


def parse_clock(day: Day, value: str, now: datetime | None = None) -> datetime:
    """Turn "HH:MM" into an instant on the coming Saturday or Sunday."""
    try:
        hours, _, minutes = value.partition(":")
        clock = time(int(hours), int(minutes or 0))
    except ValueError as e:
        raise ValueError(f"Invalid time {value!r}, expected HH:MM") from e
    return datetime.combine(weekend_date(day, now), clock)


def find_nearby_activities(
    config: Config,
    lat: float,
    lng: float,
    radius: int | None = None,
    activity_types: list[str] | None = None,
    lookup: PlaceLookup | None = None,
) -> list[Activity]:
    """Search for places near a coordinate and convert them into activities."""
    lookup = lookup or GeoapifyPlacesAdapter(config.geoapify_api_key)
    places = lookup.search(lat, lng, radius or config.search_radius, activity_types)
    logger.debug(f"Found {len(places)} places near {lat},{lng}")
    return places_to_activities(places)
