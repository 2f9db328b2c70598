"""Scheduling records - placements, day bounds and the weekend plan."""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Protocol

from .activities import Activity, UnresolvedActivity, WeekendTheme
from .timeutils import add_minutes, minutes_between

logger = logging.getLogger(__name__)


class Day(Enum):
    """The two plannable days."""

    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ActivityLookup(Protocol):
    """Anything that can look an activity up by id (e.g. the static catalog)."""

    def get(self, activity_id: str) -> Activity | None: ...


@dataclass(frozen=True)
class DayTimeBounds:
    """Hours of the day within which activities may be placed."""

    start_hour: int = 9
    end_hour: int = 22

    def __post_init__(self):
        for hour in (self.start_hour, self.end_hour):
            if not 0 <= hour <= 23:
                raise ValueError(f"Hour must be between 0 and 23, got {hour}")
        if self.start_hour >= self.end_hour:
            raise ValueError(
                f"Start hour ({self.start_hour}) must be before end hour ({self.end_hour})"
            )

    def window_minutes(self) -> int:
        return (self.end_hour - self.start_hour) * 60

    def format(self) -> str:
        return f"{self.start_hour:02d}:00-{self.end_hour:02d}:00"

    @classmethod
    def parse(cls, value: str) -> "DayTimeBounds":
        """Parse "HH:MM-HH:MM" (minutes are ignored) or "H-H"."""
        start_str, sep, end_str = value.partition("-")
        if not sep:
            raise ValueError(f"Invalid hours {value!r}, expected HH:MM-HH:MM")
        try:
            return cls(int(start_str.split(":")[0]), int(end_str.split(":")[0]))
        except ValueError as e:
            raise ValueError(f"Invalid hours {value!r}: {e}") from e


@dataclass(frozen=True)
class CatalogRef:
    """The placement points at a catalog entry by id."""

    activity_id: str


@dataclass(frozen=True)
class InlineSnapshot:
    """The placement carries its own copy of the activity."""

    activity: Activity


@dataclass
class ScheduledActivity:
    """One placement of an activity on a day."""

    id: str
    activity_id: str
    start_time: datetime
    end_time: datetime
    day: Day
    custom_duration: int | None = None
    notes: str | None = None
    activity_data: Activity | None = None

    @property
    def source(self) -> CatalogRef | InlineSnapshot:
        if self.activity_data is not None:
            return InlineSnapshot(self.activity_data)
        return CatalogRef(self.activity_id)

    def span_minutes(self) -> int:
        """Length of the stored interval."""
        return minutes_between(self.start_time, self.end_time)

    def placed_duration(self) -> int:
        """Duration that moves with this placement: the override, else its current length."""
        if self.custom_duration is not None:
            return self.custom_duration
        return self.span_minutes()

    def moved_to(self, start: datetime, duration: int | None = None) -> "ScheduledActivity":
        """Copy of this placement starting at `start`, same identity."""
        minutes = self.placed_duration() if duration is None else duration
        return ScheduledActivity(
            id=self.id,
            activity_id=self.activity_id,
            start_time=start,
            end_time=add_minutes(start, minutes),
            day=self.day,
            custom_duration=self.custom_duration,
            notes=self.notes,
            activity_data=self.activity_data,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "activity_id": self.activity_id,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "day": self.day.value,
            "custom_duration": self.custom_duration,
            "notes": self.notes,
            "activity_data": self.activity_data.to_dict() if self.activity_data else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScheduledActivity":
        activity_data = data.get("activity_data")
        return cls(
            id=data["id"],
            activity_id=data["activity_id"],
            start_time=datetime.fromisoformat(data["start_time"]),
            end_time=datetime.fromisoformat(data["end_time"]),
            day=Day(data["day"]),
            custom_duration=data.get("custom_duration"),
            notes=data.get("notes"),
            activity_data=Activity.from_dict(activity_data) if activity_data else None,
        )


def _default_bounds() -> dict[Day, DayTimeBounds]:
    return {Day.SATURDAY: DayTimeBounds(), Day.SUNDAY: DayTimeBounds()}


@dataclass
class WeekendPlan:
    """Aggregate root: two ordered day lists plus their time bounds."""

    id: str
    name: str
    created_at: datetime
    updated_at: datetime
    theme: WeekendTheme | None = None
    saturday: list[ScheduledActivity] = field(default_factory=list)
    sunday: list[ScheduledActivity] = field(default_factory=list)
    time_bounds: dict[Day, DayTimeBounds] = field(default_factory=_default_bounds)

    def activities_for(self, day: Day) -> list[ScheduledActivity]:
        return self.saturday if day is Day.SATURDAY else self.sunday

    def set_activities(self, day: Day, activities: list[ScheduledActivity]) -> None:
        if day is Day.SATURDAY:
            self.saturday = activities
        else:
            self.sunday = activities

    def all_activities(self) -> list[ScheduledActivity]:
        return [*self.saturday, *self.sunday]

    def find(self, scheduled_id: str) -> ScheduledActivity | None:
        return next((s for s in self.all_activities() if s.id == scheduled_id), None)

    def bounds_for(self, day: Day) -> DayTimeBounds:
        return self.time_bounds.get(day, DayTimeBounds())

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "theme": self.theme.value if self.theme else None,
            "saturday": [s.to_dict() for s in self.saturday],
            "sunday": [s.to_dict() for s in self.sunday],
            "time_bounds": {
                day.value: {"start_hour": b.start_hour, "end_hour": b.end_hour}
                for day, b in self.time_bounds.items()
            },
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WeekendPlan":
        bounds = _default_bounds()
        for day_value, raw in (data.get("time_bounds") or {}).items():
            bounds[Day(day_value)] = DayTimeBounds(raw["start_hour"], raw["end_hour"])
        return cls(
            id=data["id"],
            name=data["name"],
            theme=WeekendTheme(data["theme"]) if data.get("theme") else None,
            saturday=[ScheduledActivity.from_dict(s) for s in data.get("saturday", [])],
            sunday=[ScheduledActivity.from_dict(s) for s in data.get("sunday", [])],
            time_bounds=bounds,
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
        )


def generate_id() -> str:
    return uuid.uuid4().hex[:9]


def resolve_activity(
    scheduled: ScheduledActivity,
    catalog: ActivityLookup,
) -> Activity | UnresolvedActivity:
    """
    Find the activity behind a placement.

    The inline snapshot wins, then the catalog by id. Anything else yields an
    UnresolvedActivity so callers can see the degraded state.
    """
    source = scheduled.source
    if isinstance(source, InlineSnapshot):
        return source.activity

    activity = catalog.get(source.activity_id)
    if activity is not None:
        return activity

    logger.warning(f"Activity {source.activity_id!r} not found, using placeholder")
    return UnresolvedActivity.for_id(source.activity_id)


def effective_duration(scheduled: ScheduledActivity, catalog: ActivityLookup) -> int:
    """Minutes a placement lasts: the custom override, else the activity's duration."""
    if scheduled.custom_duration is not None:
        return scheduled.custom_duration
    return resolve_activity(scheduled, catalog).duration


def sort_by_start(activities: list[ScheduledActivity]) -> list[ScheduledActivity]:
    """Sort placements by start time."""
    return sorted(activities, key=lambda s: s.start_time)
