"""Functional core - pure scheduling logic with no I/O."""

from .activities import Activity, LocationData, UnresolvedActivity, WeekendTemplate, WeekendTheme
from .schedule import (
    CatalogRef,
    Day,
    DayTimeBounds,
    InlineSnapshot,
    ScheduledActivity,
    WeekendPlan,
    effective_duration,
    resolve_activity,
)
from .timeutils import TimeSlot, format_duration, format_time, overlaps
from .bounds import get_day_time_bounds
from .slots import DayCapacity, check_day_capacity, find_free_slots, find_next_available_slot
from .conflicts import ConflictResult, check_time_conflicts, conflict_message
from .cascade import CascadeResult, cascade_edit, reorder_day
from .errors import InsufficientCapacity, NoPlanActive, NoSlotAvailable, OutsideDayBounds, PlanError, TimeConflict

__all__ = [
    # Activities
    "Activity",
    "LocationData",
    "UnresolvedActivity",
    "WeekendTemplate",
    "WeekendTheme",
    # Schedule
    "CatalogRef",
    "Day",
    "DayTimeBounds",
    "InlineSnapshot",
    "ScheduledActivity",
    "WeekendPlan",
    "effective_duration",
    "resolve_activity",
    # Time
    "TimeSlot",
    "format_duration",
    "format_time",
    "overlaps",
    "get_day_time_bounds",
    # Placement
    "DayCapacity",
    "check_day_capacity",
    "find_free_slots",
    "find_next_available_slot",
    "ConflictResult",
    "check_time_conflicts",
    "conflict_message",
    "CascadeResult",
    "cascade_edit",
    "reorder_day",
    # Errors
    "PlanError",
    "NoPlanActive",
    "NoSlotAvailable",
    "InsufficientCapacity",
    "TimeConflict",
    "OutsideDayBounds",
]
