"""Scheduling failures that callers are expected to surface to the user."""

from .conflicts import conflict_message
from .schedule import Day
from .timeutils import format_duration


class PlanError(Exception):
    """Base class for recoverable planning failures."""

    pass


class NoPlanActive(PlanError):
    """Raised when an operation needs a current plan and there is none."""

    def __init__(self):
        super().__init__("No active plan. Run 'weekendly new' first.")


class NoSlotAvailable(PlanError):
    """No gap in the day's bounds is long enough for the requested duration."""

    def __init__(self, day: Day, duration: int):
        self.day = day
        self.duration = duration
        super().__init__(
            f"No free {format_duration(duration)} slot on {day.label}. "
            "Try the other day, shorten the activity, or widen the day's hours."
        )


class InsufficientCapacity(PlanError):
    """The day does not have enough free time left in total."""

    def __init__(self, day: Day, available: int, requested: int):
        self.day = day
        self.available = available
        self.requested = requested
        shortfall = requested - max(available, 0)
        super().__init__(
            f"{day.label} is too full: {format_duration(max(available, 0))} free, "
            f"{format_duration(requested)} needed ({format_duration(shortfall)} short)."
        )


class TimeConflict(PlanError):
    """A manual time edit collides with a sibling activity. Nothing was applied."""

    def __init__(self, conflict_type: str, conflicting_id: str | None = None):
        self.conflict_type = conflict_type
        self.conflicting_id = conflicting_id
        super().__init__(conflict_message(conflict_type))


class OutsideDayBounds(PlanError):
    """A placement would start before the day opens or run past its close."""

    def __init__(self, day: Day, window_label: str):
        self.day = day
        super().__init__(
            f"That time is outside {day.label}'s hours ({window_label}). "
            "Pick a time inside the day or change its hours with 'weekendly bounds'."
        )
