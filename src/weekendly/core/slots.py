"""Slot finding and capacity checks - pure, no I/O."""

from dataclasses import dataclass
from datetime import datetime

from .bounds import get_day_time_bounds
from .schedule import Day, DayTimeBounds, ScheduledActivity, sort_by_start
from .timeutils import TimeSlot, add_minutes, gap_minutes, minutes_between


@dataclass
class DayCapacity:
    """Aggregate free time for a day."""

    can_fit: bool
    total_used_minutes: int
    available_minutes: int


def find_next_available_slot(
    activities: list[ScheduledActivity],
    duration: int,
    day: Day,
    bounds: DayTimeBounds,
    now: datetime | None = None,
) -> datetime | None:
    """
    Earliest start at which `duration` minutes fit without overlap.

    Tries before the first activity, then each gap in order, then after the
    last one. Activities are clamped to the window and those entirely
    outside it are ignored, so the result never starts before the day opens.
    Returns None when nothing fits inside the day's bounds.
    """
    window = get_day_time_bounds(day, bounds, now)
    cursor = window.start

    for activity in sort_by_start(activities):
        if activity.end_time <= window.start or activity.start_time >= window.end:
            continue
        if gap_minutes(cursor, activity.start_time) >= duration:
            return cursor
        cursor = max(cursor, activity.end_time)

    if add_minutes(cursor, duration) <= window.end:
        return cursor

    return None


def check_day_capacity(
    activities: list[ScheduledActivity],
    day: Day,
    bounds: DayTimeBounds,
    now: datetime | None = None,
) -> DayCapacity:
    """
    Total free minutes left in the day.

    Time spent outside the window does not count. Only aggregate time is
    checked; free minutes may be split into gaps too small for a given
    activity. Use find_next_available_slot for placement.
    """
    window = get_day_time_bounds(day, bounds, now)
    used = sum(
        minutes_between(max(a.start_time, window.start), min(a.end_time, window.end))
        for a in activities
        if a.end_time > window.start and a.start_time < window.end
    )
    available = bounds.window_minutes() - used
    return DayCapacity(can_fit=available > 0, total_used_minutes=used, available_minutes=available)


def find_free_slots(
    activities: list[ScheduledActivity],
    day: Day,
    bounds: DayTimeBounds,
    now: datetime | None = None,
) -> list[TimeSlot]:
    """
    Free gaps inside the day's bounds, in order.

    Activities are clamped to the window; anything entirely outside it is
    ignored.
    """
    window = get_day_time_bounds(day, bounds, now)
    free_slots = []
    current_time = window.start

    for activity in sort_by_start(activities):
        if activity.end_time <= window.start or activity.start_time >= window.end:
            continue

        start = max(activity.start_time, window.start)
        end = min(activity.end_time, window.end)

        if start > current_time:
            free_slots.append(TimeSlot(start=current_time, end=start))

        current_time = max(current_time, end)

    if current_time < window.end:
        free_slots.append(TimeSlot(start=current_time, end=window.end))

    return free_slots
