"""Resolve a plannable day to concrete instants for the coming weekend."""

from datetime import date, datetime, time, timedelta

from .schedule import Day, DayTimeBounds
from .timeutils import TimeSlot


def _sunday_based_weekday(d: datetime) -> int:
    """Day of week with Sunday=0 ... Saturday=6."""
    return (d.weekday() + 1) % 7


def weekend_date(day: Day, now: datetime | None = None) -> date:
    """
    The calendar date of the next Saturday or Sunday.

    Saturday is today when run on a Saturday. Sunday is the day after the
    coming Saturday, so running on a Sunday points a week ahead.
    """
    now = now or datetime.now()
    dow = _sunday_based_weekday(now)
    offset = 6 - dow if day is Day.SATURDAY else 7 - dow
    return (now + timedelta(days=offset)).date()


def get_day_time_bounds(
    day: Day,
    bounds: DayTimeBounds,
    now: datetime | None = None,
) -> TimeSlot:
    """
    Map a day and its hour bounds to concrete start/end instants.

    Pure apart from defaulting `now`. Recomputed on every call, so results
    shift when the real date moves into a new week.
    """
    d = weekend_date(day, now)
    return TimeSlot(
        start=datetime.combine(d, time(bounds.start_hour, 0)),
        end=datetime.combine(d, time(bounds.end_hour, 0)),
    )
