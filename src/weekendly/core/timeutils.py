"""Pure time-interval helpers - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass
class TimeSlot:
    """A half-open [start, end) span of wall-clock time."""

    start: datetime
    end: datetime

    def duration_minutes(self) -> int:
        return minutes_between(self.start, self.end)

    def format(self) -> str:
        return f"{format_time(self.start)} - {format_time(self.end)} ({format_duration(self.duration_minutes())})"

    def contains(self, dt: datetime) -> bool:
        """Check if a datetime falls within this slot."""
        return self.start <= dt < self.end

    def overlaps(self, other: "TimeSlot") -> bool:
        """Check if this slot overlaps with another."""
        return overlaps(self.start, self.end, other.start, other.end)


def format_duration(minutes: int) -> str:
    """
    Format a duration as "1h 30m", "2h" or "45m".

    Zero parts are omitted; zero minutes renders as "0m".
    """
    hours, mins = divmod(int(minutes), 60)
    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def format_time(dt: datetime) -> str:
    """Format a datetime as 12-hour wall-clock time, e.g. "9:00 AM"."""
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {suffix}"


def overlaps(a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime) -> bool:
    """True iff the half-open intervals [a_start, a_end) and [b_start, b_end) intersect."""
    return a_start < b_end and b_start < a_end


def minutes_between(start: datetime, end: datetime) -> int:
    return int((end - start).total_seconds() / 60)


def gap_minutes(earlier_end: datetime, later_start: datetime) -> int:
    """Free minutes between two instants. Negative when they overlap."""
    return minutes_between(earlier_end, later_start)


def add_minutes(dt: datetime, minutes: int) -> datetime:
    return dt + timedelta(minutes=minutes)
