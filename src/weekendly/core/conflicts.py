"""Pure conflict detection for manual time edits - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime

from .schedule import ScheduledActivity

START = "start"
END = "end"
OVERLAP = "overlap"


@dataclass
class ConflictResult:
    """Outcome of checking a candidate interval against its siblings."""

    has_conflict: bool
    conflict_type: str | None = None
    conflicting_id: str | None = None


def check_time_conflicts(
    activities: list[ScheduledActivity],
    exclude_id: str,
    new_start: datetime,
    new_end: datetime,
) -> ConflictResult:
    """
    Check a candidate [new_start, new_end) against every sibling but `exclude_id`.

    Siblings are tested in the given order and the first hit wins. Per
    sibling the classification order is start, end, then overlap.
    """
    for other in activities:
        if other.id == exclude_id:
            continue

        # Candidate starts inside the sibling
        if other.start_time <= new_start < other.end_time:
            return ConflictResult(True, START, other.id)

        # Candidate ends inside the sibling
        if other.start_time < new_end <= other.end_time:
            return ConflictResult(True, END, other.id)

        # Candidate swallows the sibling whole
        if new_start < other.start_time and new_end > other.end_time:
            return ConflictResult(True, OVERLAP, other.id)

    return ConflictResult(False)


def conflict_message(conflict_type: str | None) -> str:
    """User-facing remediation hint for a conflict kind."""
    match conflict_type:
        case "start":
            return (
                "Start time conflicts with the previous activity. Try moving the activity "
                "to a different position or adjust the previous activity's end time."
            )
        case "end":
            return (
                "End time conflicts with the next activity. Try moving the activity "
                "to a different position or adjust the next activity's start time."
            )
        case "overlap":
            return (
                "This time range overlaps with another activity. Try moving the activity "
                "to a different position or adjust the overlapping activity's time."
            )
        case _:
            return "Time conflict detected. Try moving the activity to a different position."
