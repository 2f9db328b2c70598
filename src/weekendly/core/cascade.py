"""Reorder and edit-cascade recomputation - pure, no I/O.

Two distinct anchoring strategies live here:

- reorder_day restarts the whole day at its bound start and packs every
  activity back to back in the given order.
- cascade_edit keeps the edited activity where the user put it and only
  shifts what follows it, evicting anything pushed past the day's end.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .bounds import get_day_time_bounds
from .schedule import Day, DayTimeBounds, ScheduledActivity


@dataclass
class CascadeResult:
    """Day list after a cascade, plus anything that fell off the end."""

    kept: list[ScheduledActivity] = field(default_factory=list)
    evicted: list[ScheduledActivity] = field(default_factory=list)


def reorder_day(
    new_order: list[ScheduledActivity],
    day: Day,
    bounds: DayTimeBounds,
    now: datetime | None = None,
) -> list[ScheduledActivity]:
    """
    Recompute times for a new ordering, back to back from the day's start.

    Prior start times are ignored; each activity keeps its custom duration
    or, failing that, the length it had before the reorder.
    """
    cursor = get_day_time_bounds(day, bounds, now).start
    reordered = []
    for activity in new_order:
        moved = activity.moved_to(cursor)
        reordered.append(moved)
        cursor = moved.end_time
    return reordered


def cascade_edit(
    activities: list[ScheduledActivity],
    edited: ScheduledActivity,
    day_end: datetime,
) -> CascadeResult:
    """
    Shift every activity after `edited` to follow it back to back.

    `activities` is the day as it was before the edit; `edited` is the
    updated record with the same id and takes its place in time order by its
    new start. Successors keep their durations. The first successor that would
    run past `day_end` is evicted along with everything after it. Activities
    before the edited one are untouched, and the edited one is never clipped.
    """
    others = [a for a in activities if a.id != edited.id]
    if len(others) == len(activities):
        raise ValueError(f"Activity {edited.id!r} is not in this day")

    # The edited record sorts ahead of anything sharing its start
    ordered = sorted([*others, edited], key=lambda a: (a.start_time, a.id != edited.id))
    index = next(i for i, a in enumerate(ordered) if a is edited)

    result = CascadeResult(kept=ordered[: index + 1])
    cursor = edited.end_time

    for position, successor in enumerate(ordered[index + 1 :], start=index + 1):
        moved = successor.moved_to(cursor)
        if moved.end_time > day_end:
            result.evicted = ordered[position:]
            break
        result.kept.append(moved)
        cursor = moved.end_time

    return result
