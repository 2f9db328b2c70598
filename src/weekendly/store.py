"""Plan store - owns the current weekend plan and applies scheduling operations.

The store holds state only in memory. Loading and saving it is the job of a
PlanRepository adapter, called before and after store operations.
"""

import logging
from datetime import datetime
from typing import Callable

from .catalog import Catalog
from .core.activities import Activity, UnresolvedActivity, WeekendTemplate, WeekendTheme
from .core.bounds import get_day_time_bounds
from .core.cascade import CascadeResult, cascade_edit, reorder_day
from .core.conflicts import check_time_conflicts
from .core.errors import (
    InsufficientCapacity,
    NoPlanActive,
    NoSlotAvailable,
    OutsideDayBounds,
    PlanError,
    TimeConflict,
)
from .core.schedule import (
    Day,
    DayTimeBounds,
    ScheduledActivity,
    WeekendPlan,
    effective_duration,
    generate_id,
    resolve_activity,
    sort_by_start,
)
from .core.slots import check_day_capacity, find_free_slots, find_next_available_slot
from .core.timeutils import TimeSlot, add_minutes

logger = logging.getLogger(__name__)

DEFAULT_PLAN_NAME = "My Weekend Plan"
TEMPLATE_ACTIVITIES_PER_DAY = 3

_UNSET = object()


def _check_duration(minutes: int | None) -> None:
    if minutes is not None and minutes <= 0:
        raise ValueError(f"Duration must be positive, got {minutes}")


class PlanStore:
    """
    Single-writer owner of the current WeekendPlan and the saved plans.

    Mutators refresh the plan's updated_at. When there is no current plan
    they log a warning and do nothing; use require_plan() to fail loudly.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        current_plan: WeekendPlan | None = None,
        saved_plans: list[WeekendPlan] | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.catalog = catalog or Catalog()
        self.current_plan = current_plan
        self.saved_plans = list(saved_plans or [])
        self.selected_theme = current_plan.theme if current_plan else None
        self._clock = clock or datetime.now

    # ============== Helpers ==============

    def now(self) -> datetime:
        return self._clock()

    def require_plan(self) -> WeekendPlan:
        if self.current_plan is None:
            raise NoPlanActive()
        return self.current_plan

    def _active_plan(self, action: str) -> WeekendPlan | None:
        if self.current_plan is None:
            logger.warning(f"Ignoring {action}: no active plan")
        return self.current_plan

    def _touch(self, plan: WeekendPlan) -> None:
        plan.updated_at = self.now()

    def _find(self, plan: WeekendPlan, scheduled_id: str) -> ScheduledActivity:
        scheduled = plan.find(scheduled_id)
        if scheduled is None:
            raise ValueError(f"No scheduled activity with id {scheduled_id!r}")
        return scheduled

    def day_window(self, day: Day) -> TimeSlot:
        plan = self.require_plan()
        return get_day_time_bounds(day, plan.bounds_for(day), self.now())

    def _check_within_day(self, day: Day, start: datetime, end: datetime) -> TimeSlot:
        window = self.day_window(day)
        if start < window.start or end > window.end:
            raise OutsideDayBounds(day, self.current_plan.bounds_for(day).format())
        return window

    # ============== Plan lifecycle ==============

    def create_new_plan(
        self,
        name: str = DEFAULT_PLAN_NAME,
        theme: WeekendTheme | None = None,
        time_bounds: dict[Day, DayTimeBounds] | None = None,
    ) -> WeekendPlan:
        now = self.now()
        plan = WeekendPlan(id=generate_id(), name=name, theme=theme, created_at=now, updated_at=now)
        if time_bounds:
            plan.time_bounds.update(time_bounds)
        self.current_plan = plan
        self.selected_theme = theme
        logger.debug(f"Created plan {plan.id} ({name})")
        return plan

    def clear_current_plan(self) -> None:
        self.current_plan = None
        self.selected_theme = None

    def set_theme(self, theme: WeekendTheme | None) -> None:
        self.selected_theme = theme
        if self.current_plan is not None:
            self.current_plan.theme = theme
            self._touch(self.current_plan)

    def set_time_bounds(self, day: Day, bounds: DayTimeBounds) -> None:
        """
        Change a day's hours.

        Existing placements are not evicted when the window narrows; the new
        bounds only constrain later placements and cascades.
        """
        plan = self._active_plan("set_time_bounds")
        if plan is None:
            return
        plan.time_bounds[day] = bounds
        self._touch(plan)

    def save_plan(self) -> WeekendPlan | None:
        """Copy the current plan into the saved list, replacing an older copy."""
        plan = self._active_plan("save_plan")
        if plan is None:
            return None
        self._touch(plan)
        snapshot = WeekendPlan.from_dict(plan.to_dict())
        for i, saved in enumerate(self.saved_plans):
            if saved.id == plan.id:
                self.saved_plans[i] = snapshot
                break
        else:
            self.saved_plans.append(snapshot)
        logger.info(f"Saved plan {plan.id} ({plan.name})")
        return snapshot

    def load_plan(self, plan_id: str) -> WeekendPlan | None:
        saved = next((p for p in self.saved_plans if p.id == plan_id), None)
        if saved is None:
            logger.warning(f"No saved plan with id {plan_id!r}")
            return None
        self.current_plan = WeekendPlan.from_dict(saved.to_dict())
        self.selected_theme = saved.theme
        return self.current_plan

    def delete_plan(self, plan_id: str) -> bool:
        remaining = [p for p in self.saved_plans if p.id != plan_id]
        deleted = len(remaining) != len(self.saved_plans)
        self.saved_plans = remaining
        if self.current_plan is not None and self.current_plan.id == plan_id:
            self.clear_current_plan()
        return deleted

    # ============== Placement ==============

    def add_activity_to_schedule(
        self,
        activity: Activity,
        day: Day,
        start_time: datetime,
        custom_duration: int | None = None,
    ) -> ScheduledActivity | None:
        """
        Place an activity at an explicit start time.

        Raises OutsideDayBounds if it would not fit inside the day's hours on
        that day's date, and TimeConflict if it would overlap an existing one.
        Location-based activities keep a copy of their data on the placement.
        """
        plan = self._active_plan("add_activity_to_schedule")
        if plan is None:
            return None
        _check_duration(custom_duration)

        duration = custom_duration if custom_duration is not None else activity.duration
        end_time = add_minutes(start_time, duration)
        day_activities = plan.activities_for(day)
        self._check_within_day(day, start_time, end_time)

        conflict = check_time_conflicts(day_activities, "", start_time, end_time)
        if conflict.has_conflict:
            raise TimeConflict(conflict.conflict_type, conflict.conflicting_id)

        scheduled = ScheduledActivity(
            id=generate_id(),
            activity_id=activity.id,
            start_time=start_time,
            end_time=end_time,
            day=day,
            custom_duration=custom_duration,
            activity_data=activity if activity.is_location_based else None,
        )
        plan.set_activities(day, sort_by_start([*day_activities, scheduled]))
        self._touch(plan)
        return scheduled

    def schedule_activity(
        self,
        activity: Activity,
        day: Day,
        custom_duration: int | None = None,
    ) -> ScheduledActivity | None:
        """
        Place an activity at the earliest free slot of the day.

        Raises InsufficientCapacity when the day lacks enough free time in
        total, and NoSlotAvailable when no single gap is long enough.
        """
        plan = self._active_plan("schedule_activity")
        if plan is None:
            return None
        _check_duration(custom_duration)

        duration = custom_duration if custom_duration is not None else activity.duration
        day_activities = plan.activities_for(day)
        bounds = plan.bounds_for(day)
        now = self.now()

        capacity = check_day_capacity(day_activities, day, bounds, now)
        if not capacity.can_fit or capacity.available_minutes < duration:
            raise InsufficientCapacity(day, capacity.available_minutes, duration)

        start = find_next_available_slot(day_activities, duration, day, bounds, now)
        if start is None:
            raise NoSlotAvailable(day, duration)

        return self.add_activity_to_schedule(activity, day, start, custom_duration)

    def remove_activity_from_schedule(self, scheduled_id: str) -> ScheduledActivity | None:
        plan = self._active_plan("remove_activity_from_schedule")
        if plan is None:
            return None
        removed = plan.find(scheduled_id)
        plan.saturday = [a for a in plan.saturday if a.id != scheduled_id]
        plan.sunday = [a for a in plan.sunday if a.id != scheduled_id]
        self._touch(plan)
        return removed

    def clear_day(self, day: Day) -> list[ScheduledActivity]:
        plan = self._active_plan("clear_day")
        if plan is None:
            return []
        removed = plan.activities_for(day)
        plan.set_activities(day, [])
        self._touch(plan)
        return removed

    # ============== Editing ==============

    def update_scheduled_activity(
        self,
        scheduled_id: str,
        notes=_UNSET,
        start_time: datetime | None = None,
        custom_duration: int | None = None,
    ) -> CascadeResult | None:
        """
        Edit a placement's notes, start time and/or custom duration.

        Time edits must keep the edited activity inside the day's hours
        (OutsideDayBounds) and clear of the activities that come before it
        (TimeConflict); either failure leaves the plan unchanged.
        Otherwise later activities cascade to follow it, and any pushed past
        the day's end are dropped and reported in the result's `evicted`.
        """
        plan = self._active_plan("update_scheduled_activity")
        if plan is None:
            return None
        _check_duration(custom_duration)

        scheduled = self._find(plan, scheduled_id)
        day = scheduled.day
        day_activities = plan.activities_for(day)

        if start_time is None and custom_duration is None:
            if notes is not _UNSET:
                scheduled.notes = notes or None
                self._touch(plan)
            return CascadeResult(kept=list(day_activities))

        new_start = start_time or scheduled.start_time
        new_custom = custom_duration if custom_duration is not None else scheduled.custom_duration
        duration = new_custom if new_custom is not None else effective_duration(scheduled, self.catalog)

        edited = ScheduledActivity(
            id=scheduled.id,
            activity_id=scheduled.activity_id,
            start_time=new_start,
            end_time=add_minutes(new_start, duration),
            day=day,
            custom_duration=new_custom,
            notes=scheduled.notes if notes is _UNSET else (notes or None),
            activity_data=scheduled.activity_data,
        )

        window = self._check_within_day(day, edited.start_time, edited.end_time)

        predecessors = [a for a in day_activities if a.id != scheduled.id and a.start_time < new_start]
        conflict = check_time_conflicts(predecessors, scheduled.id, edited.start_time, edited.end_time)
        if conflict.has_conflict:
            raise TimeConflict(conflict.conflict_type, conflict.conflicting_id)

        result = cascade_edit(day_activities, edited, window.end)
        plan.set_activities(day, result.kept)
        self._touch(plan)

        if result.evicted:
            names = ", ".join(self.resolve(a).name for a in result.evicted)
            logger.info(f"Edit pushed {len(result.evicted)} activities off {day.label}: {names}")
        return result

    def reorder_activities(self, day: Day, ordered_ids: list[str]) -> list[ScheduledActivity]:
        """
        Apply a new ordering to a day and repack it from the day's start.

        `ordered_ids` must name every placement of the day exactly once.
        """
        plan = self._active_plan("reorder_activities")
        if plan is None:
            return []

        by_id = {a.id: a for a in plan.activities_for(day)}
        if len(ordered_ids) != len(by_id) or set(ordered_ids) != set(by_id):
            raise ValueError(f"New order must list each {day.label} activity exactly once")

        reordered = reorder_day([by_id[i] for i in ordered_ids], day, plan.bounds_for(day), self.now())
        plan.set_activities(day, reordered)
        self._touch(plan)
        return reordered

    def move_activity(self, day: Day, scheduled_id: str, new_index: int) -> list[ScheduledActivity]:
        """Drag-and-drop style move of one placement to a new position."""
        plan = self.require_plan()
        ids = [a.id for a in sort_by_start(plan.activities_for(day))]
        if scheduled_id not in ids:
            raise ValueError(f"No {day.label} activity with id {scheduled_id!r}")
        ids.remove(scheduled_id)
        ids.insert(max(0, min(new_index, len(ids))), scheduled_id)
        return self.reorder_activities(day, ids)

    # ============== Templates ==============

    def apply_template(self, template: WeekendTemplate) -> WeekendPlan:
        """
        Start a fresh themed plan from a template.

        The first three suggestions go on Saturday and the next three on
        Sunday, each at the earliest free slot. Suggestions that are missing
        from the catalog or do not fit are skipped with a warning.
        """
        plan = self.create_new_plan(name=template.name, theme=template.theme)
        suggestions = [self.catalog.get(i) for i in template.suggested_activities]
        missing = [i for i, a in zip(template.suggested_activities, suggestions) if a is None]
        if missing:
            logger.warning(f"Template {template.id} references unknown activities: {missing}")
        activities = [a for a in suggestions if a is not None]

        per_day = TEMPLATE_ACTIVITIES_PER_DAY
        for day, chunk in (
            (Day.SATURDAY, activities[:per_day]),
            (Day.SUNDAY, activities[per_day : per_day * 2]),
        ):
            for activity in chunk:
                try:
                    self.schedule_activity(activity, day)
                except PlanError as e:
                    logger.warning(f"Skipping {activity.name} from template: {e}")
        return plan

    # ============== Computed getters ==============

    def resolve(self, scheduled: ScheduledActivity) -> Activity | UnresolvedActivity:
        return resolve_activity(scheduled, self.catalog)

    def get_day_activities(self, day: Day) -> list[ScheduledActivity]:
        if self.current_plan is None:
            return []
        return sort_by_start(self.current_plan.activities_for(day))

    def get_saturday_activities(self) -> list[ScheduledActivity]:
        return self.get_day_activities(Day.SATURDAY)

    def get_sunday_activities(self) -> list[ScheduledActivity]:
        return self.get_day_activities(Day.SUNDAY)

    def get_day_duration(self, day: Day) -> int:
        return sum(effective_duration(s, self.catalog) for s in self.get_day_activities(day))

    def get_total_plan_duration(self) -> int:
        """Minutes planned across both days, honouring custom durations."""
        if self.current_plan is None:
            return 0
        return sum(effective_duration(s, self.catalog) for s in self.current_plan.all_activities())

    def get_available_time_slots(self, day: Day) -> list[TimeSlot]:
        if self.current_plan is None:
            return []
        plan = self.current_plan
        return find_free_slots(plan.activities_for(day), day, plan.bounds_for(day), self.now())

    def scheduled_activity_ids(self) -> list[str]:
        if self.current_plan is None:
            return []
        return [s.activity_id for s in self.current_plan.all_activities()]
