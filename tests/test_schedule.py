"""Tests for scheduling records and activity resolution."""

import pytest

from weekendly.catalog import Catalog
from weekendly.core.activities import Activity, LocationData, UnresolvedActivity, WeekendTheme
from weekendly.core.schedule import (
    CatalogRef,
    Day,
    DayTimeBounds,
    InlineSnapshot,
    WeekendPlan,
    effective_duration,
    generate_id,
    resolve_activity,
    sort_by_start,
)


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def location_activity():
    return Activity(
        id="loc-abc123",
        name="Corner Cafe",
        category="Food & Dining",
        description="cafe",
        duration=45,
        icon="☕",
        is_location_based=True,
        location=LocationData(name="Corner Cafe", address="1 Main St", lat=40.0, lng=-74.0),
    )


class TestDayTimeBounds:
    def test_defaults(self):
        bounds = DayTimeBounds()
        assert (bounds.start_hour, bounds.end_hour) == (9, 22)
        assert bounds.window_minutes() == 780

    @pytest.mark.parametrize("start,end", [(10, 10), (18, 9), (-1, 5), (9, 24)])
    def test_rejects_invalid(self, start, end):
        with pytest.raises(ValueError):
            DayTimeBounds(start, end)

    def test_parse(self):
        assert DayTimeBounds.parse("08:00-20:00") == DayTimeBounds(8, 20)
        assert DayTimeBounds.parse("7-19") == DayTimeBounds(7, 19)

    @pytest.mark.parametrize("value", ["", "9", "nine-five", "20:00-08:00"])
    def test_parse_rejects(self, value):
        with pytest.raises(ValueError):
            DayTimeBounds.parse(value)

    def test_format(self):
        assert DayTimeBounds(8, 20).format() == "08:00-20:00"


class TestResolveActivity:
    def test_catalog_reference(self, make_scheduled, catalog):
        scheduled = make_scheduled("s1", "09:00", 60, activity_id="yoga-session")
        assert isinstance(scheduled.source, CatalogRef)
        assert resolve_activity(scheduled, catalog).name == "Yoga Practice"

    def test_inline_snapshot_wins(self, make_scheduled, catalog, location_activity):
        scheduled = make_scheduled("s1", "09:00", 45, activity_id=location_activity.id)
        scheduled.activity_data = location_activity
        assert isinstance(scheduled.source, InlineSnapshot)
        assert resolve_activity(scheduled, catalog) is location_activity

    def test_unknown_location_id(self, make_scheduled, catalog):
        scheduled = make_scheduled("s1", "09:00", 60, activity_id="loc-gone")
        activity = resolve_activity(scheduled, catalog)
        assert isinstance(activity, UnresolvedActivity)
        assert activity.name == "Location Activity"
        assert activity.duration == 60
        assert activity.icon == "📍"

    def test_unknown_catalog_id(self, make_scheduled, catalog):
        scheduled = make_scheduled("s1", "09:00", 60, activity_id="underwater-basket-weaving")
        assert resolve_activity(scheduled, catalog).name == "Unknown Activity"


class TestEffectiveDuration:
    def test_custom_duration_wins(self, make_scheduled, catalog):
        scheduled = make_scheduled("s1", "09:00", 45, activity_id="yoga-session", custom_duration=45)
        assert effective_duration(scheduled, catalog) == 45

    def test_catalog_duration(self, make_scheduled, catalog):
        scheduled = make_scheduled("s1", "09:00", 60, activity_id="brunch-cafe")
        assert effective_duration(scheduled, catalog) == 120

    def test_unresolved_uses_default(self, make_scheduled, catalog):
        scheduled = make_scheduled("s1", "09:00", 60, activity_id="nope")
        assert effective_duration(scheduled, catalog) == 60


class TestScheduledActivity:
    def test_moved_to_keeps_span(self, make_scheduled, at):
        scheduled = make_scheduled("s1", "09:00", 90)
        moved = scheduled.moved_to(at("13:00"))
        assert moved.id == "s1"
        assert moved.end_time == at("14:30")
        assert scheduled.start_time == at("09:00")

    def test_moved_to_prefers_custom_duration(self, make_scheduled, at):
        scheduled = make_scheduled("s1", "09:00", 90, custom_duration=30)
        assert scheduled.moved_to(at("13:00")).end_time == at("13:30")

    def test_dict_round_trip_with_snapshot(self, make_scheduled, location_activity):
        scheduled = make_scheduled("s1", "09:00", 45, activity_id=location_activity.id)
        scheduled.activity_data = location_activity
        scheduled.notes = "window seat"
        assert type(scheduled).from_dict(scheduled.to_dict()) == scheduled


class TestWeekendPlan:
    def test_dict_round_trip(self, now, make_scheduled):
        plan = WeekendPlan(
            id="p1",
            name="Test",
            created_at=now,
            updated_at=now,
            theme=WeekendTheme.LAZY,
            saturday=[make_scheduled("a", "09:00", 60)],
            sunday=[make_scheduled("b", "10:00", 30, day=Day.SUNDAY)],
        )
        plan.time_bounds[Day.SUNDAY] = DayTimeBounds(10, 18)

        restored = WeekendPlan.from_dict(plan.to_dict())

        assert restored == plan
        assert restored.bounds_for(Day.SUNDAY) == DayTimeBounds(10, 18)

    def test_missing_bounds_default(self, now):
        data = WeekendPlan(id="p1", name="Test", created_at=now, updated_at=now).to_dict()
        del data["time_bounds"]
        assert WeekendPlan.from_dict(data).bounds_for(Day.SATURDAY) == DayTimeBounds()

    def test_find(self, now, make_scheduled):
        plan = WeekendPlan(id="p1", name="Test", created_at=now, updated_at=now)
        plan.sunday = [make_scheduled("b", "10:00", 30, day=Day.SUNDAY)]
        assert plan.find("b").day is Day.SUNDAY
        assert plan.find("zzz") is None


def test_generate_id_is_short_and_unique():
    ids = {generate_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(len(i) == 9 for i in ids)


def test_sort_by_start(make_scheduled):
    late = make_scheduled("late", "15:00", 30)
    early = make_scheduled("early", "09:00", 30)
    assert [s.id for s in sort_by_start([late, early])] == ["early", "late"]
