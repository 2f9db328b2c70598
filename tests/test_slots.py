"""Tests for slot finding and capacity checks."""

import pytest

from weekendly.core.schedule import Day, DayTimeBounds
from weekendly.core.slots import check_day_capacity, find_free_slots, find_next_available_slot


@pytest.fixture
def bounds():
    return DayTimeBounds(9, 17)


class TestFindNextAvailableSlot:
    def test_empty_day_returns_day_start(self, now, at, bounds):
        assert find_next_available_slot([], 60, Day.SATURDAY, bounds, now) == at("09:00")

    def test_single_activity_fits_after(self, now, at, bounds, make_scheduled):
        existing = [make_scheduled("a", "09:00", 60)]
        assert find_next_available_slot(existing, 30, Day.SATURDAY, bounds, now) == at("10:00")

    def test_fits_before_first(self, now, at, bounds, make_scheduled):
        existing = [make_scheduled("a", "11:00", 60)]
        assert find_next_available_slot(existing, 120, Day.SATURDAY, bounds, now) == at("09:00")

    def test_head_gap_too_small_falls_through(self, now, at, bounds, make_scheduled):
        existing = [make_scheduled("a", "09:30", 60)]
        assert find_next_available_slot(existing, 60, Day.SATURDAY, bounds, now) == at("10:30")

    def test_finds_gap_between(self, now, at, bounds, make_scheduled):
        existing = [
            make_scheduled("a", "09:00", 60),
            make_scheduled("b", "11:00", 60),
        ]
        assert find_next_available_slot(existing, 60, Day.SATURDAY, bounds, now) == at("10:00")

    def test_earliest_fit_not_best_fit(self, now, at, bounds, make_scheduled):
        existing = [
            make_scheduled("a", "09:00", 60),
            make_scheduled("b", "12:00", 60),
            make_scheduled("c", "13:30", 60),
        ]
        # 30 minutes fits exactly in the 13:00 gap, but the wider 10:00 gap comes first
        assert find_next_available_slot(existing, 30, Day.SATURDAY, bounds, now) == at("10:00")

    def test_unsorted_input(self, now, at, bounds, make_scheduled):
        existing = [
            make_scheduled("b", "11:00", 60),
            make_scheduled("a", "09:00", 60),
        ]
        assert find_next_available_slot(existing, 60, Day.SATURDAY, bounds, now) == at("10:00")

    def test_fully_booked_returns_none(self, now, bounds, make_scheduled):
        existing = [make_scheduled("a", "09:00", 480)]
        assert find_next_available_slot(existing, 30, Day.SATURDAY, bounds, now) is None

    def test_never_before_opening(self, now, at, make_scheduled):
        existing = [make_scheduled("early", "09:00", 60)]
        start = find_next_available_slot(existing, 60, Day.SATURDAY, DayTimeBounds(12, 17), now)
        assert start == at("12:00")

    def test_straddling_opening_pushes_past_it(self, now, at, make_scheduled):
        existing = [make_scheduled("a", "11:00", 120)]
        start = find_next_available_slot(existing, 60, Day.SATURDAY, DayTimeBounds(12, 17), now)
        assert start == at("13:00")

    def test_ignores_activities_after_close(self, now, at, bounds, make_scheduled):
        existing = [make_scheduled("late", "18:00", 60)]
        assert find_next_available_slot(existing, 480, Day.SATURDAY, bounds, now) == at("09:00")

    def test_tail_must_end_within_bounds(self, now, at, bounds, make_scheduled):
        existing = [make_scheduled("a", "09:00", 420)]
        assert find_next_available_slot(existing, 60, Day.SATURDAY, bounds, now) == at("16:00")
        assert find_next_available_slot(existing, 61, Day.SATURDAY, bounds, now) is None


class TestCheckDayCapacity:
    def test_one_activity(self, now, bounds, make_scheduled):
        capacity = check_day_capacity([make_scheduled("a", "09:00", 90)], Day.SATURDAY, bounds, now)
        assert capacity.total_used_minutes == 90
        assert capacity.available_minutes == 390
        assert capacity.can_fit is True

    def test_empty_day(self, now, bounds):
        capacity = check_day_capacity([], Day.SATURDAY, bounds, now)
        assert capacity.available_minutes == 480
        assert capacity.can_fit is True

    def test_full_day_cannot_fit(self, now, bounds, make_scheduled):
        capacity = check_day_capacity([make_scheduled("a", "09:00", 480)], Day.SATURDAY, bounds, now)
        assert capacity.available_minutes == 0
        assert capacity.can_fit is False

    def test_time_outside_window_is_not_used(self, now, bounds, make_scheduled):
        existing = [make_scheduled("early", "07:00", 60), make_scheduled("edge", "16:30", 60)]
        capacity = check_day_capacity(existing, Day.SATURDAY, bounds, now)
        assert capacity.total_used_minutes == 30
        assert capacity.available_minutes == 450

    def test_fragmented_time_still_counts(self, now, bounds, make_scheduled):
        # Plenty of free time in total, but no single gap of two hours
        existing = [make_scheduled(str(h), f"{h:02d}:00", 30) for h in range(9, 17)]
        capacity = check_day_capacity(existing, Day.SATURDAY, bounds, now)
        assert capacity.available_minutes == 240
        assert find_next_available_slot(existing, 120, Day.SATURDAY, bounds, now) is None


class TestFindFreeSlots:
    def test_empty_day_is_one_slot(self, now, at, bounds):
        free = find_free_slots([], Day.SATURDAY, bounds, now)
        assert len(free) == 1
        assert (free[0].start, free[0].end) == (at("09:00"), at("17:00"))

    def test_gaps_around_activities(self, now, at, bounds, make_scheduled):
        existing = [make_scheduled("a", "10:00", 60), make_scheduled("b", "13:00", 240)]
        free = find_free_slots(existing, Day.SATURDAY, bounds, now)
        assert [(s.start, s.end) for s in free] == [
            (at("09:00"), at("10:00")),
            (at("11:00"), at("13:00")),
        ]

    def test_ignores_activities_outside_window(self, now, at, bounds, make_scheduled):
        existing = [make_scheduled("early", "07:00", 60)]
        free = find_free_slots(existing, Day.SATURDAY, bounds, now)
        assert [(s.start, s.end) for s in free] == [(at("09:00"), at("17:00"))]
