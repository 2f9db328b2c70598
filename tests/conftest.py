"""Shared fixtures for scheduling tests."""

from datetime import date, datetime, time, timedelta

import pytest

from weekendly.core.schedule import Day, ScheduledActivity


@pytest.fixture
def now():
    # A Wednesday: the coming weekend is 2025-01-18/19
    return datetime(2025, 1, 15, 8, 0)


@pytest.fixture
def saturday():
    return date(2025, 1, 18)


@pytest.fixture
def sunday():
    return date(2025, 1, 19)


@pytest.fixture
def at(saturday):
    """Build a Saturday datetime from "HH:MM"."""
    def _at(clock: str, d: date | None = None) -> datetime:
        hours, minutes = clock.split(":")
        return datetime.combine(d or saturday, time(int(hours), int(minutes)))
    return _at


@pytest.fixture
def make_scheduled(at):
    """Factory for scheduled activities on Saturday."""
    def _make(
        id: str,
        start: str,
        minutes: int,
        activity_id: str = "yoga-session",
        day: Day = Day.SATURDAY,
        custom_duration: int | None = None,
    ) -> ScheduledActivity:
        start_time = at(start)
        return ScheduledActivity(
            id=id,
            activity_id=activity_id,
            start_time=start_time,
            end_time=start_time + timedelta(minutes=minutes),
            day=day,
            custom_duration=custom_duration,
        )
    return _make
