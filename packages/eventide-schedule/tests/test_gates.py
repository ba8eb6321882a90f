"""Tests for the existence and rotation gates."""
from datetime import date, timedelta

from eventide_catalog.schedules import DailyIntervals, Interval, TimeOfDay
from eventide_catalog.types import Availability, Category, DateRange, EventDef
from eventide_schedule.gates import exists_on, is_live, rotation_matches

CRUSADE = DailyIntervals(intervals=(Interval(TimeOfDay(16), TimeOfDay(22)),))


class TestExistsOn:
    def test_unbounded_always_exists(self):
        event = EventDef(name="Guild Hunt", category=Category.GUILD)
        assert exists_on(event, date(2000, 1, 1))
        assert exists_on(event, date(2099, 12, 31))

    def test_single_range(self):
        event = EventDef(
            name="Silverstar Carnival",
            category=Category.EVENT,
            date_range=DateRange(date(2025, 10, 9), date(2025, 11, 10)),
        )
        assert exists_on(event, date(2025, 10, 9))
        assert exists_on(event, date(2025, 11, 10))
        assert not exists_on(event, date(2025, 11, 11))

    def test_any_of_several_ranges(self):
        event = EventDef(
            name="Starlight Fireworks",
            category=Category.SOCIAL,
            date_ranges=(
                DateRange(date(2025, 10, 9), date(2025, 10, 12)),
                DateRange(date(2025, 10, 17), date(2025, 10, 18)),
            ),
        )
        assert exists_on(event, date(2025, 10, 10))
        assert not exists_on(event, date(2025, 10, 14))
        assert exists_on(event, date(2025, 10, 18))

    def test_availability(self):
        event = EventDef(
            name="Ancient City Patrol",
            category=Category.PATROL,
            availability=Availability(added=date(2025, 10, 13), removed=date(2025, 11, 25)),
        )
        assert not exists_on(event, date(2025, 10, 12))
        assert exists_on(event, date(2025, 10, 13))
        assert exists_on(event, date(2025, 11, 25))
        assert not exists_on(event, date(2025, 11, 26))

    def test_availability_takes_precedence_over_ranges(self):
        event = EventDef(
            name="x",
            category=Category.EVENT,
            availability=Availability(added=date(2025, 10, 13)),
            date_range=DateRange(date(2025, 10, 1), date(2025, 10, 5)),
        )
        assert exists_on(event, date(2025, 10, 20))
        assert not exists_on(event, date(2025, 10, 3))


class TestRotation:
    def test_no_rotation(self):
        event = EventDef(name="x", category=Category.WORLD_BOSS_CRUSADE, schedule=CRUSADE)
        assert rotation_matches(event, date(2025, 10, 13))
        assert rotation_matches(event, date(2025, 10, 6))

    def test_odd_and_even_alternate(self):
        odd = EventDef(
            name="Rathalos",
            category=Category.WORLD_BOSS_CRUSADE,
            schedule=CRUSADE,
            bi_weekly_rotation="odd",
        )
        even = EventDef(
            name="Byrnhald Golem",
            category=Category.WORLD_BOSS_CRUSADE,
            schedule=CRUSADE,
            bi_weekly_rotation="even",
        )
        monday = date(2025, 10, 6)  # ISO week 41
        for week in range(6):
            day = monday + timedelta(weeks=week)
            assert rotation_matches(odd, day) != rotation_matches(even, day)
        assert rotation_matches(odd, monday)
        assert rotation_matches(even, monday + timedelta(weeks=1))


def test_is_live_needs_both_gates():
    event = EventDef(
        name="x",
        category=Category.WORLD_BOSS_CRUSADE,
        schedule=CRUSADE,
        availability=Availability(added=date(2025, 10, 13)),
        bi_weekly_rotation="odd",
    )
    assert not is_live(event, date(2025, 10, 13))  # available, even week
    assert not is_live(event, date(2025, 10, 9))  # odd week, not yet available
    assert is_live(event, date(2025, 10, 20))
