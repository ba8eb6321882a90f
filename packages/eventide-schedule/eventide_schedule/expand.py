"""Occurrence expansion: one event definition + one game day -> occurrences.

Schedules are authored against calendar days, but a game day runs from the
reset hour to the reset hour. Candidates are generated for the calendar days
before, of and after the game day, then kept only when their start falls in
``[day_start, day_start + 24h)``.
"""
from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Iterator

from eventide.clock import game_day_end, game_day_start
from eventide.config import DEFAULT_CONFIG, ClockConfig
from eventide_catalog.schedules import (
    DailyIntervals,
    DailyIntervalsSpecific,
    DailySpecific,
    Hourly,
    Interval,
    MultiHourly,
    NoSchedule,
    Schedule,
)
from eventide_catalog.types import EventDef

from eventide_schedule.gates import is_live
from eventide_schedule.types import Occurrence

_CALENDAR_OFFSETS = (-1, 0, 1)
_ALL_WEEKDAYS = frozenset(range(7))


def weekday_of(day: date) -> int:
    """Weekday with 0=Sunday..6=Saturday, as schedules use."""
    return day.isoweekday() % 7


def _at(day: date, hour: int, minute: int, zone: tzinfo) -> datetime:
    return datetime.combine(day, time(hour, minute), tzinfo=zone)


def _interval(day: date, interval: Interval, zone: tzinfo) -> tuple[datetime, datetime]:
    start = _at(day, interval.start.hour, interval.start.minute, zone)
    end = _at(day, interval.end.hour, interval.end.minute, zone)
    if end < start:
        end += timedelta(days=1)
    return start, end


def _candidates(
    schedule: Schedule, day: date, zone: tzinfo
) -> Iterator[tuple[datetime, datetime | None]]:
    """(start, explicit end) pairs authored on calendar ``day``."""
    if isinstance(schedule, Hourly):
        for hour in range(24):
            yield _at(day, hour, schedule.minute, zone), None
    elif isinstance(schedule, MultiHourly):
        for hour in schedule.hours_of_day():
            yield _at(day, hour, schedule.minute, zone), None
    elif isinstance(schedule, DailySpecific):
        if weekday_of(day) in schedule.days:
            for t in schedule.times:
                yield _at(day, t.hour, t.minute, zone), None
    elif isinstance(schedule, DailyIntervals):
        for interval in schedule.intervals:
            yield _interval(day, interval, zone)
    elif isinstance(schedule, DailyIntervalsSpecific):
        if weekday_of(day) in schedule.days:
            for interval in schedule.intervals:
                yield _interval(day, interval, zone)
    elif isinstance(schedule, NoSchedule):
        return
    else:
        raise TypeError(f"Unknown schedule variant: {type(schedule).__name__}")


def expand(
    event: EventDef, day: date, config: ClockConfig = DEFAULT_CONFIG
) -> list[Occurrence]:
    """Occurrences of ``event`` starting within game day ``day``, sorted by start."""
    if not is_live(event, day):
        return []

    window_start = game_day_start(day, config)
    window_end = game_day_end(day, config)
    duration = (
        timedelta(minutes=event.duration_minutes)
        if event.duration_minutes is not None
        else None
    )

    found: dict[datetime, Occurrence] = {}
    for offset in _CALENDAR_OFFSETS:
        calendar_day = day + timedelta(days=offset)
        for start, end in _candidates(event.schedule, calendar_day, config.game_tz):
            if not window_start <= start < window_end or start in found:
                continue
            if end is None and duration is not None:
                end = start + duration
            found[start] = Occurrence(start=start, end=end)
    return sorted(found.values(), key=lambda occ: occ.start)


def expand_range(
    event: EventDef, first: date, last: date, config: ClockConfig = DEFAULT_CONFIG
) -> list[Occurrence]:
    """Occurrences over the inclusive game-day span [first, last]."""
    result: list[Occurrence] = []
    day = first
    while day <= last:
        result.extend(expand(event, day, config))
        day += timedelta(days=1)
    return result


def effective_end(event: EventDef, occurrence: Occurrence) -> datetime:
    """Explicit end, else start + duration, else start (instantaneous)."""
    if occurrence.end is not None:
        return occurrence.end
    if event.duration_minutes is not None:
        return occurrence.start + timedelta(minutes=event.duration_minutes)
    return occurrence.start


# --- Day-level membership (no instant expansion) ---


def schedule_weekdays(schedule: Schedule) -> frozenset[int]:
    """Weekdays (0=Sunday) on which the schedule produces anything."""
    if isinstance(schedule, (DailySpecific, DailyIntervalsSpecific)):
        return frozenset(schedule.days)
    if isinstance(schedule, NoSchedule):
        return frozenset()
    return _ALL_WEEKDAYS


def is_daily(schedule: Schedule) -> bool:
    """True if the schedule fires every day of the week."""
    return schedule_weekdays(schedule) == _ALL_WEEKDAYS


def occurs_on_weekday(schedule: Schedule, weekday: int) -> bool:
    return weekday in schedule_weekdays(schedule)
