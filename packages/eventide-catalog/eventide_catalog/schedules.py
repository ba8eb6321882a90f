"""Schedule variants: when, within a calendar day, an event recurs.

Hours and minutes are game-time wall clock. Weekdays use 0=Sunday..6=Saturday.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


def _check_weekdays(days: tuple[int, ...]) -> None:
    if not days:
        raise ValueError("days must be non-empty")
    for day in days:
        if not 0 <= day <= 6:
            raise ValueError(f"weekday must be in 0..6 (0=Sunday), got {day}")


def _check_minute(minute: int) -> None:
    if not 0 <= minute <= 59:
        raise ValueError(f"minute must be in 0..59, got {minute}")


@dataclass(frozen=True)
class TimeOfDay:
    hour: int
    minute: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be in 0..23, got {self.hour}")
        _check_minute(self.minute)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class Interval:
    """A start/end pair. ``end`` before ``start`` means it crosses midnight."""

    start: TimeOfDay
    end: TimeOfDay

    @property
    def crosses_midnight(self) -> bool:
        return (self.end.hour, self.end.minute) < (self.start.hour, self.start.minute)


# --- Variants ---


@dataclass(frozen=True)
class Hourly:
    """Every hour at ``:minute``."""

    type: ClassVar[str] = "hourly"
    minute: int

    def __post_init__(self) -> None:
        _check_minute(self.minute)


@dataclass(frozen=True)
class MultiHourly:
    """Every ``hours`` hours starting at ``offset_hours``, at ``:minute``."""

    type: ClassVar[str] = "multi-hourly"
    hours: int
    minute: int = 0
    offset_hours: int = 0

    def __post_init__(self) -> None:
        if self.hours <= 0:
            raise ValueError(f"hours must be > 0, got {self.hours}")
        if not 0 <= self.offset_hours <= 23:
            raise ValueError(f"offset_hours must be in 0..23, got {self.offset_hours}")
        _check_minute(self.minute)

    def hours_of_day(self) -> list[int]:
        return list(range(self.offset_hours, 24, self.hours))


@dataclass(frozen=True)
class DailySpecific:
    """Fixed times of day, on the listed weekdays."""

    type: ClassVar[str] = "daily-specific"
    days: tuple[int, ...]
    times: tuple[TimeOfDay, ...]

    def __post_init__(self) -> None:
        _check_weekdays(self.days)
        if not self.times:
            raise ValueError("times must be non-empty")


@dataclass(frozen=True)
class DailyIntervals:
    """Open intervals every day."""

    type: ClassVar[str] = "daily-intervals"
    intervals: tuple[Interval, ...]

    def __post_init__(self) -> None:
        if not self.intervals:
            raise ValueError("intervals must be non-empty")


@dataclass(frozen=True)
class DailyIntervalsSpecific:
    """Open intervals on the listed weekdays."""

    type: ClassVar[str] = "daily-intervals-specific"
    days: tuple[int, ...]
    intervals: tuple[Interval, ...]

    def __post_init__(self) -> None:
        _check_weekdays(self.days)
        if not self.intervals:
            raise ValueError("intervals must be non-empty")


@dataclass(frozen=True)
class NoSchedule:
    """No timed occurrences; the event exists only through its date gates."""

    type: ClassVar[str] = "none"


Schedule = Union[
    Hourly, MultiHourly, DailySpecific, DailyIntervals, DailyIntervalsSpecific, NoSchedule
]

SCHEDULE_TYPES: dict[str, type] = {
    cls.type: cls
    for cls in (
        Hourly,
        MultiHourly,
        DailySpecific,
        DailyIntervals,
        DailyIntervalsSpecific,
        NoSchedule,
    )
}
