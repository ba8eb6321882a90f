"""Daily timeline: every event's occurrences within one game day."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable

from eventide.clock import game_day, game_day_end, game_day_start
from eventide.config import DEFAULT_CONFIG, ClockConfig
from eventide_catalog.catalog import Catalog
from eventide_catalog.schedules import NoSchedule
from eventide_catalog.types import Category, EventDef, category_rank
from eventide_schedule.expand import expand
from eventide_schedule.types import Occurrence


def display_sort_key(event: EventDef) -> tuple[int, str]:
    """Category precedence, then name."""
    return category_rank(event.category), event.name.casefold()


@dataclass(frozen=True)
class EventOccurrences:
    """One event and its occurrences on the day, sorted by start."""

    event: EventDef
    occurrences: tuple[Occurrence, ...]

    @property
    def is_instant(self) -> bool:
        """Point events: no duration and no explicit end on any occurrence."""
        return self.event.duration_minutes is None and all(
            occ.is_instant for occ in self.occurrences
        )


@dataclass(frozen=True)
class DailyTimeline:
    """Result of ``occurrences_for_day``.

    Attributes:
        game_day: The queried game day.
        start: First instant of the day (reset hour, game time).
        end: Exclusive end of the day.
        instant_lane: Point events (e.g. spawns), shown as markers.
        timed_lane: Events whose occurrences span time.
    """

    game_day: date
    start: datetime
    end: datetime
    instant_lane: tuple[EventOccurrences, ...]
    timed_lane: tuple[EventOccurrences, ...]

    def entries(self) -> tuple[EventOccurrences, ...]:
        return self.instant_lane + self.timed_lane

    def is_empty(self) -> bool:
        """Nothing scheduled. Not an error."""
        return not self.instant_lane and not self.timed_lane

    def legend(self) -> list[Category]:
        """Categories present on the day, in display precedence."""
        present = {entry.event.category for entry in self.entries()}
        return sorted(present, key=lambda c: (category_rank(c), c.value))

    def minutes_since_start(self, instant: datetime) -> float | None:
        """Offset of ``instant`` into the day in minutes; None outside it."""
        if not self.start <= instant <= self.end:
            return None
        return (instant - self.start) / timedelta(minutes=1)


def occurrences_for_day(
    catalog: Catalog,
    day: date,
    categories: Iterable[Category] | None = None,
    config: ClockConfig = DEFAULT_CONFIG,
) -> DailyTimeline:
    """Expand every timed event in ``catalog`` for game day ``day``.

    ``categories`` optionally restricts to enabled categories. Events without a
    timed schedule, or with no occurrence on the day, are left out.
    """
    instant: list[EventOccurrences] = []
    timed: list[EventOccurrences] = []
    for event in sorted(catalog.filtered(categories), key=display_sort_key):
        if isinstance(event.schedule, NoSchedule):
            continue
        occurrences = expand(event, day, config)
        if not occurrences:
            continue
        entry = EventOccurrences(event=event, occurrences=tuple(occurrences))
        (instant if entry.is_instant else timed).append(entry)
    return DailyTimeline(
        game_day=day,
        start=game_day_start(day, config),
        end=game_day_end(day, config),
        instant_lane=tuple(instant),
        timed_lane=tuple(timed),
    )


# --- Navigation ---


def step_day(day: date, amount: int = 1) -> date:
    """Move ``amount`` game days forward (negative for back)."""
    return day + timedelta(days=amount)


def current_game_day(now: datetime, config: ClockConfig = DEFAULT_CONFIG) -> date:
    """Game day to jump to for "today"."""
    return game_day(now, config)
