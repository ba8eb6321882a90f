"""Weekly timeline: which events run on each day of a Monday-aligned game week.

The weekly view is day-level only. It uses the existence and rotation gates and
the schedule's weekdays, never per-instant expansion. Runs of two or more
consecutive days collapse into a single bar; isolated days become slots in that
day's column.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable

from eventide.clock import date_parity, game_day, week_start
from eventide.config import DEFAULT_CONFIG, ClockConfig
from eventide_catalog.catalog import Catalog
from eventide_catalog.schedules import NoSchedule
from eventide_catalog.types import Category, EventDef, category_rank
from eventide_schedule.expand import is_daily, occurs_on_weekday, weekday_of
from eventide_schedule.gates import exists_on, rotation_matches

from eventide_timeline.daily import display_sort_key

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Boss spawns repeat every day and would crowd every column.
WEEKLY_EXCLUDED_CATEGORIES = frozenset({Category.BOSS})


@dataclass(frozen=True)
class WeekBar:
    """An event running on consecutive days. Indices are 0=Monday."""

    event: EventDef
    day_indices: tuple[int, ...]

    @property
    def first_day(self) -> int:
        return self.day_indices[0]

    @property
    def span(self) -> int:
        return len(self.day_indices)


@dataclass(frozen=True)
class WeekDay:
    """One column of the week.

    ``pre_launch`` days precede the game's launch and carry no data, which is
    distinct from a launched day with no events.
    """

    index: int
    date: date
    pre_launch: bool
    slots: tuple[tuple[Category, tuple[EventDef, ...]], ...] = ()

    @property
    def name(self) -> str:
        return DAY_NAMES[self.index]

    def events(self) -> list[EventDef]:
        return [event for _, events in self.slots for event in events]


@dataclass(frozen=True)
class WeeklyView:
    week_start: date
    days: tuple[WeekDay, ...]
    bars: tuple[WeekBar, ...]
    game_week_number: int
    iso_week_number: int
    parity: str

    @property
    def week_end(self) -> date:
        return self.week_start + timedelta(days=6)

    def today_index(
        self, now: datetime, config: ClockConfig = DEFAULT_CONFIG
    ) -> int | None:
        """Column of the current game day, or None if ``now`` is another week."""
        offset = (game_day(now, config) - self.week_start).days
        return offset if 0 <= offset < 7 else None


def _runs(indices: list[int]) -> list[list[int]]:
    """Split sorted indices into runs of consecutive values."""
    runs: list[list[int]] = []
    for index in indices:
        if runs and index == runs[-1][-1] + 1:
            runs[-1].append(index)
        else:
            runs.append([index])
    return runs


def game_week_number(start: date, config: ClockConfig = DEFAULT_CONFIG) -> int:
    """1 for the launch week, counting up (<= 0 before launch)."""
    return (start - week_start(config.launch_date)).days // 7 + 1


def events_for_week(
    catalog: Catalog,
    day: date,
    hide_daily: bool = False,
    hide_permanent: bool = False,
    categories: Iterable[Category] | None = None,
    config: ClockConfig = DEFAULT_CONFIG,
) -> WeeklyView:
    """Day-level view of the game week containing ``day``.

    ``hide_daily`` drops bars of every-day events that cover the whole visible
    week. ``hide_permanent`` keeps only date-bounded (seasonal) events.
    """
    start = week_start(day)
    dates = [start + timedelta(days=i) for i in range(7)]
    pre_launch = [d < config.launch_date for d in dates]
    visible_days = pre_launch.count(False)

    bars: list[WeekBar] = []
    slots: list[dict[Category, list[EventDef]]] = [{} for _ in range(7)]
    for event in catalog.filtered(categories):
        if isinstance(event.schedule, NoSchedule):
            continue
        if event.category in WEEKLY_EXCLUDED_CATEGORIES:
            continue
        if hide_permanent and not event.is_date_bounded:
            continue
        if not rotation_matches(event, start):
            continue

        days_on = [
            i
            for i, d in enumerate(dates)
            if not pre_launch[i]
            and exists_on(event, d)
            and occurs_on_weekday(event.schedule, weekday_of(d))
        ]
        for run in _runs(days_on):
            if len(run) > 1:
                if hide_daily and is_daily(event.schedule) and len(run) >= visible_days:
                    continue
                bars.append(WeekBar(event=event, day_indices=tuple(run)))
            else:
                slots[run[0]].setdefault(event.category, []).append(event)

    bars.sort(key=lambda bar: (bar.span, *display_sort_key(bar.event)))
    days = tuple(
        WeekDay(
            index=i,
            date=dates[i],
            pre_launch=pre_launch[i],
            slots=tuple(
                (category, tuple(sorted(events, key=display_sort_key)))
                for category, events in sorted(
                    slots[i].items(), key=lambda item: (category_rank(item[0]), item[0].value)
                )
            ),
        )
        for i in range(7)
    )
    return WeeklyView(
        week_start=start,
        days=days,
        bars=tuple(bars),
        game_week_number=game_week_number(start, config),
        iso_week_number=start.isocalendar()[1],
        parity=date_parity(start),
    )


# --- Navigation ---


def step_week(day: date, amount: int = 1) -> date:
    """Monday of the week ``amount`` weeks away from ``day``'s week."""
    return week_start(day) + timedelta(weeks=amount)


def current_week_start(now: datetime, config: ClockConfig = DEFAULT_CONFIG) -> date:
    return week_start(game_day(now, config))
