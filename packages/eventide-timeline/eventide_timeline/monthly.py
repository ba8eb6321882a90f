"""Monthly timeline: date-bounded events as bars clamped to a calendar month."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable

from dateutil.relativedelta import relativedelta

from eventide.clock import game_day
from eventide.config import DEFAULT_CONFIG, ClockConfig
from eventide_catalog.catalog import Catalog
from eventide_catalog.types import Category, DateRange, EventDef

LANE_DUNGEON_UNLOCKS = "dungeon_unlocks"
LANE_RAID_UNLOCKS = "raid_unlocks"
LANE_ROGUELIKE = "roguelike"
LANE_OTHER = "other"
LANES = (LANE_DUNGEON_UNLOCKS, LANE_RAID_UNLOCKS, LANE_ROGUELIKE, LANE_OTHER)

_LANE_BY_CATEGORY = {
    Category.DUNGEON_UNLOCK: LANE_DUNGEON_UNLOCKS,
    Category.RAID_UNLOCK: LANE_RAID_UNLOCKS,
    Category.ROGUELIKE: LANE_ROGUELIKE,
}


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of the month."""
    first = date(year, month, 1)
    return first, first + relativedelta(months=1) - timedelta(days=1)


@dataclass(frozen=True)
class MonthBar:
    """One date range of an event, clamped to the viewed month."""

    event: EventDef
    range: DateRange
    start: date
    end: date

    @property
    def first_day(self) -> int:
        """Day of month the bar starts on (1-based)."""
        return self.start.day

    @property
    def span(self) -> int:
        return (self.end - self.start).days + 1

    @property
    def clipped_start(self) -> bool:
        return self.start > self.range.start

    @property
    def clipped_end(self) -> bool:
        return self.end < self.range.end


@dataclass(frozen=True)
class MonthlyView:
    year: int
    month: int
    days_in_month: int
    bars: tuple[MonthBar, ...]

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def lane(self, name: str) -> tuple[MonthBar, ...]:
        """Bars of one lane, keeping the view's ordering."""
        if name not in LANES:
            raise KeyError(name)
        return tuple(bar for bar in self.bars if lane_of(bar.event) == name)

    def lanes(self) -> dict[str, tuple[MonthBar, ...]]:
        return {name: self.lane(name) for name in LANES}

    def today_index(
        self, now: datetime, config: ClockConfig = DEFAULT_CONFIG
    ) -> int | None:
        """0-based day column of the current game day, or None."""
        today = game_day(now, config)
        if (today.year, today.month) != (self.year, self.month):
            return None
        return today.day - 1


def lane_of(event: EventDef) -> str:
    return _LANE_BY_CATEGORY.get(event.category, LANE_OTHER)


def _month_sort_key(event: EventDef) -> tuple[date, date]:
    ranges = event.ranges()
    return ranges[0].start, ranges[-1].end


def events_for_month(
    catalog: Catalog,
    year: int,
    month: int,
    categories: Iterable[Category] | None = None,
) -> MonthlyView:
    """Bars for every date range that touches the month.

    Only events with ``date_range``/``date_ranges`` are shown; permanent and
    always-on events have no extent to draw.
    """
    first, last = month_bounds(year, month)
    events = [
        event
        for event in catalog.filtered(categories)
        if event.is_date_bounded
        and any(r.overlaps(first, last) for r in event.ranges())
    ]
    events.sort(key=_month_sort_key)

    bars: list[MonthBar] = []
    for event in events:
        for r in event.ranges():
            if not r.overlaps(first, last):
                continue
            bars.append(
                MonthBar(
                    event=event,
                    range=r,
                    start=max(r.start, first),
                    end=min(r.end, last),
                )
            )
    return MonthlyView(
        year=year, month=month, days_in_month=last.day, bars=tuple(bars)
    )


# --- Navigation ---


def step_month(year: int, month: int, amount: int = 1) -> tuple[int, int]:
    moved = date(year, month, 1) + relativedelta(months=amount)
    return moved.year, moved.month


def can_step_back(year: int, month: int, config: ClockConfig = DEFAULT_CONFIG) -> bool:
    """False once the view reaches the launch month."""
    launch = config.launch_date
    return (year, month) > (launch.year, launch.month)
