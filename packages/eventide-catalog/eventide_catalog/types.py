"""Core data types for the event catalog."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from eventide.types import PARITIES

from eventide_catalog.schedules import NoSchedule, Schedule


class Category(Enum):
    """Grouping and legend category. Does not affect expansion."""

    BOSS = "Boss"
    WORLD_BOSS_CRUSADE = "World Boss Crusade"
    BUFF = "Buff"
    SOCIAL = "Social"
    MINI_GAME = "Mini-game"
    PATROL = "Patrol"
    GUILD = "Guild"
    EVENT = "Event"
    DUNGEON_UNLOCK = "Dungeon Unlock"
    RAID_UNLOCK = "Raid Unlock"
    ROGUELIKE = "Roguelike"
    HUNTING = "Hunting"


class SeasonalCategory(Enum):
    SILVERSTAR_CARNIVAL = "Silverstar Carnival"
    HALLOWEEN = "Halloween"
    KANAMIA_HARVEST_FESTIVAL = "Kanamia Harvest Festival"
    WINTER_FEST = "Winter Fest"


class EventKind(Enum):
    WORLD_BOSS = "World Boss"
    SPECIAL_EVENT = "Special Event"
    LEISURE_ACTIVITY = "Leisure Activity"
    UNLOCK = "Unlock"


# Display precedence shared by the daily, weekly and legend orderings.
CATEGORY_ORDER: tuple[Category, ...] = (
    Category.WORLD_BOSS_CRUSADE,
    Category.DUNGEON_UNLOCK,
    Category.RAID_UNLOCK,
    Category.EVENT,
    Category.HUNTING,
    Category.GUILD,
    Category.PATROL,
    Category.SOCIAL,
    Category.MINI_GAME,
    Category.BUFF,
    Category.ROGUELIKE,
)


def category_rank(category: Category) -> int:
    """Position in CATEGORY_ORDER; unlisted categories sort last."""
    try:
        return CATEGORY_ORDER.index(category)
    except ValueError:
        return len(CATEGORY_ORDER)


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-date window."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"date range start {self.start} is after end {self.end}")

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def overlaps(self, first: date, last: date) -> bool:
        """True if the range shares at least one day with [first, last]."""
        return self.start <= last and self.end >= first


@dataclass(frozen=True)
class Availability:
    """When permanent content entered and (optionally) left the game."""

    added: date | None = None
    removed: date | None = None

    def __post_init__(self) -> None:
        if self.added and self.removed and self.added > self.removed:
            raise ValueError(f"added {self.added} is after removed {self.removed}")

    def contains(self, day: date) -> bool:
        if self.added is not None and day < self.added:
            return False
        if self.removed is not None and day > self.removed:
            return False
        return True


@dataclass(frozen=True)
class EventDef:
    """One recurring or one-off activity. Immutable once loaded.

    Attributes:
        name: Unique display identifier, also the stable key for external stores.
        category: Grouping category.
        schedule: Intra-day timing.
        kind: Broad event type shown alongside the category.
        description: Free text.
        seasonal_category: Cosmetic seasonal tag.
        duration_minutes: Length of occurrences whose schedule carries no end.
        date_range: Single inclusive window in which the schedule is live.
        date_ranges: Several disjoint windows (alternative to ``date_range``).
        availability: Existence gate for permanent content. Takes precedence
            over ``date_range``/``date_ranges`` when both are present.
        bi_weekly_rotation: 'even' or 'odd' ISO week parity gate.
    """

    name: str
    category: Category
    schedule: Schedule = NoSchedule()
    kind: EventKind | None = None
    description: str = ""
    seasonal_category: SeasonalCategory | None = None
    duration_minutes: int | None = None
    date_range: DateRange | None = None
    date_ranges: tuple[DateRange, ...] | None = None
    availability: Availability | None = None
    bi_weekly_rotation: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("EventDef name must be non-empty")
        if self.duration_minutes is not None and self.duration_minutes <= 0:
            raise ValueError(
                f"duration_minutes must be > 0, got {self.duration_minutes}"
            )
        if self.date_ranges is not None and not self.date_ranges:
            raise ValueError("date_ranges must be non-empty when given")
        if self.bi_weekly_rotation is not None and self.bi_weekly_rotation not in PARITIES:
            raise ValueError(
                f"bi_weekly_rotation must be 'even' or 'odd', got {self.bi_weekly_rotation!r}"
            )

    @property
    def is_date_bounded(self) -> bool:
        """True for seasonal events carrying date_range or date_ranges."""
        return self.date_range is not None or self.date_ranges is not None

    def ranges(self) -> tuple[DateRange, ...]:
        """All date windows, in declaration order. Empty if unbounded."""
        if self.date_ranges is not None:
            return self.date_ranges
        if self.date_range is not None:
            return (self.date_range,)
        return ()
