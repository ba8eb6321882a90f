"""Read-only event catalog: definitions, schedule variants and loading."""
from eventide_catalog.catalog import Catalog
from eventide_catalog.loader import (
    catalog_from_records,
    default_catalog,
    load_catalog,
    parse_event,
    parse_schedule,
)
from eventide_catalog.schedules import (
    DailyIntervals,
    DailyIntervalsSpecific,
    DailySpecific,
    Hourly,
    Interval,
    MultiHourly,
    NoSchedule,
    Schedule,
    TimeOfDay,
)
from eventide_catalog.types import (
    CATEGORY_ORDER,
    Availability,
    Category,
    DateRange,
    EventDef,
    EventKind,
    SeasonalCategory,
    category_rank,
)

__all__ = [
    "Catalog",
    "EventDef",
    "Category",
    "SeasonalCategory",
    "EventKind",
    "CATEGORY_ORDER",
    "category_rank",
    "DateRange",
    "Availability",
    "Schedule",
    "TimeOfDay",
    "Interval",
    "Hourly",
    "MultiHourly",
    "DailySpecific",
    "DailyIntervals",
    "DailyIntervalsSpecific",
    "NoSchedule",
    "load_catalog",
    "catalog_from_records",
    "default_catalog",
    "parse_event",
    "parse_schedule",
]
