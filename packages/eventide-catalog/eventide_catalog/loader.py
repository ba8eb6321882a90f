"""Catalog loading: JSON-compatible records -> validated EventDefs.

All validation happens here, once, at load time. Any malformed record aborts
the load with a CatalogError naming the offending event.
"""
from __future__ import annotations

import json
from datetime import date
from importlib import resources
from pathlib import Path
from typing import Any, Iterable

import structlog
from dateutil.parser import isoparser

from eventide.types import CatalogError

from eventide_catalog.catalog import Catalog
from eventide_catalog.schedules import (
    SCHEDULE_TYPES,
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
    Availability,
    Category,
    DateRange,
    EventDef,
    EventKind,
    SeasonalCategory,
)

logger = structlog.get_logger(__name__)

_ISO = isoparser()

_EVENT_KEYS = frozenset(
    {
        "name",
        "category",
        "schedule",
        "kind",
        "description",
        "seasonal_category",
        "duration_minutes",
        "date_range",
        "date_ranges",
        "availability",
        "bi_weekly_rotation",
    }
)


_SCHEDULE_KEYS = {
    Hourly.type: frozenset({"type", "minute"}),
    MultiHourly.type: frozenset({"type", "hours", "minute", "offset_hours"}),
    DailySpecific.type: frozenset({"type", "days", "times"}),
    DailyIntervals.type: frozenset({"type", "intervals"}),
    DailyIntervalsSpecific.type: frozenset({"type", "days", "intervals"}),
    NoSchedule.type: frozenset({"type"}),
}
_TIME_KEYS = frozenset({"hour", "minute"})
_INTERVAL_KEYS = frozenset({"start", "end"})
_RANGE_KEYS = frozenset({"start", "end"})
_AVAILABILITY_KEYS = frozenset({"added", "removed"})


# --- Field parsers ---


def _check_keys(data: dict[str, Any], allowed: frozenset[str], what: str) -> None:
    if not isinstance(data, dict):
        raise TypeError(f"{what} must be an object, got {type(data).__name__}")
    unknown = set(data) - allowed
    if unknown:
        raise ValueError(f"unknown {what} fields {sorted(unknown)}")


def _int(value: Any, field: str) -> int:
    # bool is an int subclass; JSON true/false is never a count.
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{field} must be an integer, got {value!r}")
    return value


def _parse_date(value: Any) -> date:
    if not isinstance(value, str):
        raise ValueError(f"expected a YYYY-MM-DD string, got {value!r}")
    return _ISO.parse_isodate(value)


def _parse_range(data: dict[str, Any]) -> DateRange:
    _check_keys(data, _RANGE_KEYS, "date range")
    return DateRange(start=_parse_date(data["start"]), end=_parse_date(data["end"]))


def _parse_availability(data: dict[str, Any]) -> Availability:
    _check_keys(data, _AVAILABILITY_KEYS, "availability")
    return Availability(
        added=_parse_date(data["added"]) if data.get("added") else None,
        removed=_parse_date(data["removed"]) if data.get("removed") else None,
    )


def _parse_time(data: dict[str, Any]) -> TimeOfDay:
    _check_keys(data, _TIME_KEYS, "time")
    return TimeOfDay(
        hour=_int(data["hour"], "hour"),
        minute=_int(data.get("minute", 0), "minute"),
    )


def _parse_interval(data: dict[str, Any]) -> Interval:
    _check_keys(data, _INTERVAL_KEYS, "interval")
    return Interval(start=_parse_time(data["start"]), end=_parse_time(data["end"]))


def _parse_days(data: dict[str, Any]) -> tuple[int, ...]:
    return tuple(_int(d, "days") for d in data["days"])


def parse_schedule(data: dict[str, Any]) -> Schedule:
    """Build a schedule variant from its tagged record.

    Fields a variant does not define are rejected rather than ignored.
    """
    tag = data.get("type")
    if tag not in SCHEDULE_TYPES:
        raise ValueError(f"unknown schedule type {tag!r}")
    _check_keys(data, _SCHEDULE_KEYS[tag], "schedule")
    if tag == Hourly.type:
        return Hourly(minute=_int(data["minute"], "minute"))
    if tag == MultiHourly.type:
        return MultiHourly(
            hours=_int(data["hours"], "hours"),
            minute=_int(data.get("minute", 0), "minute"),
            offset_hours=_int(data.get("offset_hours", 0), "offset_hours"),
        )
    if tag == DailySpecific.type:
        return DailySpecific(
            days=_parse_days(data),
            times=tuple(_parse_time(t) for t in data["times"]),
        )
    if tag == DailyIntervals.type:
        return DailyIntervals(
            intervals=tuple(_parse_interval(i) for i in data["intervals"])
        )
    if tag == DailyIntervalsSpecific.type:
        return DailyIntervalsSpecific(
            days=_parse_days(data),
            intervals=tuple(_parse_interval(i) for i in data["intervals"]),
        )
    return NoSchedule()


def parse_event(record: dict[str, Any]) -> EventDef:
    """Build one EventDef. Raises CatalogError on any malformed field."""
    name = record.get("name") if isinstance(record, dict) else None
    try:
        if not isinstance(record, dict):
            raise TypeError(f"event record must be an object, got {type(record).__name__}")
        unknown = set(record) - _EVENT_KEYS
        if unknown:
            raise ValueError(f"unknown fields {sorted(unknown)}")

        availability = None
        if record.get("availability") is not None:
            availability = _parse_availability(record["availability"])
        date_ranges = None
        if record.get("date_ranges") is not None:
            date_ranges = tuple(_parse_range(r) for r in record["date_ranges"])

        return EventDef(
            name=record["name"],
            category=Category(record["category"]),
            schedule=parse_schedule(record.get("schedule") or {"type": "none"}),
            kind=EventKind(record["kind"]) if record.get("kind") else None,
            description=record.get("description", ""),
            seasonal_category=(
                SeasonalCategory(record["seasonal_category"])
                if record.get("seasonal_category")
                else None
            ),
            duration_minutes=(
                _int(record["duration_minutes"], "duration_minutes")
                if record.get("duration_minutes") is not None
                else None
            ),
            date_range=(
                _parse_range(record["date_range"]) if record.get("date_range") else None
            ),
            date_ranges=date_ranges,
            availability=availability,
            bi_weekly_rotation=record.get("bi_weekly_rotation"),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        if isinstance(exc, KeyError):
            message = f"missing field {exc.args[0]!r}"
        else:
            message = str(exc)
        raise CatalogError(message, event_name=name) from exc


# --- Entry points ---


def catalog_from_records(records: Iterable[dict[str, Any]]) -> Catalog:
    """Validate records and build a Catalog. Fails fast on the first bad one."""
    try:
        catalog = Catalog(parse_event(record) for record in records)
    except CatalogError as exc:
        logger.error("catalog_invalid", event_name=exc.event_name, error=str(exc))
        raise
    logger.debug("catalog_loaded", events=len(catalog))
    return catalog


def _invalid_file(path: str | Path, message: str) -> CatalogError:
    logger.error("catalog_invalid", path=str(path), error=message)
    return CatalogError(f"{path}: {message}")


def load_catalog(path: str | Path) -> Catalog:
    """Load a catalog from a JSON file: a list of records or {"events": [...]}."""
    with open(path, encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise _invalid_file(path, f"invalid JSON: {exc}") from exc
    if isinstance(data, dict):
        if "events" not in data:
            raise _invalid_file(path, 'missing top-level "events" list')
        data = data["events"]
    if not isinstance(data, list):
        raise _invalid_file(path, "expected a list of event records")
    logger.info("catalog_file_read", path=str(path), records=len(data))
    return catalog_from_records(data)


def default_catalog() -> Catalog:
    """The catalog shipped with the package."""
    text = resources.files("eventide_catalog").joinpath("data/events.json").read_text(
        encoding="utf-8"
    )
    return catalog_from_records(json.loads(text)["events"])
