"""Tests for catalog record parsing, validation and the bundled catalog."""
import json
from datetime import date

import pytest
from structlog.testing import capture_logs

from eventide.types import CatalogError
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
    TimeOfDay,
)
from eventide_catalog.types import Category, DateRange, EventKind, SeasonalCategory


def _record(**overrides):
    record = {
        "name": "Guild Dance",
        "category": "Guild",
        "schedule": {
            "type": "daily-intervals-specific",
            "days": [5],
            "intervals": [
                {"start": {"hour": 15, "minute": 30}, "end": {"hour": 3, "minute": 30}}
            ],
        },
    }
    record.update(overrides)
    return record


class TestParseSchedule:
    def test_hourly(self):
        assert parse_schedule({"type": "hourly", "minute": 30}) == Hourly(30)

    def test_multi_hourly_defaults(self):
        assert parse_schedule({"type": "multi-hourly", "hours": 4}) == MultiHourly(hours=4)

    def test_daily_specific(self):
        schedule = parse_schedule(
            {"type": "daily-specific", "days": [0, 6], "times": [{"hour": 13, "minute": 45}]}
        )
        assert schedule == DailySpecific(days=(0, 6), times=(TimeOfDay(13, 45),))

    def test_daily_intervals_minute_defaults_to_zero(self):
        schedule = parse_schedule(
            {"type": "daily-intervals", "intervals": [{"start": {"hour": 23}, "end": {"hour": 1}}]}
        )
        assert schedule == DailyIntervals(intervals=(Interval(TimeOfDay(23), TimeOfDay(1)),))

    def test_daily_intervals_specific(self):
        schedule = parse_schedule(_record()["schedule"])
        assert isinstance(schedule, DailyIntervalsSpecific)
        assert schedule.days == (5,)
        assert schedule.intervals[0].crosses_midnight

    def test_none(self):
        assert parse_schedule({"type": "none"}) == NoSchedule()

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="unknown schedule type"):
            parse_schedule({"type": "fortnightly"})

    def test_misspelled_field_rejected(self):
        with pytest.raises(ValueError, match="offsetHours"):
            parse_schedule({"type": "multi-hourly", "hours": 6, "offsetHours": 3})

    def test_field_from_other_variant_rejected(self):
        with pytest.raises(ValueError, match="unknown schedule fields"):
            parse_schedule({"type": "hourly", "minute": 0, "days": [1]})

    def test_unknown_time_field_rejected(self):
        schedule = {"type": "daily-specific", "days": [0], "times": [{"hour": 1, "second": 5}]}
        with pytest.raises(ValueError, match="unknown time fields"):
            parse_schedule(schedule)

    @pytest.mark.parametrize(
        "schedule",
        [
            {"type": "hourly", "minute": True},
            {"type": "hourly", "minute": 30.7},
            {"type": "multi-hourly", "hours": "6"},
            {"type": "daily-specific", "days": [0], "times": [{"hour": True}]},
            {"type": "daily-specific", "days": [1.0], "times": [{"hour": 1}]},
        ],
    )
    def test_non_integer_fields_rejected(self, schedule):
        with pytest.raises(ValueError, match="must be an integer"):
            parse_schedule(schedule)


class TestParseEvent:
    def test_full_record(self):
        event = parse_event(
            {
                "name": "Starlight Fireworks",
                "kind": "Special Event",
                "category": "Social",
                "seasonal_category": "Silverstar Carnival",
                "description": "Fireworks.",
                "schedule": {"type": "daily-specific", "days": [0], "times": [{"hour": 1}]},
                "duration_minutes": 10,
                "date_ranges": [
                    {"start": "2025-10-09", "end": "2025-10-12"},
                    {"start": "2025-10-17", "end": "2025-10-18"},
                ],
            }
        )
        assert event.kind is EventKind.SPECIAL_EVENT
        assert event.category is Category.SOCIAL
        assert event.seasonal_category is SeasonalCategory.SILVERSTAR_CARNIVAL
        assert event.duration_minutes == 10
        assert event.ranges()[1] == DateRange(date(2025, 10, 17), date(2025, 10, 18))

    def test_schedule_defaults_to_none(self):
        event = parse_event({"name": "Silverstar Carnival", "category": "Event"})
        assert isinstance(event.schedule, NoSchedule)

    def test_availability(self):
        event = parse_event(_record(availability={"added": "2025-10-13"}))
        assert event.availability.added == date(2025, 10, 13)
        assert event.availability.removed is None

    def test_missing_field(self):
        record = _record()
        del record["category"]
        with pytest.raises(CatalogError, match="missing field 'category'") as info:
            parse_event(record)
        assert info.value.event_name == "Guild Dance"

    def test_unknown_category(self):
        with pytest.raises(CatalogError) as info:
            parse_event(_record(category="Fishing"))
        assert info.value.event_name == "Guild Dance"

    def test_unknown_field(self):
        with pytest.raises(CatalogError, match="unknown fields"):
            parse_event(_record(colour="teal"))

    def test_reversed_date_range(self):
        with pytest.raises(CatalogError, match="after end"):
            parse_event(_record(date_range={"start": "2025-11-10", "end": "2025-10-09"}))

    def test_malformed_date(self):
        with pytest.raises(CatalogError):
            parse_event(_record(date_range={"start": "2025-13-40", "end": "2025-12-01"}))

    def test_non_string_date(self):
        with pytest.raises(CatalogError, match="YYYY-MM-DD"):
            parse_event(_record(date_range={"start": 20251009, "end": "2025-12-01"}))

    def test_bad_weekday(self):
        schedule = {"type": "daily-specific", "days": [7], "times": [{"hour": 1}]}
        with pytest.raises(CatalogError, match="0..6"):
            parse_event(_record(schedule=schedule))

    def test_bad_rotation(self):
        with pytest.raises(CatalogError, match="bi_weekly_rotation"):
            parse_event(_record(bi_weekly_rotation="monthly"))

    def test_misspelled_schedule_field_names_event(self):
        schedule = {"type": "multi-hourly", "hours": 6, "offsetHours": 3}
        with pytest.raises(CatalogError, match="offsetHours") as info:
            parse_event(_record(schedule=schedule))
        assert info.value.event_name == "Guild Dance"

    def test_unknown_availability_field(self):
        with pytest.raises(CatalogError, match="unknown availability fields"):
            parse_event(_record(availability={"added": "2025-10-13", "until": "2025-11-01"}))

    @pytest.mark.parametrize("value", [True, 1.5, "30"])
    def test_duration_must_be_integer(self, value):
        with pytest.raises(CatalogError, match="duration_minutes must be an integer"):
            parse_event(_record(duration_minutes=value))

    def test_time_fields_not_truncated(self):
        schedule = {"type": "daily-specific", "days": [0], "times": [{"hour": 13, "minute": 30.7}]}
        with pytest.raises(CatalogError, match="minute must be an integer"):
            parse_event(_record(schedule=schedule))

    def test_availability_not_an_object(self):
        with pytest.raises(CatalogError):
            parse_event(_record(availability="2025-10-13"))

    def test_not_an_object(self):
        with pytest.raises(CatalogError) as info:
            parse_event(["Guild Dance"])
        assert info.value.event_name is None


class TestCatalogFromRecords:
    def test_preserves_order(self):
        catalog = catalog_from_records(
            [_record(name="B"), _record(name="A"), _record(name="C")]
        )
        assert catalog.names() == ["B", "A", "C"]

    def test_duplicate_name(self):
        with pytest.raises(CatalogError, match="duplicate"):
            catalog_from_records([_record(), _record()])

    def test_invalid_record_is_logged(self):
        with capture_logs() as logs:
            with pytest.raises(CatalogError):
                catalog_from_records([_record(), _record(name="Bad", category="Nope")])
        assert logs[-1]["event"] == "catalog_invalid"
        assert logs[-1]["event_name"] == "Bad"
        assert logs[-1]["log_level"] == "error"


class TestLoadCatalog:
    def test_list_file(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text(json.dumps([_record()]), encoding="utf-8")
        assert load_catalog(path).names() == ["Guild Dance"]

    def test_wrapped_file(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text(json.dumps({"events": [_record()]}), encoding="utf-8")
        assert len(load_catalog(str(path))) == 1

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text(json.dumps("Guild Dance"), encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_object_without_events_key(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text(json.dumps({"evnts": [_record()]}), encoding="utf-8")
        with capture_logs() as logs:
            with pytest.raises(CatalogError, match='missing top-level "events"'):
                load_catalog(path)
        assert logs[-1]["event"] == "catalog_invalid"

    def test_malformed_json_names_file(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text('{"events": [', encoding="utf-8")
        with pytest.raises(CatalogError, match="invalid JSON") as info:
            load_catalog(path)
        assert str(path) in str(info.value)


class TestDefaultCatalog:
    def test_loads(self):
        catalog = default_catalog()
        assert len(catalog) == 49
        assert "Guild Dance" in catalog
        assert "World Boss Crusade: Rathalos" in catalog

    def test_rotations(self):
        catalog = default_catalog()
        assert catalog.get("World Boss Crusade: Rathalos").bi_weekly_rotation == "odd"
        assert catalog.get("World Boss Crusade: Byrnhald Golem").bi_weekly_rotation == "even"

    def test_categories_present(self):
        categories = default_catalog().categories()
        assert Category.BOSS in categories
        assert Category.RAID_UNLOCK in categories
