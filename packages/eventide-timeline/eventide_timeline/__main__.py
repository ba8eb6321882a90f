"""Command-line views of the event calendar.

    python -m eventide_timeline day --date 2025-10-15
    python -m eventide_timeline week --hide-daily
    python -m eventide_timeline month --date 2025-11-01
    python -m eventide_timeline resets --tz Europe/Berlin
"""
from __future__ import annotations

import argparse
from datetime import date, datetime, timezone

import structlog
from dateutil.parser import isoparser

from eventide.clock import game_day, game_time, to_viewer_time
from eventide.config import ClockConfig
from eventide.logging_config import configure_logging
from eventide.types import ConfigError
from eventide_catalog.catalog import Catalog
from eventide_catalog.loader import default_catalog, load_catalog
from eventide_catalog.types import Category

from eventide_timeline.daily import occurrences_for_day
from eventide_timeline.monthly import LANES, events_for_month
from eventide_timeline.status import (
    format_duration,
    format_duration_with_days,
    occurrence_status,
    reset_countdowns,
)
from eventide_timeline.weekly import events_for_week

logger = structlog.get_logger(__name__)

TIME_FORMATS = {"24h": "%H:%M", "12h": "%I:%M %p"}


def _parse_day(text: str) -> date:
    try:
        return isoparser().parse_isodate(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {text!r}: {exc}") from exc


def _parse_category(text: str) -> Category:
    try:
        return Category(text)
    except ValueError:
        choices = ", ".join(c.value for c in Category)
        raise argparse.ArgumentTypeError(
            f"unknown category {text!r} (choose from {choices})"
        ) from None


def _clock(when: datetime, args: argparse.Namespace, config: ClockConfig) -> str:
    fmt = TIME_FORMATS[args.time_format]
    if args.tz is None:
        return game_time(when, config).strftime(fmt)
    return to_viewer_time(when, args.tz).strftime(fmt)


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------

def print_day(catalog: Catalog, args: argparse.Namespace, now: datetime,
              config: ClockConfig) -> None:
    day = args.date or game_day(now, config)
    timeline = occurrences_for_day(catalog, day, args.category, config)
    print(f"=== Game day {day.isoformat()} ===")
    if timeline.is_empty():
        print("  (nothing scheduled)")
        return
    for entry in timeline.entries():
        print(f"  [{entry.event.category.value}] {entry.event.name}")
        for occ in entry.occurrences:
            status = occurrence_status(entry.event, occ, now).describe()
            span = _clock(occ.start, args, config)
            if occ.end is not None:
                span += f"-{_clock(occ.end, args, config)}"
            print(f"      {span:<17} {status}")


def print_week(catalog: Catalog, args: argparse.Namespace, now: datetime,
               config: ClockConfig) -> None:
    view = events_for_week(
        catalog,
        args.date or game_day(now, config),
        hide_daily=args.hide_daily,
        hide_permanent=args.hide_permanent,
        categories=args.category,
        config=config,
    )
    print(f"=== Week {view.game_week_number} ({view.week_start} to {view.week_end}, "
          f"ISO {view.iso_week_number}, {view.parity}) ===")
    for bar in view.bars:
        first = view.days[bar.first_day].name
        last = view.days[bar.day_indices[-1]].name
        print(f"  {first}-{last:<5} {bar.event.name}")
    for day in view.days:
        if day.pre_launch:
            print(f"  {day.name} {day.date}: no data")
            continue
        names = ", ".join(event.name for event in day.events())
        print(f"  {day.name} {day.date}: {names or '-'}")


def print_month(catalog: Catalog, args: argparse.Namespace, now: datetime,
                config: ClockConfig) -> None:
    anchor = args.date or game_day(now, config)
    view = events_for_month(catalog, anchor.year, anchor.month, args.category)
    print(f"=== {view.first_day.strftime('%B %Y')} ===")
    lanes = view.lanes()
    for lane in LANES:
        if not lanes[lane]:
            continue
        print(f"  {lane.replace('_', ' ')}:")
        for bar in lanes[lane]:
            left = "<" if bar.clipped_start else " "
            right = ">" if bar.clipped_end else " "
            print(f"    {left}{bar.start.day:>2}-{bar.end.day:<2}{right} {bar.event.name}")


def print_resets(args: argparse.Namespace, now: datetime, config: ClockConfig) -> None:
    countdowns = reset_countdowns(now, config)
    fmt = "%Y-%m-%d " + TIME_FORMATS[args.time_format]
    print(f"Game time:  {game_time(now, config).strftime(fmt)}")
    print(f"Daily:      {format_duration(countdowns.daily)}")
    print(f"Weekly:     {format_duration_with_days(countdowns.weekly)}")
    print(f"Bi-weekly:  {format_duration_with_days(countdowns.bi_weekly)}")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, now: datetime | None = None) -> None:
    parser = argparse.ArgumentParser(description="Eventide - in-game event calendar")
    parser.add_argument("view", choices=("day", "week", "month", "resets"),
                        help="which view to print")
    parser.add_argument("--date", "-d", type=_parse_day, default=None,
                        help="game day to show, YYYY-MM-DD (default: today)")
    parser.add_argument("--catalog", "-c", default=None,
                        help="path to an events JSON file (default: bundled catalog)")
    parser.add_argument("--category", action="append", type=_parse_category,
                        help="only show this category (repeatable)")
    parser.add_argument("--tz", default=None,
                        help="viewer timezone for clock times (default: game time)")
    parser.add_argument("--time-format", choices=sorted(TIME_FORMATS), default="24h",
                        help="clock style for times (default: 24h)")
    parser.add_argument("--hide-daily", action="store_true",
                        help="week view: drop events that run every day")
    parser.add_argument("--hide-permanent", action="store_true",
                        help="week view: show only seasonal events")
    parser.add_argument("--log-level", default=None,
                        help="log level (default: $EVENTIDE_LOG_LEVEL or INFO)")
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level)
        config = ClockConfig.from_env()
    except ConfigError as exc:
        parser.error(str(exc))
    if now is None:
        now = datetime.now(timezone.utc)
    logger.debug("view_requested", view=args.view, date=str(args.date), tz=args.tz)

    if args.view == "resets":
        print_resets(args, now, config)
        return

    catalog = load_catalog(args.catalog) if args.catalog else default_catalog()
    if args.view == "day":
        print_day(catalog, args, now, config)
    elif args.view == "week":
        print_week(catalog, args, now, config)
    else:
        print_month(catalog, args, now, config)


if __name__ == "__main__":
    main()
