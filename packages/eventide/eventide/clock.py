"""Game clock: real time <-> game time <-> game day, and reset boundaries.

Game time is real time viewed through a fixed-offset ``tzinfo``. A game-time
instant therefore compares equal to the real instant it came from, while its
wall-clock fields (``hour``, ``date()``, ...) read as game time.

A game day starts at ``reset_hour`` game time, not midnight: an instant at
04:59 game time still belongs to the previous game day.
"""
from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo

from dateutil import tz as dateutil_tz

from eventide.config import DEFAULT_CONFIG, ClockConfig
from eventide.types import EVEN, ODD

_DAY = timedelta(days=1)
_BI_WEEK = timedelta(days=14)


def _require_aware(instant: datetime) -> None:
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ValueError(f"expected a timezone-aware datetime, got naive {instant!r}")


# --- Conversions ---


def game_time(real: datetime, config: ClockConfig = DEFAULT_CONFIG) -> datetime:
    """Return ``real`` expressed on the game clock."""
    _require_aware(real)
    return real.astimezone(config.game_tz)


def game_day(real: datetime, config: ClockConfig = DEFAULT_CONFIG) -> date:
    """Logical game day of ``real``. Rolls over at the reset hour."""
    now = game_time(real, config)
    if now.hour < config.reset_hour:
        return (now - _DAY).date()
    return now.date()


def to_local_display_time(
    game_instant: datetime, config: ClockConfig = DEFAULT_CONFIG
) -> datetime:
    """Undo ``game_time``: the true UTC instant behind a game-time instant."""
    _require_aware(game_instant)
    return game_instant.astimezone(timezone.utc)


def to_viewer_time(instant: datetime, tz_name: str | None = None) -> datetime:
    """Render ``instant`` in a named timezone, or the machine's local zone."""
    _require_aware(instant)
    zone: tzinfo | None
    if tz_name is None:
        zone = dateutil_tz.tzlocal()
    else:
        zone = dateutil_tz.gettz(tz_name)
        if zone is None:
            raise ValueError(f"Unknown timezone {tz_name!r}")
    return instant.astimezone(zone)


# --- Game day windows ---


def game_day_start(day: date, config: ClockConfig = DEFAULT_CONFIG) -> datetime:
    """First instant of ``day``: the reset hour, game time."""
    return datetime.combine(day, time(config.reset_hour), tzinfo=config.game_tz)


def game_day_end(day: date, config: ClockConfig = DEFAULT_CONFIG) -> datetime:
    """Exclusive end of ``day`` (start of the next game day)."""
    return game_day_start(day, config) + _DAY


def week_start(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


# --- Reset boundaries (UTC arithmetic) ---


def next_daily_reset(
    from_: datetime, config: ClockConfig = DEFAULT_CONFIG
) -> datetime:
    """Next daily reset strictly after ``from_``, in UTC."""
    _require_aware(from_)
    now = from_.astimezone(timezone.utc)
    candidate = datetime.combine(
        now.date(), time(config.reset_hour_utc), tzinfo=timezone.utc
    )
    if now >= candidate:
        candidate += _DAY
    return candidate


def next_weekly_reset(
    from_: datetime, config: ClockConfig = DEFAULT_CONFIG
) -> datetime:
    """Next weekly reset strictly after ``from_``, in UTC."""
    _require_aware(from_)
    now = from_.astimezone(timezone.utc)
    candidate = datetime.combine(
        now.date(), time(config.reset_hour_utc), tzinfo=timezone.utc
    )
    # A game-time reset may fall on the neighbouring UTC weekday
    shift = (config.reset_hour - config.offset_hours) // 24
    target = (config.weekly_reset_weekday + shift) % 7
    days_until = (target - candidate.weekday()) % 7
    if days_until == 0 and now >= candidate:
        days_until = 7
    return candidate + timedelta(days=days_until)


def next_bi_weekly_reset(
    from_: datetime, config: ClockConfig = DEFAULT_CONFIG
) -> datetime:
    """First 14-day boundary at or after ``from_``, anchored on the reference."""
    _require_aware(from_)
    reference = config.bi_weekly_reference.astimezone(timezone.utc)
    now = from_.astimezone(timezone.utc)
    if now <= reference:
        return reference
    periods = -((reference - now) // _BI_WEEK)  # ceiling division
    return reference + periods * _BI_WEEK


# --- Week parity ---


def date_parity(day: date) -> str:
    """'even' or 'odd' by the ISO (Monday-start) week number of ``day``."""
    return EVEN if day.isocalendar()[1] % 2 == 0 else ODD


def week_parity(instant: datetime, config: ClockConfig = DEFAULT_CONFIG) -> str:
    """ISO week parity of ``instant`` on the game clock."""
    return date_parity(game_time(instant, config).date())
