"""eventide - Game clock and shared types for the in-game event calendar."""

from eventide.clock import (
    date_parity,
    game_day,
    game_day_end,
    game_day_start,
    game_time,
    next_bi_weekly_reset,
    next_daily_reset,
    next_weekly_reset,
    to_local_display_time,
    to_viewer_time,
    week_parity,
    week_start,
)
from eventide.config import DEFAULT_CONFIG, ClockConfig
from eventide.settings import EventideSettings, load_settings
from eventide.types import EVEN, ODD, CatalogError, ConfigError, GameDate, Instant

__all__ = [
    "ClockConfig",
    "DEFAULT_CONFIG",
    "CatalogError",
    "ConfigError",
    "EventideSettings",
    "load_settings",
    "Instant",
    "GameDate",
    "EVEN",
    "ODD",
    "game_time",
    "game_day",
    "game_day_start",
    "game_day_end",
    "to_local_display_time",
    "to_viewer_time",
    "week_start",
    "next_daily_reset",
    "next_weekly_reset",
    "next_bi_weekly_reset",
    "date_parity",
    "week_parity",
]
