"""Game clock configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from eventide.settings import load_settings


@dataclass(frozen=True)
class ClockConfig:
    """Immutable configuration for the game clock.

    Attributes:
        offset_hours: Fixed offset of game time from UTC (game = UTC + offset).
        reset_hour: Game-time hour at which a game day rolls over.
        weekly_reset_weekday: Weekday of the weekly reset (0=Monday).
        bi_weekly_reference: A known bi-weekly reset instant (aware, UTC).
        launch_date: First game day with data. Earlier days render as "no data".
    """

    offset_hours: int = -2
    reset_hour: int = 5
    weekly_reset_weekday: int = 0
    bi_weekly_reference: datetime = datetime(2024, 7, 29, 7, 0, tzinfo=timezone.utc)
    launch_date: date = date(2025, 10, 9)

    def __post_init__(self) -> None:
        if not -23 <= self.offset_hours <= 23:
            raise ValueError(f"offset_hours must be in -23..23, got {self.offset_hours}")
        if not 0 <= self.reset_hour <= 23:
            raise ValueError(f"reset_hour must be in 0..23, got {self.reset_hour}")
        if not 0 <= self.weekly_reset_weekday <= 6:
            raise ValueError(
                f"weekly_reset_weekday must be in 0..6, got {self.weekly_reset_weekday}"
            )
        if self.bi_weekly_reference.tzinfo is None:
            raise ValueError("bi_weekly_reference must be timezone-aware")

    @property
    def game_tz(self) -> timezone:
        """Fixed-offset tzinfo whose wall clock reads as game time."""
        return timezone(timedelta(hours=self.offset_hours), name="Game")

    @property
    def reset_hour_utc(self) -> int:
        """UTC hour-of-day of the daily reset (07 with the defaults)."""
        return (self.reset_hour - self.offset_hours) % 24

    @classmethod
    def from_env(cls) -> ClockConfig:
        """Build a config from EVENTIDE_* variables, falling back to defaults.

        Raises ConfigError naming the variable when a value is invalid.
        """
        settings = load_settings()
        return cls(
            offset_hours=settings.offset_hours,
            reset_hour=settings.reset_hour,
            weekly_reset_weekday=settings.weekly_reset_weekday,
            bi_weekly_reference=settings.biweekly_reference,
            launch_date=settings.launch_date,
        )


DEFAULT_CONFIG = ClockConfig()
