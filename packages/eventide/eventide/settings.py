"""Typed environment settings for eventide.

Every variable carries the ``EVENTIDE_`` prefix:

    EVENTIDE_OFFSET_HOURS          game clock offset from UTC (-23..23)
    EVENTIDE_RESET_HOUR            game-time hour of the daily reset (0..23)
    EVENTIDE_WEEKLY_RESET_WEEKDAY  weekday of the weekly reset, 0=Monday (0..6)
    EVENTIDE_BIWEEKLY_REFERENCE    ISO instant of a known bi-weekly reset
    EVENTIDE_LAUNCH_DATE           first game day with data (YYYY-MM-DD)
    EVENTIDE_LOG_LEVEL             DEBUG, INFO, WARNING, ERROR or CRITICAL
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timezone

from dateutil.parser import isoparse
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from eventide.types import ConfigError

ENV_PREFIX = "EVENTIDE_"


class EventideSettings(BaseSettings):
    """Settings read from ``EVENTIDE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        extra="ignore",
    )

    offset_hours: int = Field(-2, ge=-23, le=23)
    reset_hour: int = Field(5, ge=0, le=23)
    weekly_reset_weekday: int = Field(0, ge=0, le=6)
    biweekly_reference: datetime = datetime(2024, 7, 29, 7, 0, tzinfo=timezone.utc)
    launch_date: date = date(2025, 10, 9)
    log_level: str | None = None

    @field_validator("biweekly_reference", mode="before")
    @classmethod
    def _parse_reference(cls, value: object) -> object:
        if isinstance(value, str):
            return isoparse(value)
        return value

    @field_validator("biweekly_reference")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        """A reference without an offset is read as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip().upper()
        if normalized not in logging._nameToLevel:
            raise ValueError(f"unknown log level {value!r}")
        return normalized


def load_settings() -> EventideSettings:
    """Read the environment, naming the offending variable on failure.

    Not cached: the environment is read on every call.
    """
    try:
        return EventideSettings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{ENV_PREFIX}{str(error['loc'][0]).upper()}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigError(f"invalid environment settings: {problems}") from exc
