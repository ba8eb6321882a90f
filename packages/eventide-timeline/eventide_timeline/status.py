"""Live status of occurrences and reset countdowns, relative to an injected now."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from eventide.clock import next_bi_weekly_reset, next_daily_reset, next_weekly_reset
from eventide.config import DEFAULT_CONFIG, ClockConfig
from eventide_catalog.types import EventDef
from eventide_schedule.expand import effective_end
from eventide_schedule.types import Occurrence


class Phase(Enum):
    UPCOMING = "upcoming"
    ACTIVE = "active"
    ENDED = "ended"


@dataclass(frozen=True)
class StatusReport:
    """Where ``now`` sits relative to one occurrence.

    ``delta`` is time until start (upcoming), until end (active) or since the
    end (ended). Instant occurrences are never active; their "ended" delta is
    measured from the start.
    """

    phase: Phase
    delta: timedelta
    instant: bool = False

    def describe(self) -> str:
        text = format_duration(self.delta)
        if self.phase is Phase.UPCOMING:
            return f"Happens in {text}" if self.instant else f"Starts in {text}"
        if self.phase is Phase.ACTIVE:
            return f"Active! {text} left"
        return f"Happened {text} ago" if self.instant else f"Ended {text} ago"


def occurrence_status(
    event: EventDef, occurrence: Occurrence, now: datetime
) -> StatusReport:
    start = occurrence.start
    end = effective_end(event, occurrence)
    if end == start:
        if now < start:
            return StatusReport(Phase.UPCOMING, start - now, instant=True)
        return StatusReport(Phase.ENDED, now - start, instant=True)
    if now < start:
        return StatusReport(Phase.UPCOMING, start - now)
    if now < end:
        return StatusReport(Phase.ACTIVE, end - now)
    return StatusReport(Phase.ENDED, now - end)


# --- Formatting ---


def format_duration(delta: timedelta) -> str:
    """``HH:MM:SS``; hours are not wrapped at 24. Negative clamps to zero."""
    total = max(int(delta.total_seconds()), 0)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_duration_with_days(delta: timedelta) -> str:
    """``Nd HHh MMm``, the day part omitted when zero."""
    total = max(int(delta.total_seconds()), 0)
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes = rest // 60
    text = f"{hours:02d}h {minutes:02d}m"
    return f"{days}d {text}" if days else text


# --- Reset countdowns ---


@dataclass(frozen=True)
class ResetCountdowns:
    daily: timedelta
    weekly: timedelta
    bi_weekly: timedelta


def reset_countdowns(
    now: datetime, config: ClockConfig = DEFAULT_CONFIG
) -> ResetCountdowns:
    return ResetCountdowns(
        daily=next_daily_reset(now, config) - now,
        weekly=next_weekly_reset(now, config) - now,
        bi_weekly=next_bi_weekly_reset(now, config) - now,
    )
