"""Stable occurrence keys for external stores (e.g. "completed" checklists)."""
from __future__ import annotations

from datetime import date

from eventide.clock import game_time
from eventide.config import DEFAULT_CONFIG, ClockConfig
from eventide_catalog.types import EventDef

from eventide_schedule.types import Occurrence

KEY_SEPARATOR = "|"


def occurrence_key(
    event: EventDef,
    day: date,
    occurrence: Occurrence | None = None,
    config: ClockConfig = DEFAULT_CONFIG,
) -> str:
    """``name|YYYY-MM-DD`` plus ``|HH:MM`` (game time) for one occurrence.

    ``day`` is the game day for daily keys, or the week start for weekly keys.
    """
    parts = [event.name, day.isoformat()]
    if occurrence is not None:
        start = game_time(occurrence.start, config)
        parts.append(f"{start.hour:02d}:{start.minute:02d}")
    return KEY_SEPARATOR.join(parts)


def parse_occurrence_key(key: str) -> tuple[str, date, str | None]:
    """Split a key back into (name, day, HH:MM or None)."""
    name, _, rest = key.rpartition(KEY_SEPARATOR)
    if len(rest) == 5 and rest[2] == ":":
        name, _, day_text = name.rpartition(KEY_SEPARATOR)
        return name, date.fromisoformat(day_text), rest
    return name, date.fromisoformat(rest), None
