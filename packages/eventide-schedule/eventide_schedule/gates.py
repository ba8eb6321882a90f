"""Day-level gates deciding whether an event can occur on a game day."""
from __future__ import annotations

from datetime import date

from eventide.clock import date_parity
from eventide_catalog.types import EventDef


def exists_on(event: EventDef, day: date) -> bool:
    """Existence gate for ``day``.

    Availability, when set, is the only gate consulted. Otherwise the event
    exists inside its date range (or any of its ranges). With neither, the
    event always exists.
    """
    if event.availability is not None:
        return event.availability.contains(day)
    ranges = event.ranges()
    if ranges:
        return any(r.contains(day) for r in ranges)
    return True


def rotation_matches(event: EventDef, day: date) -> bool:
    """Bi-weekly gate: ISO week parity of ``day`` must match the rotation."""
    if event.bi_weekly_rotation is None:
        return True
    return date_parity(day) == event.bi_weekly_rotation


def is_live(event: EventDef, day: date) -> bool:
    """Both gates pass for ``day``."""
    return exists_on(event, day) and rotation_matches(event, day)
