"""Occurrence type produced by the expansion engine."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Occurrence:
    """One concrete instance of an event. Ephemeral, identified by ``start``."""

    start: datetime
    end: datetime | None = None

    @property
    def is_instant(self) -> bool:
        return self.end is None or self.end == self.start

    @property
    def duration(self) -> timedelta:
        if self.end is None:
            return timedelta(0)
        return self.end - self.start
