"""Shared type aliases and errors for the eventide packages."""

from __future__ import annotations

from datetime import date, datetime

Instant = datetime
GameDate = date

EVEN = "even"
ODD = "odd"
PARITIES = (EVEN, ODD)


class CatalogError(ValueError):
    """Raised when event catalog data is malformed. Reported at load time."""

    def __init__(self, message: str, event_name: str | None = None) -> None:
        self.event_name = event_name
        if event_name is not None:
            message = f"{event_name!r}: {message}"
        super().__init__(message)


class ConfigError(ValueError):
    """Raised when EVENTIDE_* environment settings are invalid."""
