"""Catalog: the read-only, ordered set of event definitions."""
from __future__ import annotations

from typing import Iterable, Iterator

from eventide.types import CatalogError

from eventide_catalog.types import Category, EventDef


class Catalog:
    """Ordered event definitions keyed by unique name. Never mutated after init."""

    def __init__(self, events: Iterable[EventDef] = ()) -> None:
        by_name: dict[str, EventDef] = {}
        for event in events:
            if event.name in by_name:
                raise CatalogError("duplicate event name", event_name=event.name)
            by_name[event.name] = event
        self._by_name = by_name
        self._events = tuple(by_name.values())

    def __iter__(self) -> Iterator[EventDef]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"Catalog({len(self._events)} events)"

    # --- Queries ---

    def events(self) -> tuple[EventDef, ...]:
        """All definitions in declaration order."""
        return self._events

    def get(self, name: str) -> EventDef | None:
        """Look up a definition by name."""
        return self._by_name.get(name)

    def names(self) -> list[str]:
        """List all event names in declaration order."""
        return list(self._by_name)

    def categories(self) -> set[Category]:
        """Categories used by at least one event."""
        return {event.category for event in self._events}

    def filtered(self, categories: Iterable[Category] | None) -> tuple[EventDef, ...]:
        """Events whose category is enabled. ``None`` enables everything."""
        if categories is None:
            return self._events
        enabled = set(categories)
        return tuple(e for e in self._events if e.category in enabled)
