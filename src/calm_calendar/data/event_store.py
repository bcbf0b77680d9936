from __future__ import annotations

import logging
from datetime import tzinfo
from threading import RLock
from typing import Any, Dict, List, Optional, Tuple

from ..domain import Category, DateKey, DayGroup, Event, NotFoundError, parse_date_key, to_date_key

logger = logging.getLogger(__name__)


class EventStore:
    """In-memory schedule of events keyed by calendar date.

    Events are addressed by ``(date_key, index)``. Any mutation may shift the
    indices of other events on the same date, so addresses must be re-resolved
    from a fresh read after every change.
    """

    def __init__(self, *, tz: Optional[tzinfo] = None) -> None:
        self._tz = tz
        self._days: Dict[DateKey, List[Event]] = {}
        self._lock = RLock()

    def __len__(self) -> int:
        with self._lock:
            return sum(len(events) for events in self._days.values())

    def __contains__(self, date_key: object) -> bool:
        with self._lock:
            return date_key in self._days

    def key_for(self, value: Any) -> DateKey:
        return to_date_key(value, self._tz)

    def add_event(self, day: Any, title: str, category: Category | str | None = None) -> Tuple[DateKey, int]:
        event = Event.create(title, category)
        date_key = self.key_for(day)
        with self._lock:
            events = self._days.setdefault(date_key, [])
            events.append(event)
            index = len(events) - 1
        logger.debug("Added %r on %s at position %d", event.title, date_key, index)
        return date_key, index

    def remove_event(self, date_key: DateKey, index: int) -> Event:
        with self._lock:
            events = self._resolve(date_key, index)
            removed = events.pop(index)
            if not events:
                self._days.pop(date_key, None)
        logger.debug("Removed %r from %s at position %d", removed.title, date_key, index)
        return removed

    def update_event(
        self,
        date_key: DateKey,
        index: int,
        title: str,
        category: Category | str | None = None,
    ) -> Event:
        with self._lock:
            events = self._resolve(date_key, index)
            replacement = Event.create(title, category)
            events[index] = replacement
        logger.debug("Updated %s position %d to %r", date_key, index, replacement.title)
        return replacement

    def get_event(self, date_key: DateKey, index: int) -> Event:
        with self._lock:
            return self._resolve(date_key, index)[index]

    def events_on(self, day: Any) -> List[Event]:
        date_key = self.key_for(day)
        with self._lock:
            return list(self._days.get(date_key, ()))

    def has_events(self, day: Any) -> bool:
        return self.key_for(day) in self

    def date_keys(self) -> List[DateKey]:
        with self._lock:
            return sorted(self._days, key=parse_date_key)

    def list_grouped(self, filter_category: Category | str | None = None) -> List[DayGroup]:
        """Return the schedule grouped by date, earliest date first.

        With a filter, only matching events are kept and dates left without
        any are dropped. Positions always refer to the unfiltered list.
        """

        category = Category.parse(filter_category)
        with self._lock:
            snapshot = [(date_key, list(events)) for date_key, events in self._days.items()]

        groups: List[DayGroup] = []
        for date_key, events in sorted(snapshot, key=lambda item: parse_date_key(item[0])):
            matched = [(position, event) for position, event in enumerate(events) if event.matches(category)]
            if not matched:
                continue
            groups.append(
                DayGroup(
                    date_key=date_key,
                    events=tuple(event for _, event in matched),
                    positions=tuple(position for position, _ in matched),
                )
            )
        return groups

    def clear(self) -> None:
        with self._lock:
            self._days.clear()

    def _resolve(self, date_key: DateKey, index: int) -> List[Event]:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Event position must be an integer, got {type(index).__name__}.")
        events = self._days.get(date_key)
        if not events:
            logger.info("Lookup of unknown date %s", date_key)
            raise NotFoundError(date_key)
        if not 0 <= index < len(events):
            logger.info("Lookup of position %r outside %s (%d events)", index, date_key, len(events))
            raise NotFoundError(date_key, index)
        return events
