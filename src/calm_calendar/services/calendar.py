from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import Any

from ..data import EventStore
from ..domain import Category, DateKey, DayGroup, Event, EventStoreError, InvalidDateError, parse_date_key
from .context import ServiceContext

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext

    @property
    def store(self) -> EventStore:
        return self.context.store

    def add_event(self, day: Any, title: str, category: Category | str | None = None) -> tuple[DateKey, int]:
        try:
            date_key, index = self.store.add_event(day, title, category)
        except EventStoreError as exc:
            logger.info("Rejected new event for %r: %s", day, exc)
            raise
        logger.info("Scheduled event on %s", date_key)
        return date_key, index

    def update_event(
        self,
        day: Any,
        index: int,
        title: str,
        category: Category | str | None = None,
    ) -> Event:
        date_key = self.store.key_for(day)
        try:
            updated = self.store.update_event(date_key, index, title, category)
        except EventStoreError as exc:
            logger.info("Rejected edit of %s[%s]: %s", date_key, index, exc)
            raise
        logger.info("Edited event %s[%d]", date_key, index)
        return updated

    def remove_event(self, day: Any, index: int) -> Event:
        date_key = self.store.key_for(day)
        try:
            removed = self.store.remove_event(date_key, index)
        except EventStoreError as exc:
            logger.info("Rejected removal of %s[%s]: %s", date_key, index, exc)
            raise
        logger.info("Deleted event %s[%d]", date_key, index)
        return removed

    def get_event(self, day: Any, index: int) -> Event:
        return self.store.get_event(self.store.key_for(day), index)

    def list_grouped(self, filter_category: Category | str | None = None) -> list[DayGroup]:
        return self.store.list_grouped(filter_category)

    def has_events(self, day: Any) -> bool:
        return self.store.has_events(day)

    def marked_dates(self, year: int, month: int) -> list[DateKey]:
        """Dates of one month that carry at least one event."""

        if not all(isinstance(part, int) and not isinstance(part, bool) for part in (year, month)):
            raise TypeError("year and month must be integers.")
        if not (MINYEAR <= year <= MAXYEAR and 1 <= month <= 12):
            raise InvalidDateError(f"{year}-{month:02d}")
        last_day = calendar.monthrange(year, month)[1]
        start, end = date(year, month, 1), date(year, month, last_day)
        return [key for key in self.store.date_keys() if start <= parse_date_key(key) <= end]
