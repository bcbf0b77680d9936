"""Application services wrapping the event store for callers."""

from __future__ import annotations

from .calendar import CalendarService
from .categories import CategoryService
from .context import ServiceContext

__all__ = ["CalendarService", "CategoryService", "ServiceContext"]
