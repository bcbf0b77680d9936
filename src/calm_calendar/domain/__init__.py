"""Domain models for the event schedule."""

from __future__ import annotations

from .dates import DateKey, parse_date_key, to_date_key
from .enums import Category
from .errors import (
    EmptyTitleError,
    EventStoreError,
    InvalidCategoryError,
    InvalidDateError,
    NotFoundError,
)
from .models import DayGroup, Event, clean_title

__all__ = [
    "Category",
    "DateKey",
    "DayGroup",
    "EmptyTitleError",
    "Event",
    "EventStoreError",
    "InvalidCategoryError",
    "InvalidDateError",
    "NotFoundError",
    "clean_title",
    "parse_date_key",
    "to_date_key",
]
