"""Calm Calendar: a per-day event schedule with grouped, filterable views."""

from __future__ import annotations

from .data import EventStore
from .domain import (
    Category,
    DayGroup,
    EmptyTitleError,
    Event,
    EventStoreError,
    InvalidCategoryError,
    InvalidDateError,
    NotFoundError,
    to_date_key,
)

__all__ = [
    "Category",
    "DayGroup",
    "EmptyTitleError",
    "Event",
    "EventStore",
    "EventStoreError",
    "InvalidCategoryError",
    "InvalidDateError",
    "NotFoundError",
    "main",
    "to_date_key",
]


def main() -> None:
    from .cli import main as cli_main

    cli_main()
