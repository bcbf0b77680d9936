from __future__ import annotations

from typing import Any


class EventStoreError(Exception):
    """Base class for rejected event store operations."""


class EmptyTitleError(EventStoreError, ValueError):
    def __init__(self) -> None:
        super().__init__("Event title must not be empty.")


class InvalidCategoryError(EventStoreError, ValueError):
    def __init__(self, value: Any) -> None:
        from .enums import Category

        allowed = ", ".join(member.value for member in Category)
        super().__init__(f"Unknown category {value!r}; expected one of: {allowed}.")
        self.value = value


class InvalidDateError(EventStoreError, ValueError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"Cannot interpret {value!r} as a calendar date.")
        self.value = value


class NotFoundError(EventStoreError, LookupError):
    def __init__(self, date_key: str, index: int | None = None) -> None:
        if index is None:
            message = f"No events scheduled on {date_key}."
        else:
            message = f"No event at position {index} on {date_key}."
        super().__init__(message)
        self.date_key = date_key
        self.index = index
