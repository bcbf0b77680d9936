from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from .dates import DateKey
from .enums import Category
from .errors import EmptyTitleError


def clean_title(title: Any) -> str:
    if title is None:
        raise EmptyTitleError()
    if not isinstance(title, str):
        raise TypeError(f"Event title must be text, got {type(title).__name__}.")
    text = title.strip()
    if not text:
        raise EmptyTitleError()
    return text


@dataclass(frozen=True, slots=True)
class Event:
    title: str
    category: Optional[Category] = None

    @classmethod
    def create(cls, title: Any, category: Category | str | None = None) -> "Event":
        """Validate both fields before building, so a rejected event never exists."""

        return cls(title=clean_title(title), category=Category.parse(category))

    def matches(self, category: Optional[Category]) -> bool:
        return category is None or self.category is category

    def to_record(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "category": self.category.value if self.category else None,
        }


@dataclass(frozen=True, slots=True)
class DayGroup:
    """Events of one date as shown in the grouped view.

    ``positions[i]`` is the store index of ``events[i]`` on ``date_key``.
    """

    date_key: DateKey
    events: Tuple[Event, ...]
    positions: Tuple[int, ...]

    def __iter__(self) -> Iterator[Any]:
        yield self.date_key
        yield list(self.events)
