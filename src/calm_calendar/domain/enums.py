from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from .errors import InvalidCategoryError


class Category(str, Enum):
    FESTIVAL = "Festival"
    WORK = "Work"
    CASUAL = "Casual"
    OTHERS = "Others"

    @classmethod
    def parse(cls, value: Union["Category", str, None]) -> Optional["Category"]:
        """Resolve ``value`` to a member; ``None`` and blank strings mean uncategorized."""

        if value is None or isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidCategoryError(value)
        text = value.strip()
        if not text:
            return None
        for member in cls:
            if text.lower() in (member.value.lower(), member.name.lower()):
                return member
        raise InvalidCategoryError(value)
