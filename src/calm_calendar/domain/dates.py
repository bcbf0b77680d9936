from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Any, Optional

from .errors import InvalidDateError

DateKey = str


def to_date_key(value: Any, tz: Optional[tzinfo] = None) -> DateKey:
    """Normalize a date-like value to its ``YYYY-MM-DD`` key.

    Aware datetimes are converted to ``tz`` first when one is given. Naive
    datetimes are assumed to already be in local calendar time.
    """

    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        return to_date_key(_parse_text(value), tz)
    raise InvalidDateError(value)


def parse_date_key(key: DateKey) -> date:
    try:
        return date.fromisoformat(key)
    except (TypeError, ValueError) as exc:
        raise InvalidDateError(key) from exc


def _parse_text(text: str) -> date | datetime:
    raw = text.strip()
    try:
        if len(raw) == 10:
            return date.fromisoformat(raw)
        return datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError as exc:
        raise InvalidDateError(text) from exc
