from __future__ import annotations

from typing import Any, Dict

from ..domain import DayGroup, Event
from .models import DayGroupPayload, EventPayload, EventRef


def serialize_event(event: Event) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump()


def serialize_group(group: DayGroup) -> Dict[str, Any]:
    return DayGroupPayload.from_domain(group).model_dump()


def serialize_ref(date_key: str, index: int) -> Dict[str, Any]:
    return EventRef(date_key=date_key, index=index).model_dump()
