from __future__ import annotations

from typing import Any, Dict, Optional

from .registry import register_api
from .serializers import serialize_event, serialize_group, serialize_ref
from .state import ApiState


@register_api(
    "add_event",
    description="Schedule an event on a day. Category is one of Festival, Work, Casual, Others or empty.",
    category="calendar",
    tags=("write",),
)
def add_event(state: ApiState, day: str, title: str, category: Optional[str] = None) -> Dict[str, Any]:
    date_key, index = state.calendar.add_event(day, title, category)
    return {"event": serialize_event(state.calendar.get_event(date_key, index)), "ref": serialize_ref(date_key, index)}


@register_api(
    "update_event",
    description="Replace the event at a position on a day, keeping its position.",
    category="calendar",
    tags=("write",),
)
def update_event(
    state: ApiState,
    day: str,
    index: int,
    title: str,
    category: Optional[str] = None,
) -> Dict[str, Any]:
    event = state.calendar.update_event(day, index, title, category)
    return {"event": serialize_event(event), "ref": serialize_ref(state.calendar.store.key_for(day), index)}


@register_api(
    "remove_event",
    description="Delete the event at a position on a day. Later events on that day move up by one.",
    category="calendar",
    tags=("write",),
)
def remove_event(state: ApiState, day: str, index: int) -> Dict[str, Any]:
    removed = state.calendar.remove_event(day, index)
    return {"deleted": serialize_event(removed)}


@register_api(
    "get_event",
    description="Return the event at a position on a day.",
    category="calendar",
    tags=("read",),
)
def get_event(state: ApiState, day: str, index: int) -> Dict[str, Any]:
    return {"event": serialize_event(state.calendar.get_event(day, index))}


@register_api(
    "list_grouped",
    description="Return events grouped by day in chronological order, optionally limited to one category.",
    category="calendar",
    tags=("read",),
)
def list_grouped(state: ApiState, category: Optional[str] = None) -> Dict[str, Any]:
    groups = state.calendar.list_grouped(state.categories.parse(category))
    return {"days": [serialize_group(group) for group in groups]}


@register_api(
    "has_events",
    description="Tell whether any event is scheduled on a day.",
    category="calendar",
    tags=("read",),
)
def has_events(state: ApiState, day: str) -> Dict[str, Any]:
    return {"day": state.calendar.store.key_for(day), "has_events": state.calendar.has_events(day)}


@register_api(
    "marked_dates",
    description="Return the days of a month that have at least one event.",
    category="calendar",
    tags=("read",),
)
def marked_dates(state: ApiState, year: int, month: int) -> Dict[str, Any]:
    return {"year": year, "month": month, "days": state.calendar.marked_dates(year, month)}


@register_api(
    "list_categories",
    description="List the event categories that may be assigned.",
    category="categories",
    tags=("read",),
)
def list_categories(state: ApiState) -> Dict[str, Any]:
    return {"categories": [category.value for category in state.categories.list_categories()]}
