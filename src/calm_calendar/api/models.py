from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import DayGroup, Event


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    category: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, event: Event) -> "EventPayload":
        return cls(**event.to_record())


class EventRef(BaseModel):
    date_key: str
    index: int


class GroupedEventPayload(EventPayload):
    index: int

    @classmethod
    def from_position(cls, event: Event, index: int) -> "GroupedEventPayload":
        return cls(index=index, **EventPayload.from_domain(event).model_dump())


class DayGroupPayload(BaseModel):
    date_key: str
    events: List[GroupedEventPayload] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, group: DayGroup) -> "DayGroupPayload":
        return cls(
            date_key=group.date_key,
            events=[
                GroupedEventPayload.from_position(event, index)
                for event, index in zip(group.events, group.positions)
            ],
        )
