from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..data import EventStore


@dataclass(slots=True)
class ServiceContext:
    """Owns the settings and the event store shared by the services."""

    settings: AppSettings = field(default_factory=get_settings)
    store: EventStore = field(init=False)

    def __post_init__(self) -> None:
        self.store = EventStore(tz=self.settings.ui.tzinfo)
