from pathlib import Path

import pytest

from calm_calendar.api import ApiState
from calm_calendar.config import AppSettings, LoggingSettings, ServerSettings, UiSettings
from calm_calendar.data import EventStore
from calm_calendar.services import ServiceContext


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        ui=UiSettings(app_name="Calm Calendar", timezone="UTC"),
        server=ServerSettings(host="127.0.0.1", port=8000),
        logging=LoggingSettings(level="DEBUG", directory=tmp_path / "logs"),
    )


@pytest.fixture
def store() -> EventStore:
    return EventStore()


@pytest.fixture
def scenario_store(store: EventStore) -> EventStore:
    store.add_event("2024-05-01", "Picnic", "Casual")
    store.add_event("2024-05-01", "Standup", "Work")
    store.add_event("2024-04-30", "Deadline", "Work")
    return store


@pytest.fixture
def context(settings: AppSettings) -> ServiceContext:
    return ServiceContext(settings=settings)


@pytest.fixture
def api_state(context: ServiceContext) -> ApiState:
    return ApiState(context=context)

