import pytest

from calm_calendar.api import call_api, get_api_functions, register_api
from calm_calendar.domain import EmptyTitleError, NotFoundError


def test_endpoints_are_registered():
    names = {func.name for func in get_api_functions()}
    assert {
        "add_event",
        "update_event",
        "remove_event",
        "get_event",
        "list_grouped",
        "has_events",
        "marked_dates",
        "list_categories",
        "list_available_tools",
    } <= names


def test_parameter_schema_hides_state():
    functions = {func.name: func for func in get_api_functions()}
    schema = functions["update_event"].parameter_schema
    assert set(schema["properties"]) == {"day", "index", "title", "category"}
    assert schema["required"] == ["day", "index", "title"]
    assert schema["properties"]["index"]["type"] == "integer"
    assert "required" not in functions["list_grouped"].parameter_schema


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError):
        register_api("add_event", description="again", category="calendar")(lambda state: None)


def test_unknown_function(api_state):
    with pytest.raises(KeyError):
        call_api(api_state, "does_not_exist")


def test_scenario_through_api(api_state):
    call_api(api_state, "add_event", day="2024-05-01", title="Picnic", category="Casual")
    call_api(api_state, "add_event", day="2024-05-01", title="Standup", category="Work")
    created = call_api(api_state, "add_event", day="2024-04-30", title="Deadline", category="Work")
    assert created == {
        "event": {"title": "Deadline", "category": "Work"},
        "ref": {"date_key": "2024-04-30", "index": 0},
    }

    filtered = call_api(api_state, "list_grouped", category="Work")
    assert filtered == {
        "days": [
            {"date_key": "2024-04-30", "events": [{"title": "Deadline", "category": "Work", "index": 0}]},
            {"date_key": "2024-05-01", "events": [{"title": "Standup", "category": "Work", "index": 1}]},
        ]
    }

    deleted = call_api(api_state, "remove_event", day="2024-05-01", index=1)
    assert deleted == {"deleted": {"title": "Standup", "category": "Work"}}
    assert call_api(api_state, "has_events", day="2024-05-01") == {"day": "2024-05-01", "has_events": True}
    assert call_api(api_state, "marked_dates", year=2024, month=4) == {"year": 2024, "month": 4, "days": ["2024-04-30"]}


def test_update_through_api(api_state):
    call_api(api_state, "add_event", day="2024-05-01", title="Standup", category="Work")
    result = call_api(api_state, "update_event", day="2024-05-01", index=0, title="Retro", category=None)
    assert result["event"] == {"title": "Retro", "category": None}
    assert call_api(api_state, "get_event", day="2024-05-01", index=0) == {"event": {"title": "Retro", "category": None}}
    with pytest.raises(EmptyTitleError):
        call_api(api_state, "update_event", day="2024-05-01", index=0, title="", category="Work")
    with pytest.raises(NotFoundError):
        call_api(api_state, "get_event", day="2024-05-02", index=0)


def test_state_cannot_be_overridden(api_state):
    with pytest.raises(TypeError):
        call_api(api_state, "list_categories", state=None)


def test_list_categories_and_tools(api_state):
    assert call_api(api_state, "list_categories") == {"categories": ["Festival", "Work", "Casual", "Others"]}
    tools = call_api(api_state, "list_available_tools")["tools"]
    assert [tool["name"] for tool in tools] == sorted(tool["name"] for tool in tools)
