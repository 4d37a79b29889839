"""Pytest fixtures: fresh in-memory stores for fast, isolated tests."""
from datetime import date
from typing import Any

import pytest

from eventhub.schemas.event import EventCreate
from eventhub.services.event_store import EventStore
from eventhub.services.identity_store import IdentityStore
from eventhub.services.storage import InMemoryStorage, JsonFileStorage

# Before every seeded deadline, so seeded events are still open.
TODAY = date(2024, 2, 1)


@pytest.fixture
def event_store() -> EventStore:
    """An empty store; tests create exactly the events they need."""
    return EventStore()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def file_storage(tmp_path) -> JsonFileStorage:
    return JsonFileStorage(tmp_path / "storage.json")


@pytest.fixture
def identity_store(storage) -> IdentityStore:
    return IdentityStore(storage)


@pytest.fixture
def signed_in(identity_store) -> IdentityStore:
    """Identity store with the demo user (id "1") logged in."""
    assert identity_store.login("john@example.com", "secret123")
    return identity_store


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def make_event_data(**overrides: Any) -> EventCreate:
    """Helper: a valid EventCreate, with any field overridden."""
    data: dict[str, Any] = {
        "name": "Robotics Meetup",
        "organizer": "Robotics Club",
        "description": "Show and tell for student robotics projects.",
        "venue": "Hall B",
        "type": "Technical",
        "department": "Mechanical Engineering",
        "date": "2024-04-10",
        "time": "16:00",
        "registration_deadline": "2024-04-05",
        "max_participants": 30,
        "created_by": "1",
    }
    data.update(overrides)
    return EventCreate(**data)


def event_form_data(**overrides: Any) -> dict[str, Any]:
    """Helper: a create-event form payload that passes validation."""
    data: dict[str, Any] = {
        "name": "Poetry Night",
        "organizer": "Literary Society",
        "date": "2024-05-02",
        "time": "19:30",
        "venue": "Library Lawn",
        "type": "Cultural",
        "description": "Open mic for original poems.",
        "department": "",
        "max_participants": 40,
        "registration_deadline": "2024-04-30",
    }
    data.update(overrides)
    return data
