"""Pydantic schemas for Events."""
from __future__ import annotations
from datetime import date, time
from typing import Optional
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from eventhub.models.event import EventType
from eventhub.schemas.forms import require

INVALID_DATE = "Enter a valid date (YYYY-MM-DD)"
INVALID_TIME = "Enter a valid time (HH:MM)"


def _check_date(v: str) -> str:
    """Accept only the YYYY-MM-DD form; filters and deadlines compare dates as strings."""
    try:
        parsed = date.fromisoformat(v)
    except ValueError:
        raise ValueError(INVALID_DATE)
    # fromisoformat also takes compact forms such as 20240502
    if parsed.isoformat() != v:
        raise ValueError(INVALID_DATE)
    return v


def _check_time(v: str) -> str:
    try:
        parsed = time.fromisoformat(v)
    except ValueError:
        raise ValueError(INVALID_TIME)
    if parsed.strftime("%H:%M") != v:
        raise ValueError(INVALID_TIME)
    return v


class EventCreate(BaseModel):
    """Everything the store needs to create an event, already validated by the caller."""

    name: str
    organizer: str
    description: str
    venue: str
    type: EventType
    department: Optional[str] = None
    date: str
    time: str
    registration_deadline: str
    max_participants: int
    created_by: str
    speakers: list[str] = []
    agenda: list[str] = []
    image: Optional[str] = None


class EventForm(BaseModel):
    """Create-event form input with field-level validation."""

    name: str = ""
    organizer: str = ""
    date: str = ""
    time: str = ""
    venue: str = ""
    type: EventType = EventType.technical
    description: str = ""
    department: str = ""
    max_participants: int = 50
    registration_deadline: str = ""
    image: Optional[str] = None

    model_config = {"str_strip_whitespace": True, "validate_default": True}

    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str) -> str:
        return require(v, "Event name is required")

    @field_validator("organizer")
    @classmethod
    def _organizer_required(cls, v: str) -> str:
        return require(v, "Organizer is required")

    @field_validator("venue")
    @classmethod
    def _venue_required(cls, v: str) -> str:
        return require(v, "Venue is required")

    @field_validator("description")
    @classmethod
    def _description_required(cls, v: str) -> str:
        return require(v, "Description is required")

    @field_validator("date")
    @classmethod
    def _valid_date(cls, v: str) -> str:
        require(v, "Date is required")
        return _check_date(v)

    @field_validator("time")
    @classmethod
    def _valid_time(cls, v: str) -> str:
        require(v, "Time is required")
        return _check_time(v)

    @field_validator("max_participants")
    @classmethod
    def _positive_capacity(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Max participants must be at least 1")
        return v

    @field_validator("registration_deadline")
    @classmethod
    def _deadline_before_event(cls, v: str, info: ValidationInfo) -> str:
        require(v, "Registration deadline is required")
        _check_date(v)
        event_date = info.data.get("date")
        if event_date and v > event_date:
            raise ValueError("Registration deadline must be on or before the event date")
        return v

    def to_create(self, created_by: str) -> EventCreate:
        return EventCreate(
            **self.model_dump(exclude={"department"}),
            department=self.department or None,
            created_by=created_by,
            speakers=[],
            agenda=[],
        )


class EventFilters(BaseModel):
    """Listing filters; an empty value matches every event."""

    search: str = ""
    type: str = ""
    department: str = ""
    date: str = Field(default="", description="Lower bound, YYYY-MM-DD")
