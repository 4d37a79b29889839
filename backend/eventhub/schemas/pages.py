"""Pydantic view models returned by the page controllers."""
from __future__ import annotations
from typing import Any, Optional
from pydantic import BaseModel, field_serializer

from eventhub.models.event import Event, EventType
from eventhub.models.registration import Registration
from eventhub.models.user import Identity
from eventhub.schemas.event import EventFilters

EXCERPT_LENGTH = 120


class EventCard(BaseModel):
    id: str
    name: str
    organizer: str
    date: str
    time: str
    venue: str
    type: EventType
    department: Optional[str] = None
    excerpt: str
    registered_count: int
    max_participants: int
    spots_left: int
    is_full: bool

    @classmethod
    def from_event(cls, event: Event) -> EventCard:
        excerpt = event.description
        if len(excerpt) > EXCERPT_LENGTH:
            excerpt = excerpt[:EXCERPT_LENGTH] + "..."
        return cls(
            id=event.id,
            name=event.name,
            organizer=event.organizer,
            date=event.date,
            time=event.time,
            venue=event.venue,
            type=event.type,
            department=event.department,
            excerpt=excerpt,
            registered_count=event.registered_count,
            max_participants=event.max_participants,
            spots_left=event.spots_left,
            is_full=event.is_full,
        )


class HomePage(BaseModel):
    featured: list[EventCard]


class EventsListingPage(BaseModel):
    filters: EventFilters
    events: list[EventCard]
    event_types: list[str]
    departments: list[str]
    result_label: str


class EventDetailsPage(BaseModel):
    event: Event
    spots_left: int
    is_full: bool
    deadline_passed: bool
    is_creator: bool
    current_registration: Optional[Registration] = None
    can_register: bool
    register_label: str
    can_view_registrations: bool
    registrations: list[Registration] = []

    @field_serializer("event")
    def _event_without_registrations(self, event: Event) -> dict[str, Any]:
        # the list is rendered only through `registrations`, gated by can_view_registrations
        return event.model_dump(exclude={"registrations"})

    @property
    def is_registered(self) -> bool:
        return self.current_registration is not None


class AuthResult(BaseModel):
    success: bool
    redirect_to: Optional[str] = None
    errors: dict[str, str] = {}


class ProfileEventRow(BaseModel):
    card: EventCard
    registration_status: str  # Open | Closed


class ProfilePage(BaseModel):
    identity: Identity
    initials: str
    events: list[ProfileEventRow]
    event_count: int
    total_registrations: int
