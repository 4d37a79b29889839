"""Event/registration store: the authoritative in-memory list of events.

Invariants held after every operation:
- event ids are unique and never change
- registered_count == len(registrations) for every event
- 0 <= registered_count <= max_participants

Declined operations (unknown event, full event, unknown registration)
return False and change nothing. Reads hand out deep copies, and every
mutation swaps in a whole new Event, so callers never observe a
half-applied update.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from eventhub.models.event import Event
from eventhub.models.registration import ANONYMOUS_USER_ID, ANONYMOUS_USER_NAME, Registration
from eventhub.schemas.event import EventCreate
from eventhub.schemas.registration import RegistrationCreate

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class EventStore:
    """Insertion-ordered mapping of event id to Event."""

    def __init__(self, seed: Optional[Iterable[Event]] = None) -> None:
        self._events: dict[str, Event] = {}
        for event in seed or ():
            if event.id in self._events:
                raise ValueError(f"Duplicate seed event id {event.id!r}")
            if event.registered_count != len(event.registrations):
                raise ValueError(f"Seed event {event.id!r} has registered_count out of step with registrations")
            if not 0 <= event.registered_count <= event.max_participants:
                raise ValueError(f"Seed event {event.id!r} is over capacity")
            self._events[event.id] = event.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list_events(self) -> list[Event]:
        """All events in creation order."""
        return [e.model_copy(deep=True) for e in self._events.values()]

    def get_event(self, event_id: str) -> Optional[Event]:
        event = self._events.get(event_id)
        return event.model_copy(deep=True) if event else None

    def get_events_by_creator(self, creator_id: str) -> list[Event]:
        return [e.model_copy(deep=True) for e in self._events.values() if e.created_by == creator_id]

    def get_event_registrations(self, event_id: str) -> list[Registration]:
        """Registrations in sign-up order; empty when the event does not exist."""
        event = self._events.get(event_id)
        return list(event.registrations) if event else []

    def get_registration_for_user(self, event_id: str, user_id: str) -> Optional[Registration]:
        for registration in self.get_event_registrations(event_id):
            if registration.user_id == user_id:
                return registration
        return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create_event(self, data: EventCreate) -> Event:
        """Store a new event with a fresh id and no registrations. Never fails."""
        event_id = _new_id()
        while event_id in self._events:
            event_id = _new_id()
        event = Event(id=event_id, registered_count=0, registrations=[], **data.model_dump())
        self._events[event_id] = event
        logger.info("Created event '%s' (%s) by %s", event.name, event_id, event.created_by)
        return event.model_copy(deep=True)

    def register(self, event_id: str, data: Optional[RegistrationCreate] = None) -> bool:
        """Claim one spot; False (and no change) when the event is missing or full."""
        event = self._events.get(event_id)
        if event is None:
            logger.warning("Registration declined: event %s not found", event_id)
            return False
        if event.registered_count >= event.max_participants:
            logger.warning("Registration declined: event %s is full (%d/%d)",
                           event_id, event.registered_count, event.max_participants)
            return False

        data = data or RegistrationCreate()
        registration = Registration(
            id=_new_id(),
            user_id=data.user_id or ANONYMOUS_USER_ID,
            name=data.name or ANONYMOUS_USER_NAME,
            email=data.email or "",
            location=data.location or "",
            registered_at=datetime.now(timezone.utc),
        )
        self._events[event_id] = event.model_copy(update={
            "registered_count": event.registered_count + 1,
            "registrations": [*event.registrations, registration],
        })
        logger.info("Registered %s for event %s (%d/%d)", registration.user_id, event_id,
                    event.registered_count + 1, event.max_participants)
        return True

    def unregister(self, event_id: str, registration_id: str) -> bool:
        """Drop one registration; False (and no change) when event or registration is unknown."""
        event = self._events.get(event_id)
        if event is None:
            logger.warning("Unregister declined: event %s not found", event_id)
            return False
        remaining = [r for r in event.registrations if r.id != registration_id]
        if len(remaining) == len(event.registrations):
            logger.warning("Unregister declined: registration %s not on event %s", registration_id, event_id)
            return False

        self._events[event_id] = event.model_copy(update={
            "registered_count": max(0, event.registered_count - 1),
            "registrations": remaining,
        })
        logger.info("Removed registration %s from event %s", registration_id, event_id)
        return True
