"""Event details page: registration actions and creator moderation.

Every action returns the store's boolean; the page is rebuilt from the
store afterwards rather than patched locally.
"""
import logging
from datetime import date
from typing import Any, Optional

from eventhub.exceptions import AuthenticationRequiredError, EventNotFoundError, PermissionDeniedError
from eventhub.models.event import Event
from eventhub.schemas.pages import EventDetailsPage
from eventhub.schemas.registration import RegistrationCreate, RegistrationForm
from eventhub.services.event_store import EventStore
from eventhub.services.identity_store import IdentityStore

logger = logging.getLogger(__name__)


def deadline_passed(event: Event, today: Optional[date] = None) -> bool:
    """Registration stays open through the deadline day itself."""
    today = today or date.today()
    return event.registration_deadline < today.isoformat()


def _get_event_or_404(event_store: EventStore, event_id: str) -> Event:
    event = event_store.get_event(event_id)
    if event is None:
        raise EventNotFoundError(event_id)
    return event


def _register_label(event: Event, closed: bool) -> str:
    if closed:
        return "Registration Closed"
    if event.is_full:
        return "Event Full"
    return "Register Now"


def event_details(
    event_store: EventStore,
    identity_store: IdentityStore,
    event_id: str,
    today: Optional[date] = None,
) -> EventDetailsPage:
    event = _get_event_or_404(event_store, event_id)
    identity = identity_store.current
    closed = deadline_passed(event, today)

    current = None
    if identity is not None:
        current = event_store.get_registration_for_user(event.id, identity.id)

    can_view = identity is not None
    return EventDetailsPage(
        event=event,
        spots_left=event.spots_left,
        is_full=event.is_full,
        deadline_passed=closed,
        is_creator=identity is not None and event.created_by == identity.id,
        current_registration=current,
        can_register=current is None and not closed and not event.is_full,
        register_label=_register_label(event, closed),
        can_view_registrations=can_view,
        registrations=event.registrations if can_view else [],
    )


def register_self(
    event_store: EventStore,
    identity_store: IdentityStore,
    event_id: str,
    today: Optional[date] = None,
) -> bool:
    """Register the signed-in identity, or an anonymous attendee when nobody is signed in."""
    event = _get_event_or_404(event_store, event_id)
    if deadline_passed(event, today):
        logger.info("Self-registration for %s refused: deadline %s passed", event_id, event.registration_deadline)
        return False

    identity = identity_store.current
    data = None
    if identity is not None:
        if event_store.get_registration_for_user(event_id, identity.id) is not None:
            logger.info("Self-registration for %s refused: %s is already registered", event_id, identity.id)
            return False
        data = RegistrationCreate(user_id=identity.id, name=identity.name, email=identity.email)
    return event_store.register(event_id, data)


def register_other(
    event_store: EventStore,
    event_id: str,
    form_data: dict[str, Any],
    today: Optional[date] = None,
) -> bool:
    """Register someone else from the registration form.

    Raises pydantic.ValidationError when the form is incomplete.
    """
    form = RegistrationForm.model_validate(form_data)
    event = _get_event_or_404(event_store, event_id)
    if deadline_passed(event, today):
        logger.info("Registration for %s refused: deadline %s passed", event_id, event.registration_deadline)
        return False
    return event_store.register(
        event_id,
        RegistrationCreate(name=form.name, email=form.email, location=form.location),
    )


def unregister_self(event_store: EventStore, identity_store: IdentityStore, event_id: str) -> bool:
    identity = identity_store.current
    if identity is None:
        raise AuthenticationRequiredError(next_url=f"/events/{event_id}")
    _get_event_or_404(event_store, event_id)
    registration = event_store.get_registration_for_user(event_id, identity.id)
    if registration is None:
        return False
    return event_store.unregister(event_id, registration.id)


def delete_registration(
    event_store: EventStore,
    identity_store: IdentityStore,
    event_id: str,
    registration_id: str,
) -> bool:
    """Creator-only removal of any registration on the event."""
    identity = identity_store.current
    if identity is None:
        raise AuthenticationRequiredError(next_url=f"/events/{event_id}")
    event = _get_event_or_404(event_store, event_id)
    if event.created_by != identity.id:
        raise PermissionDeniedError()
    removed = event_store.unregister(event_id, registration_id)
    if removed:
        logger.info("Creator %s deleted registration %s from event %s", identity.id, registration_id, event_id)
    return removed
