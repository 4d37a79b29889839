"""Create-event page."""
import logging
from typing import Any

from eventhub.exceptions import AuthenticationRequiredError
from eventhub.models.event import Event
from eventhub.schemas.event import EventForm
from eventhub.services.event_store import EventStore
from eventhub.services.identity_store import IdentityStore

logger = logging.getLogger(__name__)

CREATE_PATH = "/create"


def require_creator(identity_store: IdentityStore) -> None:
    """Raise AuthenticationRequiredError unless someone is signed in."""
    if not identity_store.is_authenticated:
        raise AuthenticationRequiredError(next_url=CREATE_PATH)


def create_event(event_store: EventStore, identity_store: IdentityStore, form_data: dict[str, Any]) -> Event:
    """Validate the form and store the event under the signed-in identity.

    Raises:
        AuthenticationRequiredError: nobody is signed in.
        pydantic.ValidationError: the form failed field validation.
    """
    require_creator(identity_store)
    form = EventForm.model_validate(form_data)
    event = event_store.create_event(form.to_create(created_by=identity_store.current.id))
    logger.info("Event '%s' submitted from the create page", event.name)
    return event
