"""Profile page: the signed-in identity and the events they created."""
from datetime import date
from typing import Optional

from eventhub.exceptions import AuthenticationRequiredError
from eventhub.schemas.pages import EventCard, ProfileEventRow, ProfilePage
from eventhub.services.event_store import EventStore
from eventhub.services.identity_store import IdentityStore
from eventhub.views.event_details import deadline_passed


def profile_page(event_store: EventStore, identity_store: IdentityStore, today: Optional[date] = None) -> ProfilePage:
    identity = identity_store.current
    if identity is None:
        raise AuthenticationRequiredError(next_url="/profile")

    events = event_store.get_events_by_creator(identity.id)
    rows = [
        ProfileEventRow(
            card=EventCard.from_event(event),
            registration_status="Closed" if deadline_passed(event, today) else "Open",
        )
        for event in events
    ]
    return ProfilePage(
        identity=identity,
        initials=identity.initials,
        events=rows,
        event_count=len(events),
        total_registrations=sum(e.registered_count for e in events),
    )
