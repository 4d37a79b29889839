"""Home page: the first few events as featured cards."""
from eventhub.schemas.pages import EventCard, HomePage
from eventhub.services.event_store import EventStore

FEATURED_COUNT = 3


def home_page(event_store: EventStore) -> HomePage:
    events = event_store.list_events()[:FEATURED_COUNT]
    return HomePage(featured=[EventCard.from_event(e) for e in events])
