"""Events listing page: search and filter over the full event list."""
import logging
from typing import Optional

from eventhub.models.event import EventType
from eventhub.schemas.event import EventFilters
from eventhub.schemas.pages import EventCard, EventsListingPage
from eventhub.services.event_store import EventStore
from eventhub.services.filtering import filter_events, list_departments, result_count_label

logger = logging.getLogger(__name__)


def events_listing(event_store: EventStore, filters: Optional[EventFilters] = None) -> EventsListingPage:
    """Recompute the listing from scratch for the given filters."""
    filters = filters or EventFilters()
    events = event_store.list_events()
    matched = filter_events(events, filters)
    logger.debug("Listing %d of %d events for %s", len(matched), len(events), filters.model_dump())
    return EventsListingPage(
        filters=filters,
        events=[EventCard.from_event(e) for e in matched],
        event_types=[t.value for t in EventType],
        departments=list_departments(events),
        result_label=result_count_label(len(matched)),
    )
