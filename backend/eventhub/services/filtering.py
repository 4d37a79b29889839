"""Event listing filters: pure functions of (events, filters)."""
from typing import Iterable

from eventhub.models.event import Event
from eventhub.schemas.event import EventFilters


def _matches_search(event: Event, term: str) -> bool:
    if not term:
        return True
    term = term.lower()
    return (
        term in event.name.lower()
        or term in event.organizer.lower()
        or term in event.description.lower()
    )


def matches(event: Event, filters: EventFilters) -> bool:
    """True when the event passes every non-empty filter."""
    return (
        _matches_search(event, filters.search)
        and (not filters.type or event.type.value == filters.type)
        and (not filters.department or event.department == filters.department)
        # ISO dates compare correctly as strings
        and (not filters.date or event.date >= filters.date)
    )


def filter_events(events: Iterable[Event], filters: EventFilters) -> list[Event]:
    """Events passing all filters, in their original order."""
    return [event for event in events if matches(event, filters)]


def list_departments(events: Iterable[Event]) -> list[str]:
    """Distinct non-empty departments, first-seen order."""
    seen: dict[str, None] = {}
    for event in events:
        if event.department:
            seen.setdefault(event.department, None)
    return list(seen)


def result_count_label(count: int) -> str:
    return f"{count} event{'' if count == 1 else 's'} found"
