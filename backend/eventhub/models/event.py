"""Event domain model: one organized gathering and its registrations."""
import enum
from typing import Optional

from pydantic import BaseModel, Field

from eventhub.models.registration import Registration


class EventType(str, enum.Enum):
    cultural = "Cultural"
    technical = "Technical"
    sports = "Sports"
    workshop = "Workshop"
    seminar = "Seminar"


class Event(BaseModel):
    """An event held by the EventStore.

    ``registered_count`` always equals ``len(registrations)`` and stays within
    ``[0, max_participants]``; only the store mutates either of them.
    """

    id: str
    name: str
    organizer: str
    description: str
    venue: str
    type: EventType
    department: Optional[str] = None
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    registration_deadline: str  # YYYY-MM-DD
    max_participants: int
    registered_count: int = 0
    created_by: str
    speakers: list[str] = Field(default_factory=list)
    agenda: list[str] = Field(default_factory=list)
    image: Optional[str] = None
    registrations: list[Registration] = Field(default_factory=list)

    @property
    def is_full(self) -> bool:
        return self.registered_count >= self.max_participants

    @property
    def spots_left(self) -> int:
        return max(0, self.max_participants - self.registered_count)
