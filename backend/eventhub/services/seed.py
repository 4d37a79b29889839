"""Demo events loaded into a fresh EventStore.

Seeds start with no registrations so registered_count matches the
registrations list from the first instant.
"""
from eventhub.models.event import Event, EventType

DEMO_EVENTS: list[dict] = [
    {
        "id": "1",
        "name": "Tech Innovation Summit 2024",
        "organizer": "Tech Society",
        "date": "2024-02-15",
        "time": "10:00",
        "venue": "Main Auditorium",
        "type": EventType.technical,
        "description": (
            "Join us for an exciting day of innovation, networking, and learning. "
            "Discover the latest trends in technology and connect with industry leaders."
        ),
        "speakers": ["Dr. Sarah Johnson", "Mark Thompson", "Lisa Chen"],
        "agenda": ["Opening Keynote", "Panel Discussion", "Networking Lunch", "Workshop Sessions"],
        "registration_deadline": "2024-02-10",
        "max_participants": 200,
        "created_by": "1",
        "department": "Computer Science",
    },
    {
        "id": "2",
        "name": "Cultural Fest 2024",
        "organizer": "Cultural Committee",
        "date": "2024-02-20",
        "time": "18:00",
        "venue": "Open Ground",
        "type": EventType.cultural,
        "description": (
            "Celebrate diversity and creativity at our annual cultural festival. "
            "Enjoy music, dance, food, and art from around the world."
        ),
        "speakers": ["Artist Collective", "Music Band"],
        "agenda": ["Cultural Performances", "Food Stalls", "Art Exhibition", "DJ Night"],
        "registration_deadline": "2024-02-18",
        "max_participants": 500,
        "created_by": "2",
        "department": "Student Affairs",
    },
    {
        "id": "3",
        "name": "AI Workshop Series",
        "organizer": "AI Research Lab",
        "date": "2024-02-25",
        "time": "14:00",
        "venue": "Lab Complex",
        "type": EventType.workshop,
        "description": (
            "Hands-on workshop series covering machine learning, deep learning, "
            "and practical AI applications."
        ),
        "speakers": ["Prof. Michael Davis", "Research Team"],
        "agenda": ["Introduction to AI", "Hands-on Coding", "Project Showcase", "Q&A Session"],
        "registration_deadline": "2024-02-22",
        "max_participants": 50,
        "created_by": "1",
        "department": "Computer Science",
    },
    {
        "id": "4",
        "name": "Sports Tournament",
        "organizer": "Sports Club",
        "date": "2024-03-01",
        "time": "09:00",
        "venue": "Sports Complex",
        "type": EventType.sports,
        "description": "Annual inter-department sports tournament featuring basketball, football, and athletics.",
        "registration_deadline": "2024-02-26",
        "max_participants": 300,
        "created_by": "3",
        "department": "Physical Education",
    },
]


def demo_events() -> list[Event]:
    return [Event(**data) for data in DEMO_EVENTS]
