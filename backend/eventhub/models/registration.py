"""Registration domain model: one person's claim on a spot in an event."""
from datetime import datetime

from pydantic import BaseModel

ANONYMOUS_USER_ID = "anonymous"
ANONYMOUS_USER_NAME = "Anonymous User"


class Registration(BaseModel):
    id: str
    user_id: str = ANONYMOUS_USER_ID
    name: str = ANONYMOUS_USER_NAME
    email: str = ""
    location: str = ""
    registered_at: datetime

    model_config = {"frozen": True}
