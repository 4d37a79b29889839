"""Error codes and exceptions raised outside the stores.

The stores report declined operations through boolean results and never
raise on well-formed input. These errors belong to the view layer and to
the durable key-value storage.
"""
from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    STORAGE_FAILURE = "STORAGE_FAILURE"


@dataclass(frozen=True)
class EventHubError(Exception):
    """Base error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(EventHubError):
    """Raised when a page asks for an event id the store does not hold."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="The event you're looking for doesn't exist.",
        )
        self.event_id = event_id


class AuthenticationRequiredError(EventHubError):
    """Raised when a page needs a signed-in identity.

    ``next_url`` is where the auth page should send the user afterwards.
    """

    def __init__(self, next_url: str) -> None:
        super().__init__(
            code=ErrorCode.AUTHENTICATION_REQUIRED,
            message="Please sign in to continue",
        )
        self.next_url = next_url


class PermissionDeniedError(EventHubError):
    """Raised when a non-creator tries to moderate an event's registrations."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PERMISSION_DENIED,
            message="Only the event creator may manage registrations",
        )


class StorageError(EventHubError):
    """Raised when the durable key-value slot cannot be read or written."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_FAILURE,
            message="Could not access local storage",
        )
        self.detail = detail
