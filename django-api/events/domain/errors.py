"""Domain error codes for the events module."""

from enum import Enum

from events.domain.value_objects import EventId
from photoevents_api.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_EVENT_NAME = "INVALID_EVENT_NAME"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidEventNameError(DomainError):
    """Raised when an event name is blank."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_NAME,
            message="Event name cannot be blank",
        )


def parse_event_id(value: str) -> EventId:
    """Parse a raw event id.

    Raises:
        InvalidEventIdError: If the value is not a valid UUID.
    """
    try:
        return EventId.from_string(value)
    except (TypeError, ValueError, AttributeError):
        raise InvalidEventIdError()
