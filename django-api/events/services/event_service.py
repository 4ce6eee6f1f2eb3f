"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from datetime import date

from events.domain import Event, EventName
from events.domain.errors import EventNotFoundError, InvalidEventNameError, parse_event_id
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def _validated_name(name: str) -> str:
    try:
        return EventName(name).value
    except ValueError:
        raise InvalidEventNameError()


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(self, name: str, event_date: date | None = None) -> Event:
        """Create an event with an empty photographer set."""
        event = self._store.create_event(_validated_name(name), event_date)
        logger.info(f"Created event {event.id} ({event.name})")
        return event

    def update_event(self, event_id: str, changes: dict[str, object]) -> Event:
        """Change name and/or date. Only keys present in ``changes`` are touched.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        if "name" in changes:
            changes = {**changes, "name": _validated_name(changes["name"])}
        event = self._store.update_event(parsed, changes)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def delete_event(self, event_id: str) -> None:
        """Delete an event. Its photos are not removed.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        if not self._store.delete_event(parse_event_id(event_id)):
            raise EventNotFoundError(event_id)
        logger.info(f"Deleted event {event_id}")
