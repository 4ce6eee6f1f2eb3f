"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import date

from accounts.domain import UserId
from events.domain import Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def create_event(self, name: str, event_date: date | None) -> Event:
        """Persist a new event with no photographers."""
        ...

    @abstractmethod
    def update_event(
        self, event_id: EventId, changes: dict[str, object]
    ) -> Event | None:
        """Apply ``name``/``date`` changes; return None if the event is missing."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event. Photos referencing it are left in place."""
        ...

    @abstractmethod
    def add_photographer(self, event_id: EventId, user_id: UserId) -> None:
        """Add a photographer to the event; no-op if already present."""
        ...
