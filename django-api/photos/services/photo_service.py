"""Read-side photo queries."""

from uuid import UUID

from accounts.domain import UserId
from events.domain.errors import parse_event_id
from photos.domain import Photo
from photos.domain.errors import InvalidUserIdError
from photos.stores.interfaces import PhotoStore


class PhotoService:
    """Service for listing photos."""

    def __init__(self, store: PhotoStore) -> None:
        self._store = store

    def list_for_event(self, event_id: str) -> list[Photo]:
        """Return every photo of an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
        """
        return self._store.list_for_event(parse_event_id(event_id))

    def list_for_photographer(self, event_id: str, user_id: str) -> list[Photo]:
        """Return the photos one photographer uploaded to one event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            InvalidUserIdError: If the user_id is not a valid UUID.
        """
        parsed_event_id = parse_event_id(event_id)
        try:
            parsed_user_id = UserId(value=UUID(user_id))
        except ValueError:
            raise InvalidUserIdError()
        return self._store.list_for_uploader(parsed_event_id, parsed_user_id)
