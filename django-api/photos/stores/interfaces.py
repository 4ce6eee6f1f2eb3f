"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import BinaryIO

from accounts.domain import UserId
from events.domain import EventId
from photos.domain import Photo, PhotoDraft, PhotoId


class PhotoStore(ABC):
    """Interface for photo record persistence."""

    @abstractmethod
    def list_for_event(self, event_id: EventId) -> list[Photo]:
        """Return all photos of an event, oldest first."""
        ...

    @abstractmethod
    def list_for_uploader(self, event_id: EventId, user_id: UserId) -> list[Photo]:
        """Return the photos one user uploaded to one event, oldest first."""
        ...

    @abstractmethod
    def original_names_for(self, event_id: EventId, user_id: UserId) -> set[str]:
        """Return the original filenames already stored for (event, uploader)."""
        ...

    @abstractmethod
    def insert_many(self, drafts: Sequence[PhotoDraft]) -> list[Photo]:
        """Insert all drafts in one transaction, preserving order."""
        ...

    @abstractmethod
    def get_many(
        self, photo_ids: Sequence[PhotoId], event_id: EventId | None = None
    ) -> list[Photo]:
        """Return the photos among ``photo_ids``, optionally limited to one event."""
        ...

    @abstractmethod
    def delete_many(self, photo_ids: Sequence[PhotoId]) -> int:
        """Delete records in one operation and return how many were removed."""
        ...


class FileStore(ABC):
    """Interface for the durable storage holding photo binaries."""

    @abstractmethod
    def save(self, stream: BinaryIO, extension: str) -> str:
        """Write the stream under a fresh unique name and return its locator."""
        ...

    @abstractmethod
    def delete(self, locator: str) -> bool:
        """Remove a stored file.

        Returns False if the file does not exist. Raises OSError if removal fails.
        """
        ...
