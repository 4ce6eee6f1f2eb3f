"""Domain models for photos and the results of upload and deletion.

Django ORM models are in photos/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import BinaryIO

from accounts.domain import UserId
from events.domain import EventId
from photos.domain.value_objects import PhotoId


@dataclass(frozen=True)
class Photo:
    """Domain representation of a stored Photo."""

    id: PhotoId
    event_id: EventId
    user_id: UserId
    url: str
    original_name: str
    uploaded_at: datetime


@dataclass(frozen=True)
class PhotoDraft:
    """A Photo whose file is persisted but whose record is not yet inserted."""

    event_id: EventId
    user_id: UserId
    url: str
    original_name: str


@dataclass(frozen=True)
class IncomingPhoto:
    """One file of an upload batch, as received from the client."""

    original_name: str
    content_type: str
    size: int
    stream: BinaryIO

    @property
    def is_image(self) -> bool:
        return (self.content_type or "").lower().startswith("image/")


@dataclass(frozen=True)
class UploadResult:
    saved_photos: tuple[Photo, ...]
    skipped_photos: tuple[str, ...]

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_photos)


@dataclass(frozen=True)
class DeletionResult:
    deleted_count: int
    missing_files: tuple[str, ...]

    @property
    def missing_count(self) -> int:
        return len(self.missing_files)
