"""Deletion workflow: select what the caller may delete, remove files, drop records.

Record removal always happens for every selected photo. File removal is
best-effort: a missing file or an OSError is recorded in the result and
never aborts the workflow, so an orphaned file on disk is possible but a
record pointing at nothing is not left behind by a failed removal.
"""

import logging
from collections.abc import Iterable
from uuid import UUID

from accounts.domain import Principal
from events.domain.errors import parse_event_id
from photos.domain import DeletionResult, PhotoId
from photos.domain.errors import NoDeletablePhotosError, NoValidPhotoIdsError
from photos.services.selection import select_deletable
from photos.stores.interfaces import FileStore, PhotoStore

logger = logging.getLogger(__name__)


def _valid_photo_ids(raw_ids: Iterable[object]) -> list[PhotoId]:
    valid = []
    for raw in raw_ids:
        try:
            valid.append(PhotoId(value=UUID(str(raw))))
        except ValueError:
            continue
    return valid


class PhotoDeletionService:
    """Service for photo deletion."""

    def __init__(self, photos: PhotoStore, files: FileStore) -> None:
        self._photos = photos
        self._files = files

    def delete(
        self,
        caller: Principal,
        photo_ids: Iterable[object],
        event_id: str | None = None,
    ) -> DeletionResult:
        """Delete the photos among ``photo_ids`` the caller may delete.

        Identifiers that are malformed, unknown, outside ``event_id`` (when
        given) or owned by someone else are silently excluded.

        Raises:
            NoValidPhotoIdsError: If no identifier is a valid UUID.
            InvalidEventIdError: If ``event_id`` is given and malformed.
            NoDeletablePhotosError: If nothing remains after filtering.
        """
        valid_ids = _valid_photo_ids(photo_ids)
        if not valid_ids:
            raise NoValidPhotoIdsError()
        scope = parse_event_id(event_id) if event_id is not None else None

        selected = select_deletable(self._photos.get_many(valid_ids, event_id=scope), caller)
        if not selected:
            raise NoDeletablePhotosError()

        missing: list[str] = []
        for photo in selected:
            try:
                removed = self._files.delete(photo.url)
            except OSError:
                logger.warning(f"Failed to remove file {photo.url} of photo {photo.id}", exc_info=True)
                removed = False
            else:
                if not removed:
                    logger.warning(f"File {photo.url} of photo {photo.id} is already missing")
            if not removed:
                missing.append(photo.url)

        deleted = self._photos.delete_many([photo.id for photo in selected])
        logger.info(
            f"{caller.role.value} {caller.user_id} deleted {deleted} photos, "
            f"{len(missing)} files missing"
        )
        return DeletionResult(deleted_count=deleted, missing_files=tuple(missing))
