"""Upload ingestion: validate a batch, drop duplicates, persist, record.

Steps run strictly in order within one request:

1. validate the whole batch (event id, count, size, image type) before any
   file touches storage;
2. load the original filenames already stored for (event, uploader) and
   skip incoming files whose name is taken;
3. write each accepted file to the FileStore;
4. insert one Photo record per accepted file in a single transaction;
5. add the uploader to the event's photographer set.

Files are persisted before records are inserted. If the insert fails the
files written by this call are removed best-effort and the error propagates.
The dedup check is not serialised against concurrent uploads by the same
uploader to the same event; two such requests can both admit a name.
"""

import logging
import os
from collections.abc import Sequence

from accounts.domain import Principal
from events.domain.errors import EventNotFoundError, parse_event_id
from events.stores.interfaces import EventStore
from photos.domain import IncomingPhoto, PhotoDraft, UploadResult
from photos.domain.errors import (
    FileTooLargeError,
    MissingEventIdError,
    NoFilesError,
    TooManyFilesError,
    UnsupportedFileTypeError,
)
from photos.services.selection import partition_duplicates
from photos.stores.interfaces import FileStore, PhotoStore

logger = logging.getLogger(__name__)


class PhotoIngestionService:
    """Service for photo uploads."""

    def __init__(
        self,
        photos: PhotoStore,
        events: EventStore,
        files: FileStore,
        max_files: int,
        max_file_size: int,
    ) -> None:
        self._photos = photos
        self._events = events
        self._files = files
        self._max_files = max_files
        self._max_file_size = max_file_size

    def upload(
        self,
        uploader: Principal,
        event_id: str | None,
        batch: Sequence[IncomingPhoto],
    ) -> UploadResult:
        """Ingest a batch of files for one event.

        The caller is responsible for checking that the uploader is a
        photographer or admin.

        Raises:
            MissingEventIdError: If no event id is given.
            InvalidEventIdError: If the event id is not a valid UUID.
            NoFilesError: If the batch is empty.
            TooManyFilesError: If the batch exceeds the file count limit.
            FileTooLargeError: If any file exceeds the size limit.
            UnsupportedFileTypeError: If any file is not an image.
            EventNotFoundError: If the event does not exist.
        """
        if not event_id:
            raise MissingEventIdError()
        parsed_event_id = parse_event_id(event_id)
        self._validate_batch(batch)
        if not self._events.event_exists(parsed_event_id):
            raise EventNotFoundError(event_id)

        existing = self._photos.original_names_for(parsed_event_id, uploader.user_id)
        accepted, skipped = partition_duplicates(batch, existing)

        drafts: list[PhotoDraft] = []
        try:
            for incoming in accepted:
                extension = os.path.splitext(incoming.original_name)[1]
                drafts.append(
                    PhotoDraft(
                        event_id=parsed_event_id,
                        user_id=uploader.user_id,
                        url=self._files.save(incoming.stream, extension),
                        original_name=incoming.original_name,
                    )
                )
            saved = self._photos.insert_many(drafts)
        except Exception:
            self._discard([draft.url for draft in drafts])
            raise

        self._events.add_photographer(parsed_event_id, uploader.user_id)

        logger.info(
            f"Upload to event {parsed_event_id} by {uploader.user_id}: "
            f"saved={len(saved)} skipped={len(skipped)}"
        )
        return UploadResult(saved_photos=tuple(saved), skipped_photos=tuple(skipped))

    def _validate_batch(self, batch: Sequence[IncomingPhoto]) -> None:
        if not batch:
            raise NoFilesError()
        if len(batch) > self._max_files:
            raise TooManyFilesError(self._max_files)
        for incoming in batch:
            if incoming.size > self._max_file_size:
                raise FileTooLargeError(incoming.original_name, self._max_file_size)
            if not incoming.is_image:
                raise UnsupportedFileTypeError(incoming.original_name)

    def _discard(self, locators: Sequence[str]) -> None:
        for locator in locators:
            try:
                self._files.delete(locator)
            except OSError:
                logger.warning(f"Could not remove {locator} after failed upload", exc_info=True)
