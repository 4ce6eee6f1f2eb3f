"""Unit tests for PhotoIngestionService.

Run with: pytest tests/test_ingestion.py -v
"""

from uuid import uuid4

import pytest

from accounts.domain import Role
from conftest import InMemoryPhotoStore, incoming, principal
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from photos.domain.errors import (
    FileTooLargeError,
    MissingEventIdError,
    NoFilesError,
    TooManyFilesError,
    UnsupportedFileTypeError,
)
from photos.services.ingestion_service import PhotoIngestionService
from photos.services.selection import partition_duplicates


@pytest.fixture
def service(photo_store, event_store, file_store) -> PhotoIngestionService:
    return PhotoIngestionService(photo_store, event_store, file_store, max_files=5, max_file_size=1024)


@pytest.fixture
def uploader():
    return principal(Role.PHOTOGRAPHER)


class TestDeduplication:
    """Dedup by original filename per (event, uploader)."""

    def test_distinct_names_are_all_saved(self, service, event, uploader, photo_store):
        result = service.upload(uploader, str(event.id), [incoming("a.jpg"), incoming("b.jpg"), incoming("c.jpg")])
        assert len(result.saved_photos) == 3
        assert result.skipped_count == 0
        assert len(photo_store.photos) == 3

    def test_same_name_twice_keeps_one(self, service, event, uploader, photo_store):
        service.upload(uploader, str(event.id), [incoming("a.jpg")])
        result = service.upload(uploader, str(event.id), [incoming("a.jpg")])
        assert result.saved_photos == ()
        assert result.skipped_photos == ("a.jpg",)
        assert len(photo_store.list_for_uploader(event.id, uploader.user_id)) == 1

    def test_duplicate_never_overwrites_existing_record(self, service, event, uploader, photo_store, file_store):
        (first,) = service.upload(uploader, str(event.id), [incoming("a.jpg", data=b"v1")]).saved_photos
        service.upload(uploader, str(event.id), [incoming("a.jpg", data=b"v2")])
        assert photo_store.photos[first.id].url == first.url
        assert file_store.files[first.url] == b"v1"

    def test_repeated_name_within_one_batch_is_skipped(self, service, event, uploader):
        result = service.upload(uploader, str(event.id), [incoming("a.jpg"), incoming("a.jpg")])
        assert len(result.saved_photos) == 1
        assert result.skipped_photos == ("a.jpg",)

    def test_other_uploader_may_reuse_a_name(self, service, event, uploader):
        service.upload(uploader, str(event.id), [incoming("a.jpg")])
        other = principal(Role.PHOTOGRAPHER)
        result = service.upload(other, str(event.id), [incoming("a.jpg")])
        assert len(result.saved_photos) == 1

    def test_same_name_in_another_event_is_saved(self, service, event_store, event, uploader):
        second = event_store.create_event("Wedding B", None)
        service.upload(uploader, str(event.id), [incoming("a.jpg")])
        result = service.upload(uploader, str(second.id), [incoming("a.jpg")])
        assert len(result.saved_photos) == 1

    def test_partition_preserves_batch_order(self):
        batch = [incoming("c.jpg"), incoming("a.jpg"), incoming("b.jpg")]
        accepted, skipped = partition_duplicates(batch, {"a.jpg"})
        assert [p.original_name for p in accepted] == ["c.jpg", "b.jpg"]
        assert skipped == ["a.jpg"]


class TestPersistence:
    """Files and records written for accepted photos."""

    def test_records_point_at_stored_files(self, service, event, uploader, file_store):
        result = service.upload(uploader, str(event.id), [incoming("a.JPG", data=b"payload")])
        (photo,) = result.saved_photos
        assert photo.original_name == "a.JPG"
        assert photo.url.endswith(".JPG")
        assert file_store.files[photo.url] == b"payload"
        assert photo.event_id == event.id
        assert photo.user_id == uploader.user_id

    def test_uploader_added_to_event_once(self, service, event_store, event, uploader):
        service.upload(uploader, str(event.id), [incoming("a.jpg"), incoming("b.jpg")])
        service.upload(uploader, str(event.id), [incoming("c.jpg")])
        assert event_store.get_event(event.id).photographer_ids == (uploader.user_id,)

    def test_all_duplicates_still_records_contributor(self, service, event_store, event, uploader):
        service.upload(uploader, str(event.id), [incoming("a.jpg")])
        event_store.events[event.id] = event  # reset contributors
        service.upload(uploader, str(event.id), [incoming("a.jpg")])
        assert event_store.get_event(event.id).photographer_ids == (uploader.user_id,)

    def test_failed_insert_removes_written_files(self, event_store, event, uploader, file_store):
        class FailingPhotoStore(InMemoryPhotoStore):
            def insert_many(self, drafts):
                raise RuntimeError("database unavailable")

        service = PhotoIngestionService(
            FailingPhotoStore(), event_store, file_store, max_files=5, max_file_size=1024
        )
        with pytest.raises(RuntimeError):
            service.upload(uploader, str(event.id), [incoming("a.jpg"), incoming("b.jpg")])
        assert file_store.files == {}
        assert event_store.get_event(event.id).photographer_ids == ()


class TestValidation:
    """The whole batch is rejected before anything is stored."""

    def test_missing_event_id(self, service, uploader, file_store):
        with pytest.raises(MissingEventIdError):
            service.upload(uploader, None, [incoming("a.jpg")])
        assert file_store.files == {}

    def test_malformed_event_id(self, service, uploader):
        with pytest.raises(InvalidEventIdError):
            service.upload(uploader, "E1", [incoming("a.jpg")])

    def test_unknown_event(self, service, uploader, file_store):
        with pytest.raises(EventNotFoundError):
            service.upload(uploader, str(uuid4()), [incoming("a.jpg")])
        assert file_store.files == {}

    def test_empty_batch(self, service, event, uploader):
        with pytest.raises(NoFilesError):
            service.upload(uploader, str(event.id), [])

    def test_too_many_files(self, service, event, uploader):
        batch = [incoming(f"{i}.jpg") for i in range(6)]
        with pytest.raises(TooManyFilesError):
            service.upload(uploader, str(event.id), batch)

    def test_file_too_large(self, service, event, uploader, file_store):
        with pytest.raises(FileTooLargeError):
            service.upload(uploader, str(event.id), [incoming("a.jpg"), incoming("big.jpg", data=b"x" * 2048)])
        assert file_store.files == {}

    def test_one_non_image_rejects_whole_batch(self, service, event, uploader, photo_store, file_store):
        batch = [incoming("a.jpg"), incoming("notes.txt", content_type="text/plain"), incoming("b.jpg")]
        with pytest.raises(UnsupportedFileTypeError):
            service.upload(uploader, str(event.id), batch)
        assert photo_store.photos == {}
        assert file_store.files == {}
