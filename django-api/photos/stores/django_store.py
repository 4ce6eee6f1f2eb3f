"""Django ORM implementation of the PhotoStore."""

from collections.abc import Sequence

from django.db import transaction

from accounts.domain import UserId
from events.domain import EventId
from photos import models
from photos.domain import Photo, PhotoDraft, PhotoId
from photos.stores.interfaces import PhotoStore


def _to_domain(row: models.Photo) -> Photo:
    return Photo(
        id=PhotoId(value=row.id),
        event_id=EventId(value=row.event_id),
        user_id=UserId(value=row.user_id),
        url=row.url,
        original_name=row.original_name,
        uploaded_at=row.uploaded_at,
    )


class DjangoPhotoStore(PhotoStore):
    """Relational photo store using Django ORM."""

    def list_for_event(self, event_id: EventId) -> list[Photo]:
        rows = models.Photo.objects.filter(event_id=event_id.value)
        return [_to_domain(row) for row in rows]

    def list_for_uploader(self, event_id: EventId, user_id: UserId) -> list[Photo]:
        rows = models.Photo.objects.filter(event_id=event_id.value, user_id=user_id.value)
        return [_to_domain(row) for row in rows]

    def original_names_for(self, event_id: EventId, user_id: UserId) -> set[str]:
        return set(
            models.Photo.objects.filter(
                event_id=event_id.value, user_id=user_id.value
            ).values_list("original_name", flat=True)
        )

    def insert_many(self, drafts: Sequence[PhotoDraft]) -> list[Photo]:
        if not drafts:
            return []
        with transaction.atomic():
            rows = models.Photo.objects.bulk_create(
                [
                    models.Photo(
                        event_id=draft.event_id.value,
                        user_id=draft.user_id.value,
                        url=draft.url,
                        original_name=draft.original_name,
                    )
                    for draft in drafts
                ]
            )
        return [_to_domain(row) for row in rows]

    def get_many(
        self, photo_ids: Sequence[PhotoId], event_id: EventId | None = None
    ) -> list[Photo]:
        rows = models.Photo.objects.filter(pk__in=[photo_id.value for photo_id in photo_ids])
        if event_id is not None:
            rows = rows.filter(event_id=event_id.value)
        return [_to_domain(row) for row in rows]

    def delete_many(self, photo_ids: Sequence[PhotoId]) -> int:
        deleted, _ = models.Photo.objects.filter(
            pk__in=[photo_id.value for photo_id in photo_ids]
        ).delete()
        return deleted
