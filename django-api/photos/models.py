"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Photo(models.Model):
    """Persistence model for uploaded photos.

    Event and uploader are plain references, not foreign keys: deleting an
    event leaves its photos in place.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event_id = models.UUIDField(db_index=True)
    user_id = models.UUIDField(db_index=True)
    # Relative to MEDIA_ROOT, e.g. "uploads/1717243200000-1a2b3c4d.jpg".
    url = models.CharField(max_length=500)
    original_name = models.CharField(max_length=255)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["uploaded_at"]
        indexes = [
            models.Index(fields=["event_id", "user_id"], name="photo_event_uploader_idx"),
        ]

    def __str__(self) -> str:
        return self.original_name
