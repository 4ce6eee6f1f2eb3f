from photos.domain.models import (
    DeletionResult,
    IncomingPhoto,
    Photo,
    PhotoDraft,
    UploadResult,
)
from photos.domain.value_objects import PhotoId

__all__ = [
    "DeletionResult",
    "IncomingPhoto",
    "Photo",
    "PhotoDraft",
    "PhotoId",
    "UploadResult",
]
