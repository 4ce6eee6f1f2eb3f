"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import SAFE_METHODS, AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authentication import PublicReadMixin
from accounts.permissions import IsPhotographerOrAdmin
from events.stores.django_store import DjangoEventStore
from photos.domain import IncomingPhoto
from photos.handlers.serializers import (
    DeletePhotosSerializer,
    DeletionResultSerializer,
    PhotoSerializer,
    UploadResultSerializer,
)
from photos.services.deletion_service import PhotoDeletionService
from photos.services.ingestion_service import PhotoIngestionService
from photos.services.photo_service import PhotoService
from photos.stores.django_store import DjangoPhotoStore
from photos.stores.file_store import LocalFileStore

UPLOAD_FIELD = "photos"


def get_ingestion_service() -> PhotoIngestionService:
    return PhotoIngestionService(
        DjangoPhotoStore(),
        DjangoEventStore(),
        LocalFileStore(settings.MEDIA_ROOT),
        max_files=settings.PHOTO_UPLOAD_MAX_FILES,
        max_file_size=settings.PHOTO_UPLOAD_MAX_FILE_SIZE,
    )


def get_deletion_service() -> PhotoDeletionService:
    return PhotoDeletionService(DjangoPhotoStore(), LocalFileStore(settings.MEDIA_ROOT))


def get_photo_service() -> PhotoService:
    return PhotoService(DjangoPhotoStore())


def _delete(request: Request, event_id: str | None) -> Response:
    serializer = DeletePhotosSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    result = get_deletion_service().delete(
        request.user, serializer.validated_data["photoIds"], event_id=event_id
    )
    return Response(DeletionResultSerializer(result).data)


class PhotoCollectionView(APIView):
    """Handler for POST and DELETE /api/photos"""

    permission_classes = [IsPhotographerOrAdmin]

    def post(self, request: Request) -> Response:
        batch = [
            IncomingPhoto(
                original_name=upload.name,
                content_type=upload.content_type or "",
                size=upload.size,
                stream=upload,
            )
            for upload in request.FILES.getlist(UPLOAD_FIELD)
        ]
        result = get_ingestion_service().upload(
            request.user, request.data.get("event_id"), batch
        )
        return Response(UploadResultSerializer(result).data, status=status.HTTP_201_CREATED)

    def delete(self, request: Request) -> Response:
        return _delete(request, event_id=None)


class EventPhotosView(PublicReadMixin, APIView):
    """Handler for GET and DELETE /api/photos/event/{event_id}"""

    def get_permissions(self):
        if self.request.method in SAFE_METHODS:
            return [AllowAny()]
        return [IsPhotographerOrAdmin()]

    def get(self, request: Request, event_id: str) -> Response:
        photos = get_photo_service().list_for_event(event_id)
        return Response(PhotoSerializer(photos, many=True).data)

    def delete(self, request: Request, event_id: str) -> Response:
        return _delete(request, event_id=event_id)


class PhotographerPhotosView(PublicReadMixin, APIView):
    """Handler for GET /api/photos/event/{event_id}/photographer/{user_id}"""

    permission_classes = [AllowAny]

    def get(self, request: Request, event_id: str, user_id: str) -> Response:
        photos = get_photo_service().list_for_photographer(event_id, user_id)
        return Response(PhotoSerializer(photos, many=True).data)
