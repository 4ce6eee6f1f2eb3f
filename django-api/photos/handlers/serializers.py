"""Serializers for photo input and Photo domain model responses."""

from rest_framework import serializers


class PhotoSerializer(serializers.Serializer):
    """Serializer for Photo domain model."""

    id = serializers.UUIDField(source="id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    user_id = serializers.UUIDField(source="user_id.value")
    url = serializers.CharField()
    originalName = serializers.CharField(source="original_name")
    uploaded_at = serializers.DateTimeField()


class UploadResultSerializer(serializers.Serializer):
    savedPhotos = PhotoSerializer(source="saved_photos", many=True)
    skippedPhotosCount = serializers.IntegerField(source="skipped_count")
    skippedPhotos = serializers.ListField(source="skipped_photos", child=serializers.CharField())


class DeletePhotosSerializer(serializers.Serializer):
    """Body of DELETE /api/photos."""

    photoIds = serializers.ListField(
        child=serializers.CharField(),
        error_messages={"not_a_list": "Photo IDs must be provided as an array"},
    )


class DeletionResultSerializer(serializers.Serializer):
    deletedFromDB = serializers.IntegerField(source="deleted_count")
    missingFilesCount = serializers.IntegerField(source="missing_count")
    missingFiles = serializers.ListField(source="missing_files", child=serializers.CharField())

    def to_representation(self, instance):
        return {"msg": "Photos removed successfully", **super().to_representation(instance)}
