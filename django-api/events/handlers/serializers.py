"""Serializers for event input and Event domain model responses."""

from rest_framework import serializers


class EventInputSerializer(serializers.Serializer):
    """Body of POST and PUT /api/events."""

    event_name = serializers.CharField(max_length=255)
    event_date = serializers.DateField(required=False, allow_null=True)

    def to_changes(self) -> dict[str, object]:
        """Map validated fields onto the service's change keys."""
        data = self.validated_data
        changes: dict[str, object] = {}
        if data.get("event_name"):
            changes["name"] = data["event_name"]
        if data.get("event_date"):
            changes["date"] = data["event_date"]
        return changes


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    event_name = serializers.CharField(source="name")
    event_date = serializers.DateField(source="date", allow_null=True)
    user_ids = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()

    def get_user_ids(self, event) -> list[str]:
        return [str(user_id) for user_id in event.photographer_ids]
