"""Serializers for account input and User responses."""

from rest_framework import serializers


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=1, write_only=True)
    name = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class UserSerializer(serializers.Serializer):
    """Serializer for the User domain model. Never exposes the password hash."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField(allow_null=True)
    email = serializers.EmailField()
    role = serializers.CharField(source="role.value")
    registration_date = serializers.DateTimeField()
    event_ids = serializers.ListField(child=serializers.UUIDField())
