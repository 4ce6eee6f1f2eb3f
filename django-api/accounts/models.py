"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models
from django.utils import timezone


class User(models.Model):
    """Persistence model for photographers, clients and admins."""

    class Role(models.TextChoices):
        PHOTOGRAPHER = "photographer", "Photographer"
        CLIENT = "client", "Client"
        ADMIN = "admin", "Admin"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, blank=True, null=True)
    email = models.EmailField(max_length=254, unique=True)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.CLIENT)
    # Clients have no password.
    password = models.CharField(max_length=128, blank=True, null=True)
    registration_date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-registration_date"]

    def __str__(self) -> str:
        return self.email
