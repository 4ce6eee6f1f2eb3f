"""Domain models for identities.

Django ORM models are in accounts/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from accounts.domain.value_objects import Role, UserId


@dataclass(frozen=True)
class User:
    """Domain representation of a User."""

    id: UserId
    email: str
    name: str | None
    role: Role
    password_hash: str | None
    registration_date: datetime
    event_ids: tuple[UUID, ...] = ()


@dataclass(frozen=True)
class Principal:
    """Identity resolved from a bearer token for the current request."""

    user_id: UserId
    role: Role

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN
