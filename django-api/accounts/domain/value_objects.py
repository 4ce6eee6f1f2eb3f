"""Domain primitives for identities."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID


class Role(Enum):
    """Role assigned to a user at creation time."""

    PHOTOGRAPHER = "photographer"
    CLIENT = "client"
    ADMIN = "admin"


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a User."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)
