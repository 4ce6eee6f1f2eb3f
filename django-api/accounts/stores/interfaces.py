"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from accounts.domain import Role, User, UserId


class UserStore(ABC):
    """Interface for user persistence operations."""

    @abstractmethod
    def get_user(self, user_id: UserId) -> User | None:
        """Return a user by ID, or None if not found."""
        ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None:
        """Return a user by email, or None if not found."""
        ...

    @abstractmethod
    def create_user(
        self, email: str, name: str | None, role: Role, password_hash: str | None
    ) -> User:
        """Persist a new user and return it."""
        ...
