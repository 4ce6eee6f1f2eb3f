"""Account service: registration, login and profile lookup."""

import logging

from django.contrib.auth.hashers import check_password, make_password

from accounts.domain import Principal, Role, User
from accounts.domain.errors import (
    AccessDeniedError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from accounts.services.token_service import TokenService
from accounts.stores.interfaces import UserStore

logger = logging.getLogger(__name__)

LOGIN_ROLES = frozenset({Role.PHOTOGRAPHER, Role.ADMIN})


class AccountService:
    """Service for identity operations."""

    def __init__(self, store: UserStore, tokens: TokenService) -> None:
        self._store = store
        self._tokens = tokens

    def register(self, email: str, password: str, name: str | None = None) -> User:
        """Register a photographer.

        Raises:
            UserAlreadyExistsError: If the email is taken.
        """
        return self._create(email, password, name, Role.PHOTOGRAPHER)

    def create_admin(self, email: str, password: str, name: str | None = None) -> User:
        """Create an administrator. Not exposed over HTTP."""
        return self._create(email, password, name, Role.ADMIN)

    def login(self, email: str, password: str) -> str:
        """Return a bearer token for valid photographer or admin credentials.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong.
            AccessDeniedError: If the user's role cannot log in.
        """
        user = self._store.get_user_by_email(email)
        if user is None:
            raise InvalidCredentialsError()
        if user.role not in LOGIN_ROLES:
            raise AccessDeniedError()
        if not user.password_hash or not check_password(password, user.password_hash):
            raise InvalidCredentialsError()

        logger.info(f"User {user.id} logged in as {user.role.value}")
        return self._tokens.issue(user)

    def get_profile(self, principal: Principal) -> User:
        """Return the caller's own record.

        Raises:
            UserNotFoundError: If the token refers to a user that no longer exists.
        """
        user = self._store.get_user(principal.user_id)
        if user is None:
            raise UserNotFoundError(str(principal.user_id))
        return user

    def _create(self, email: str, password: str, name: str | None, role: Role) -> User:
        if self._store.get_user_by_email(email) is not None:
            raise UserAlreadyExistsError(email)
        user = self._store.create_user(
            email=email,
            name=name,
            role=role,
            password_hash=make_password(password),
        )
        logger.info(f"Registered {role.value} {user.id}")
        return user
