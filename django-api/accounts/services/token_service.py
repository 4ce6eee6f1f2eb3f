"""Bearer token issue and verification.

The token is self-contained: verifying it needs the signing secret only,
never a store lookup.
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from accounts.domain import Principal, Role, User, UserId
from accounts.domain.errors import (
    InvalidTokenError,
    MalformedTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


class TokenService:
    """Issues and verifies signed bearer tokens carrying user id and role."""

    def __init__(
        self, secret: str, expiry_seconds: int = 3600, algorithm: str = "HS256"
    ) -> None:
        self._secret = secret
        self._expiry = timedelta(seconds=expiry_seconds)
        self._algorithm = algorithm

    def issue(self, user: User) -> str:
        """Return a signed token for the user, valid for the configured window."""
        payload = {
            "id": str(user.id.value),
            "role": user.role.value,
            "exp": datetime.now(timezone.utc) + self._expiry,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Principal:
        """Decode a token into the identity it carries.

        Raises:
            InvalidTokenError: If the signature, expiry or payload is invalid.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidTokenError("expired")
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError(type(exc).__name__)

        try:
            user_id = UserId(value=UUID(str(payload["id"])))
            role = Role(payload["role"])
        except (KeyError, ValueError):
            raise InvalidTokenError("bad payload")
        return Principal(user_id=user_id, role=role)

    def resolve_header(self, header: str | None) -> Principal:
        """Resolve an ``Authorization`` header value to a Principal.

        Raises:
            MissingTokenError: If the header is absent or empty.
            MalformedTokenError: If the scheme is not Bearer or the value is missing.
            InvalidTokenError: If the token does not verify.
        """
        if not header:
            logger.warning("Rejected request: no bearer token")
            raise MissingTokenError()

        parts = header.split(" ")
        if parts[0] != BEARER_SCHEME or len(parts) < 2 or not parts[1]:
            logger.warning("Rejected request: malformed authorization header")
            raise MalformedTokenError()

        try:
            return self.verify(parts[1])
        except InvalidTokenError as exc:
            logger.warning(f"Rejected request: token is not valid ({exc.reason})")
            raise
