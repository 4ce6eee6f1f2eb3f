"""Domain error codes for the accounts module."""

from enum import Enum

from photoevents_api.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_TOKEN = "MISSING_TOKEN"
    MALFORMED_TOKEN = "MALFORMED_TOKEN"
    INVALID_TOKEN = "INVALID_TOKEN"
    ACCESS_DENIED = "ACCESS_DENIED"
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    USER_NOT_FOUND = "USER_NOT_FOUND"


class TokenError(DomainError):
    """Base for bearer credential rejections."""


class MissingTokenError(TokenError):
    """Raised when no credential is sent."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_TOKEN,
            message="No token, authorization denied",
        )


class MalformedTokenError(TokenError):
    """Raised when the header is not ``Bearer <token>``."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MALFORMED_TOKEN,
            message="Invalid token format",
        )


class InvalidTokenError(TokenError):
    """Raised when the token fails verification or has expired."""

    def __init__(self, reason: str = "") -> None:
        super().__init__(
            code=ErrorCode.INVALID_TOKEN,
            message="Token is not valid",
        )
        self.reason = reason


class AccessDeniedError(DomainError):
    """Raised when the caller's role does not allow the operation."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ACCESS_DENIED,
            message="Access denied",
        )


class UserAlreadyExistsError(DomainError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str) -> None:
        super().__init__(
            code=ErrorCode.USER_ALREADY_EXISTS,
            message="User already exists",
        )
        self.email = email


class InvalidCredentialsError(DomainError):
    """Raised on unknown email or wrong password."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid credentials",
        )


class UserNotFoundError(DomainError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            message="User not found",
        )
        self.user_id = user_id
