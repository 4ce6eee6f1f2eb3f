"""Domain error codes for the photos module."""

from enum import Enum

from photoevents_api.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_EVENT_ID = "MISSING_EVENT_ID"
    NO_FILES = "NO_FILES"
    TOO_MANY_FILES = "TOO_MANY_FILES"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    UNSUPPORTED_FILE_TYPE = "UNSUPPORTED_FILE_TYPE"
    INVALID_USER_ID = "INVALID_USER_ID"
    NO_VALID_PHOTO_IDS = "NO_VALID_PHOTO_IDS"
    NO_DELETABLE_PHOTOS = "NO_DELETABLE_PHOTOS"


class MissingEventIdError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_EVENT_ID,
            message="Event ID is required",
        )


class NoFilesError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_FILES,
            message="No files uploaded",
        )


class TooManyFilesError(DomainError):
    def __init__(self, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_FILES,
            message=f"Too many files, at most {limit} per upload",
        )


class FileTooLargeError(DomainError):
    def __init__(self, filename: str, limit: int) -> None:
        super().__init__(
            code=ErrorCode.FILE_TOO_LARGE,
            message=f"File too large: {filename} (limit {limit // (1024 * 1024)}MB)",
        )
        self.filename = filename


class UnsupportedFileTypeError(DomainError):
    """Raised when any file in a batch is not an image."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            code=ErrorCode.UNSUPPORTED_FILE_TYPE,
            message="Only image files are allowed!",
        )
        self.filename = filename


class InvalidUserIdError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_USER_ID,
            message="Invalid user ID format",
        )


class NoValidPhotoIdsError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_VALID_PHOTO_IDS,
            message="No valid photo IDs provided",
        )


class NoDeletablePhotosError(DomainError):
    """Raised when nothing is left to delete after the ownership filter."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_DELETABLE_PHOTOS,
            message="No photos found that you have permission to delete",
        )
