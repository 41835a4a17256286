"""Application exceptions.

Raised by handlers and repositories; the FastAPI app registers an
exception handler for each and turns it into a single HTTP response.

    WhiskyAPIError (base)
    ├── BadWhiskyIdError      → 400 text/html  Bad ID. ID="<raw>"
    ├── BodyTooLargeError     → 413
    └── WhiskyStorageError    → 500
"""

from typing import Any


class WhiskyAPIError(Exception):
    """Base exception for all whisky API errors.

    Attributes:
        message: Human-readable description
        context: Extra debug info, logged but never returned to the client
    """

    def __init__(self, message: str = "An unexpected error occurred", context: dict[str, Any] | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BadWhiskyIdError(WhiskyAPIError):
    """Raised when the `id` path segment is not a signed 64-bit integer."""

    def __init__(self, raw_id: str, reason: str = ""):
        self.raw_id = raw_id
        super().__init__(message=f'Bad ID. ID="{raw_id}"', context={"reason": reason})


class BodyTooLargeError(WhiskyAPIError):
    """Raised when a request body exceeds MAX_BODY_SIZE."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(message="Request Entity Too Large", context={"size": size, "limit": limit})


class WhiskyStorageError(WhiskyAPIError):
    """Raised when the storage engine fails for a reason other than not-found."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        super().__init__(
            message=f"Whisky storage failed during {operation}",
            context={"cause": repr(cause) if cause else None},
        )
