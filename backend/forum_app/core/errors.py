"""
Domain errors.

Services raise these; the API layer is the only place they are turned
into HTTP responses (see ``forum_app.main``).
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a domain failure."""

    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    FORBIDDEN = "forbidden"
    INTERNAL = "internal"


class ForumError(Exception):
    """Base class for errors raised by the business layer."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ForumError):
    """Requested record does not exist."""

    kind = ErrorKind.NOT_FOUND


class ValidationError(ForumError):
    """Input violates a content or identity constraint."""

    kind = ErrorKind.VALIDATION


class AuthorizationDenied(ForumError):
    """Caller is authenticated but may not modify the record."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)


class InternalError(ForumError):
    """Server-side fault; the message is logged, never sent to the client."""

    kind = ErrorKind.INTERNAL
