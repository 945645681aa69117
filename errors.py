"""Application error taxonomy mapped to HTTP status codes."""

from __future__ import annotations

from http import HTTPStatus


class TaskTidyError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": type(self).__name__, "message": self.message}


class Conflict(TaskTidyError):
    """Raised when registering an email that already exists."""

    # Existing clients expect 400 rather than 409 for a duplicate account.
    status_code = HTTPStatus.BAD_REQUEST
    default_message = "User already exists"


class Unauthenticated(TaskTidyError):
    """Raised for unknown emails and wrong passwords alike."""

    status_code = HTTPStatus.UNAUTHORIZED
    default_message = "Invalid email or password"


class ValidationError(TaskTidyError):
    status_code = HTTPStatus.BAD_REQUEST
    default_message = "Invalid request"


class NotFound(TaskTidyError):
    status_code = HTTPStatus.NOT_FOUND
    default_message = "Not found"


class Unavailable(TaskTidyError):
    """Raised when the store cannot be reached."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Service unavailable"


__all__ = [
    "TaskTidyError",
    "Conflict",
    "Unauthenticated",
    "ValidationError",
    "NotFound",
    "Unavailable",
]
