"""
Custom exception classes for the catalog.

This module defines the exceptions raised by catalog operations. Each
exception carries an http_status hint so a presentation layer can map it
to a response without knowing the exception hierarchy.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class FieldError(BaseModel):  # type: ignore[misc]
    """A single failed field rule of a submitted form."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class AppException(Exception):
    """
    Base exception class for all catalog exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code a presentation layer should use.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class ValidationError(AppException):
    """
    Submitted form data failed validation.

    Carries every failing field (not just the first) and the sanitized
    values so the form can be redisplayed without losing valid input.

    HTTP Status: 400 Bad Request

    Attributes:
        errors: One FieldError per failing field.
        values: Sanitized, unpersisted form values.
    """

    http_status = 400

    def __init__(
        self,
        errors: list[FieldError],
        values: dict[str, Any] | None = None,
        message: str = "Submitted data is invalid",
    ):
        super().__init__(message)
        self.errors = list(errors)
        self.values = dict(values or {})

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed validation."""
        return [error.field for error in self.errors]


class NotFoundError(AppException):
    """
    Resource not found.

    Raised when a requested record does not exist on a detail, form or
    update lookup.

    HTTP Status: 404 Not Found
    """

    http_status = 404


class ConflictError(AppException):
    """
    Resource conflict.

    Raised when an operation conflicts with existing state (e.g., renaming
    a genre to a name another genre already has).

    HTTP Status: 409 Conflict
    """

    http_status = 409


class DatabaseError(AppException):
    """
    Database operation failed.

    Raised when the underlying store fails (connectivity, constraint
    violation not caught by form validation, etc.). Never retried.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500


class PartialWriteError(DatabaseError):
    """
    A two-phase write failed after its first phase was committed.

    Raised when a book row was persisted but attaching its genre set
    failed. The book row is NOT removed; it keeps no (or stale) genre
    links.

    HTTP Status: 500 Internal Server Error

    Attributes:
        book_id: Identifier of the persisted book.
    """

    def __init__(self, message: str, book_id: int | None):
        super().__init__(message)
        self.book_id = book_id
