"""
Exercise Tracker API - Custom Exception Classes.

Exception hierarchy for application error handling.

Handled errors are reported as a JSON ``{"error": message}`` body with
HTTP 200, which is what existing API clients expect.
"""

from typing import Optional


class ExerciseTrackerException(Exception):
    """
    Base exception class for the Exercise Tracker application.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message, sent as the ``error`` field.
        status_code: HTTP status code for the error response.
        detail: Additional error details, logged but not sent.
    """

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 200,
        detail: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)


class NotFoundError(ExerciseTrackerException):
    """
    Exception raised when a referenced user does not exist.

    Used by exercise creation and log retrieval.
    """

    def __init__(
        self,
        message: str = "User not found",
        detail: Optional[str] = None
    ):
        super().__init__(message=message, detail=detail)


class InvalidInputError(ExerciseTrackerException):
    """
    Exception raised for input the store could not accept.

    Used when:
    - A required field is missing
    - An identifier is not a valid ObjectId
    - A date cannot be parsed
    """

    def __init__(
        self,
        message: str = "Validation error",
        detail: Optional[str] = None
    ):
        super().__init__(message=message, detail=detail)


class StorageError(ExerciseTrackerException):
    """Exception raised when a MongoDB operation fails."""

    def __init__(
        self,
        message: str = "Database error",
        detail: Optional[str] = None
    ):
        super().__init__(message=message, detail=detail)


def cast_error(kind: str, value: object, path: str) -> InvalidInputError:
    """Build the error reported when ``value`` cannot be cast to ``kind``."""
    return InvalidInputError(
        f'Cast to {kind} failed for value "{value}" (type {type(value).__name__}) '
        f'at path "{path}"'
    )


def required_error(model: str, path: str) -> InvalidInputError:
    """Build the error reported when a required field is absent."""
    return InvalidInputError(
        f"{model} validation failed: {path}: Path `{path}` is required."
    )
