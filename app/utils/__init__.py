"""Exercise Tracker API - Utilities Package."""

from app.utils.errors import (
    ExerciseTrackerException,
    NotFoundError,
    InvalidInputError,
    StorageError,
)

__all__ = [
    "ExerciseTrackerException",
    "NotFoundError",
    "InvalidInputError",
    "StorageError",
]
