# app/models/mongodb.py
"""
Exercise Tracker MongoDB Document Models.

Beanie ODM models for MongoDB.
"""

from beanie import Document
from datetime import datetime
from typing import Optional


class UserDocument(Document):
    """User model for MongoDB."""

    username: str  # required, not unique

    class Settings:
        name = "users"  # Collection name in MongoDB


class ExerciseDocument(Document):
    """Exercise model for MongoDB."""

    userId: str  # stored key name; text copy of UserDocument.id, not a foreign key
    description: Optional[str] = None
    duration: Optional[int] = None  # minutes; None when the input was not a number
    date: datetime  # naive UTC

    class Settings:
        name = "exercises"
        indexes = [
            "userId",
        ]
