"""Exercise Tracker API - Pydantic Schemas Package."""

from app.schemas.user import UserCreate
from app.schemas.exercise import ExerciseCreate, LogQuery

__all__ = [
    "UserCreate",
    "ExerciseCreate",
    "LogQuery",
]
