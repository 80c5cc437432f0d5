"""Exercise Tracker API - Services Package."""

from app.services import exercises, projections, users

__all__ = [
    "exercises",
    "projections",
    "users",
]
