# app/services/projections.py
"""
Exercise Tracker API - Response Projections.

Map stored documents to the JSON shapes clients receive. Identifiers are
sent under ``_id`` and dates as short calendar strings.
"""

from typing import Any, Dict, List

from app.models.mongodb import ExerciseDocument, UserDocument
from app.utils.coercion import to_date_string


def user_summary(user: UserDocument) -> Dict[str, Any]:
    """User projected to name and id."""
    return {
        "username": user.username,
        "_id": str(user.id),
    }


def exercise_created(user: UserDocument, exercise: ExerciseDocument) -> Dict[str, Any]:
    """New exercise merged with its owner; ``_id`` is the user's id."""
    return {
        "username": user.username,
        "description": exercise.description,
        "duration": exercise.duration,
        "date": to_date_string(exercise.date),
        "_id": str(user.id),
    }


def log_entry(exercise: ExerciseDocument) -> Dict[str, Any]:
    """One log line; the exercise id and owner are left out."""
    return {
        "description": exercise.description,
        "duration": exercise.duration,
        "date": to_date_string(exercise.date),
    }


def exercise_log(user: UserDocument, exercises: List[ExerciseDocument]) -> Dict[str, Any]:
    """
    A user's log with its entry count.

    Args:
        user: Owner of the log.
        exercises: Matching exercises, already filtered and limited.

    Returns:
        Dict with username, count, _id and log.
    """
    log = [log_entry(exercise) for exercise in exercises]
    return {
        "username": user.username,
        "count": len(log),
        "_id": str(user.id),
        "log": log,
    }
