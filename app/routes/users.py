# app/routes/users.py
"""
Exercise Tracker API - User and Exercise Routes (MongoDB).

Handled failures come back as ``{"error": message}`` with HTTP 200. Listing
users has no error handling; a database failure there is a plain 500.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from bson.errors import BSONError
from pymongo.errors import PyMongoError

from app.dependencies import read_body
from app.schemas.exercise import ExerciseCreate, LogQuery
from app.schemas.user import UserCreate
from app.services import exercises, projections, users
from app.utils.errors import StorageError

logger = logging.getLogger(__name__)

router = APIRouter()

# Failures raised while talking to MongoDB or encoding documents for it
STORAGE_ERRORS = (PyMongoError, BSONError, OverflowError)


@router.post("")
async def create_user(body: Dict[str, Any] = Depends(read_body)):
    """Create a user."""
    payload = UserCreate.model_validate(body)
    try:
        user = await users.create_user(payload)
    except STORAGE_ERRORS as e:
        logger.error(f"Failed to create user: {e}")
        raise StorageError(str(e))

    return projections.user_summary(user)


@router.get("")
async def list_users():
    """List every user."""
    return [projections.user_summary(user) for user in await users.list_users()]


@router.post("/{user_id}/exercises")
async def add_exercise(
    user_id: str,
    body: Dict[str, Any] = Depends(read_body)
):
    """Record an exercise for a user."""
    try:
        user = await users.get_user(user_id)
        payload = ExerciseCreate.model_validate(body)
        exercise = await exercises.add_exercise(user, payload)
    except STORAGE_ERRORS as e:
        logger.error(f"Failed to add exercise for user {user_id}: {e}")
        raise StorageError(str(e))

    return projections.exercise_created(user, exercise)


@router.get("/{user_id}/logs")
async def get_log(
    user_id: str,
    date_from: Optional[str] = Query(None, alias="from", description="Earliest date, inclusive"),
    date_to: Optional[str] = Query(None, alias="to", description="Latest date, inclusive"),
    limit: Optional[str] = Query(None, description="Maximum number of entries")
):
    """Get a user's exercise log, optionally filtered by date and capped."""
    try:
        user = await users.get_user(user_id)
        query = LogQuery(date_from=date_from, date_to=date_to, limit=limit)
        entries = await exercises.get_log(user, query)
    except STORAGE_ERRORS as e:
        logger.error(f"Failed to read log for user {user_id}: {e}")
        raise StorageError(str(e))

    return projections.exercise_log(user, entries)
