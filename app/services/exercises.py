# app/services/exercises.py
"""Exercise Tracker API - Exercise Log Service (MongoDB)."""

import logging
from typing import List

from app.models.mongodb import ExerciseDocument, UserDocument
from app.schemas.exercise import ExerciseCreate, LogQuery
from app.utils.coercion import utcnow

logger = logging.getLogger(__name__)


async def add_exercise(user: UserDocument, payload: ExerciseCreate) -> ExerciseDocument:
    """Record an exercise for an existing user, dated now unless given."""
    exercise = ExerciseDocument(
        userId=str(user.id),
        description=payload.description,
        duration=payload.duration,
        date=payload.date or utcnow(),
    )
    await exercise.insert()
    logger.info(f"Recorded exercise {exercise.id} for user {user.id}")
    return exercise


async def get_log(user: UserDocument, query: LogQuery) -> List[ExerciseDocument]:
    """
    Fetch a user's exercises within the query's date bounds.

    Both bounds are inclusive and optional. Results keep storage order.
    """
    conditions = [ExerciseDocument.userId == str(user.id)]
    if query.date_from is not None:
        conditions.append(ExerciseDocument.date >= query.date_from)
    if query.date_to is not None:
        conditions.append(ExerciseDocument.date <= query.date_to)

    cursor = ExerciseDocument.find(*conditions)
    if query.limit:
        cursor = cursor.limit(query.limit)
    return await cursor.to_list()
