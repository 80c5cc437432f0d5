# app/services/users.py
"""Exercise Tracker API - User Registry Service (MongoDB)."""

import logging
from typing import List

from beanie import PydanticObjectId

from app.models.mongodb import UserDocument
from app.schemas.user import UserCreate
from app.utils.errors import NotFoundError, cast_error

logger = logging.getLogger(__name__)


async def create_user(payload: UserCreate) -> UserDocument:
    """Insert a new user; the store assigns its id."""
    user = UserDocument(username=payload.username)
    await user.insert()
    logger.info(f"Created user {user.id}")
    return user


async def list_users() -> List[UserDocument]:
    """Every stored user, in storage order."""
    return await UserDocument.find_all().to_list()


async def get_user(user_id: str) -> UserDocument:
    """
    Look a user up by id.

    Raises:
        InvalidInputError: If user_id is not a valid ObjectId.
        NotFoundError: If no user has that id.
    """
    if not PydanticObjectId.is_valid(user_id):
        raise cast_error("ObjectId", user_id, "_id")

    user = await UserDocument.get(PydanticObjectId(user_id))
    if not user:
        raise NotFoundError(detail=f"No user with id {user_id}")
    return user
