"""
Exercise Tracker API - User Schemas.

Pydantic schemas for user registry operations.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.utils.errors import required_error


class UserCreate(BaseModel):
    """
    Schema for creating a new user.

    Only presence is checked; an empty username is accepted. Non-text
    values are stored as their text form.

    Attributes:
        username: Display name, not required to be unique.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice"
            }
        }
    )

    username: str = Field(..., description="User's name")

    @model_validator(mode="before")
    @classmethod
    def require_username(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("username") is None:
            raise required_error("User", "username")
        return {**data, "username": str(data["username"])}
