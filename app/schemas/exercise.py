"""
Exercise Tracker API - Exercise Schemas.

Pydantic schemas for exercise creation and log queries.

Fields are coerced, never rejected for being malformed numbers: a duration
that is not a number becomes None. Dates that cannot be parsed raise the
application's InvalidInputError, which passes through pydantic unchanged.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.coercion import parse_date, parse_int, parse_limit


class ExerciseCreate(BaseModel):
    """
    Schema for recording an exercise.

    Attributes:
        description: Free text.
        duration: Minutes, read leniently from text.
        date: When the exercise happened; None means now.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "description": "run",
                "duration": "30",
                "date": "2023-01-16"
            }
        }
    )

    description: Optional[str] = Field(None, description="What was done")
    duration: Optional[int] = Field(None, description="Duration in minutes")
    date: Optional[datetime] = Field(None, description="Date (defaults to now)")

    @field_validator("description", mode="before")
    @classmethod
    def coerce_description(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    @field_validator("duration", mode="before")
    @classmethod
    def coerce_duration(cls, value: Any) -> Optional[int]:
        return parse_int(value)

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, value: Any) -> Optional[datetime]:
        return parse_date(value, path="date")


class LogQuery(BaseModel):
    """
    Filters for the exercise log.

    Attributes:
        date_from: Inclusive lower bound on the exercise date.
        date_to: Inclusive upper bound on the exercise date.
        limit: Maximum number of entries; None returns all of them.
    """

    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    limit: Optional[int] = None

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def coerce_bound(cls, value: Any) -> Optional[datetime]:
        return parse_date(value, path="date")

    @field_validator("limit", mode="before")
    @classmethod
    def coerce_limit(cls, value: Any) -> Optional[int]:
        return parse_limit(value)
