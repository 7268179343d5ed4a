"""Exercise Schemas — Pydantic models for the add-exercise form and exercise responses.

Invariants:
    - ExerciseCreate accepts userId (wire name) or user_id
    - userId may be absent here; the route reports that as MissingUserIdError
    - Blank date means "today"; duration is a finite, non-negative number of minutes
    - A numeric userId is read as its string form (a lookup miss, not a 400)
    - Whole-minute durations are sent as JSON integers (30, not 30.0)
    - ExerciseResponse is exactly {user_id, description, duration, date}

Design Decisions:
    - datetime imported as a module: a field named `date` must not shadow its type
"""

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class ExerciseCreate(BaseModel):
    """Add-exercise form body."""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    user_id: str | None = Field(None, alias="userId")
    description: str = Field(min_length=1, max_length=10_000)
    duration: float = Field(ge=0, allow_inf_nan=False)
    date: dt.date | None = None

    @field_validator("user_id", "date", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("description cannot be empty or whitespace")
        return v

    def resolved_date(self) -> dt.date:
        """The exercise date, defaulting to today (UTC)."""
        return self.date or dt.datetime.now(dt.timezone.utc).date()


class ExerciseResponse(BaseModel):
    """Exercise response — public-facing exercise data."""
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    description: str
    duration: float
    date: dt.date

    @field_serializer("duration")
    def whole_minutes_as_int(self, v: float) -> int | float:
        return int(v) if v.is_integer() else v
