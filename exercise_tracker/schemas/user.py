"""User Schemas — Pydantic models for the new-user form and user responses.

Invariants:
    - NewUser.username: 1-255 chars, stripped, non-empty
    - UserResponse is exactly {user_id, username}
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NewUser(BaseModel):
    """New-user form body."""
    username: str = Field(min_length=1, max_length=255)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username cannot be empty or whitespace")
        return v


class UserResponse(BaseModel):
    """User response — public-facing user data."""
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    username: str
