"""User ORM — a person whose exercises are tracked.

Invariants:
    - user_id is a UUID generated at creation, never updated
    - username is unique (unique index rejects concurrent duplicates)
    - Rows are never updated or deleted by the service

Design Decisions:
    - user_id is the primary key and the public identifier: no separate surrogate key
    - created_at kept for ordering only, not exposed on the wire
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.db.base import Base


class User(Base):
    """User account — owns exercises by soft reference."""
    __tablename__ = "users"

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
