"""Exercise ORM — one logged exercise entry.

Invariants:
    - user_id matched an existing user at creation time (checked by ExerciseService)
    - duration is in minutes
    - Rows are append-only

Design Decisions:
    - No ForeignKey on user_id: the reference is a point-in-time check, not a maintained
      relationship (users could be removed out-of-band without cascading)
    - Index on user_id: every log query filters by it
"""

import datetime as dt
import uuid

from sqlalchemy import Date, DateTime, Float, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.db.base import Base


class Exercise(Base):
    """Exercise log entry."""
    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False, index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: dt.datetime.now(dt.timezone.utc),
    )
