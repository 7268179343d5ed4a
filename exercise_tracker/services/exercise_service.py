"""Exercise Service — creation behind a user-existence check, and log reads.

Invariants:
    - create() never writes unless the referenced user exists at that moment
    - find_for_log() filters by user_id, then at most one date bound, then limit
    - Log order is insertion order (created_at)

Design Decisions:
    - User existence delegated to a UserLookup (UserService in production)
    - The LogQuery arrives already validated by core.log_query; no parsing here
"""

import datetime as dt
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.domain_types import DateBound
from exercise_tracker.core.errors import UserNotFoundError
from exercise_tracker.core.log_query import LogQuery
from exercise_tracker.core.repository_protocols import UserLookup
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.services.user_service import parse_user_id

logger = logging.getLogger(__name__)


class ExerciseService:
    """Exercise persistence and log queries."""

    def __init__(self, db: AsyncSession, users: UserLookup):
        self.db = db
        self.users = users

    async def create(
        self,
        user_id: str,
        description: str,
        duration: float,
        date: dt.date,
    ) -> Exercise:
        """Create an exercise. Raises UserNotFoundError if the user does not exist."""
        found = await self.users.find_by_user_id(user_id)
        if not found:
            logger.warning("User not found", extra={"user_id": user_id})
            raise UserNotFoundError(str(user_id))

        exercise = Exercise(
            user_id=found[0].user_id,
            description=description,
            duration=duration,
            date=date,
        )
        self.db.add(exercise)
        await self.db.commit()
        await self.db.refresh(exercise)
        logger.info("Exercise saved", extra={"user_id": exercise.user_id})
        return exercise

    async def find_for_log(self, query: LogQuery) -> list[Exercise]:
        """Exercises for query.user_id, filtered and limited. Empty is not an error."""
        uid = parse_user_id(query.user_id)
        if uid is None:
            return []
        logger.debug(
            f"Searching exercises: bound={query.bound.value} "
            f"date={query.bound_date} limit={query.limit}",
            extra={"user_id": query.user_id},
        )

        stmt = select(Exercise).where(Exercise.user_id == uid)
        if query.bound == DateBound.FROM:
            stmt = stmt.where(Exercise.date >= query.bound_date)
        elif query.bound == DateBound.TO:
            stmt = stmt.where(Exercise.date <= query.bound_date)
        stmt = stmt.order_by(Exercise.created_at)
        if query.limit is not None:
            stmt = stmt.limit(query.limit)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())
