"""User Service — lookups by id or name, and creation with username uniqueness.

Invariants:
    - find_* return lists (0 or 1 expected); empty list means "not found", never an error
    - A malformed (non-UUID) user id matches nothing
    - create() never writes when the username is already taken
    - A concurrent duplicate caught by the unique index is also DuplicateUsernameError

Design Decisions:
    - Check-then-create kept for the common case; the unique index closes the race
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.domain_types import UserId
from exercise_tracker.core.errors import DuplicateUsernameError
from exercise_tracker.models.user import User

logger = logging.getLogger(__name__)


def parse_user_id(user_id: str | UUID | None) -> UserId | None:
    """Parse a wire user id; None when absent or malformed."""
    if user_id is None:
        return None
    if isinstance(user_id, UUID):
        return UserId(user_id)
    try:
        return UserId(UUID(str(user_id).strip()))
    except ValueError:
        return None


class UserService:
    """User persistence and lookups."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_user_id(self, user_id: str | UUID | None) -> list[User]:
        uid = parse_user_id(user_id)
        if uid is None:
            return []
        result = await self.db.execute(
            select(User).where(User.user_id == uid),
        )
        return list(result.scalars().all())

    async def find_by_username(self, username: str) -> list[User]:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        return list(result.scalars().all())

    async def list_all(self) -> list[User]:
        result = await self.db.execute(
            select(User).order_by(User.created_at),
        )
        return list(result.scalars().all())

    async def create(self, username: str) -> User:
        """Create a user. Raises DuplicateUsernameError if the name is taken."""
        if await self.find_by_username(username):
            logger.warning(
                "Username already exists", extra={"username": username},
            )
            raise DuplicateUsernameError(username)

        user = User(username=username)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(
                "Username taken by a concurrent request",
                extra={"username": username},
            )
            raise DuplicateUsernameError(username)
        await self.db.refresh(user)
        logger.info(
            "User saved", extra={"user_id": user.user_id, "username": username},
        )
        return user
