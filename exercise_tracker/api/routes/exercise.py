"""Exercise Routes — users, exercises, and the exercise log under /api/exercise.

Invariants:
    - Routes never contain queries: lookups and writes go through the services
    - Log queries fail with MissingUserIdError before any store access
    - Business errors are raised, and rendered as {"error"} by the global handler

Design Decisions:
    - Absent username on GET /api/exercise lists every user (unfiltered find)
    - /add checks for a userId before validating the rest of the body
"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.api.routes.form_body import read_form_body, validate_body
from exercise_tracker.core.errors import MissingUserIdError, UserNotFoundError
from exercise_tracker.core.log_query import build_log_query
from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.schemas.exercise import ExerciseCreate, ExerciseResponse
from exercise_tracker.schemas.user import NewUser, UserResponse
from exercise_tracker.services.exercise_service import ExerciseService
from exercise_tracker.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/exercise", tags=["exercise"])


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


def get_exercise_service(
    users: UserService = Depends(get_user_service),
) -> ExerciseService:
    return ExerciseService(users.db, users)


@router.get("", response_model=list[UserResponse])
async def find_users(
    username: str | None = Query(None),
    users: UserService = Depends(get_user_service),
):
    """Users with the given username (every user when omitted)."""
    if username is None:
        return await users.list_all()
    return await users.find_by_username(username)


@router.get("/log", response_model=list[ExerciseResponse])
async def exercise_log(
    user_id: str | None = Query(None, alias="userId"),
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    limit: str | None = Query(None),
    exercises: ExerciseService = Depends(get_exercise_service),
):
    """A user's exercises, optionally bounded by date and capped by limit."""
    query = build_log_query(user_id, date_from, date_to, limit)
    if not await exercises.users.find_by_user_id(query.user_id):
        raise UserNotFoundError(query.user_id)
    return await exercises.find_for_log(query)


@router.post("/new-user", response_model=UserResponse)
async def new_user(
    request: Request, users: UserService = Depends(get_user_service),
):
    """Create a user with a unique username."""
    body = validate_body(NewUser, await read_form_body(request))
    return await users.create(body.username)


@router.post("/add", response_model=ExerciseResponse)
async def add_exercise(
    request: Request,
    exercises: ExerciseService = Depends(get_exercise_service),
):
    """Log an exercise for an existing user."""
    data = await read_form_body(request)
    raw_user_id = data.get("userId", data.get("user_id"))
    if raw_user_id is None or not str(raw_user_id).strip():
        raise MissingUserIdError()
    body = validate_body(ExerciseCreate, data)
    return await exercises.create(
        body.user_id, body.description, body.duration, body.resolved_date(),
    )
