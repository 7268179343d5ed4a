"""Exercise Service — creation behind a user check, and filtered log reads.

Invariants:
    - Unknown user_id raises UserNotFoundError and writes nothing
    - Created exercises are retrievable through the log
    - from wins over to; limit caps rows; limit 0 yields nothing
"""

from datetime import date
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from exercise_tracker.core.errors import UserNotFoundError
from exercise_tracker.core.log_query import build_log_query
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.services.exercise_service import ExerciseService
from exercise_tracker.services.user_service import UserService


@pytest.fixture
def service(test_db):
    return ExerciseService(test_db, UserService(test_db))


@pytest.fixture
async def seeded_log(service, seed_user):
    """Three exercises on Jan 1, Feb 1 and Mar 1 2024."""
    uid = str(seed_user.user_id)
    for month in (1, 2, 3):
        await service.create(uid, f"run {month}", 10 * month, date(2024, month, 1))
    return uid


async def test_create_for_unknown_user_raises_and_writes_nothing(service, test_db):
    with pytest.raises(UserNotFoundError):
        await service.create(str(uuid4()), "run", 30, date(2024, 1, 1))
    result = await test_db.execute(select(func.count()).select_from(Exercise))
    assert result.scalar_one() == 0


async def test_create_for_malformed_user_id_raises(service):
    with pytest.raises(UserNotFoundError):
        await service.create("not-a-uuid", "run", 30, date(2024, 1, 1))


async def test_created_exercise_is_in_log(service, seed_user):
    created = await service.create(
        str(seed_user.user_id), "run", 30, date(2024, 1, 1),
    )
    assert created.user_id == seed_user.user_id
    log = await service.find_for_log(build_log_query(str(seed_user.user_id)))
    assert [e.id for e in log] == [created.id]


async def test_log_for_user_without_exercises_is_empty(service, seed_user):
    assert await service.find_for_log(build_log_query(str(seed_user.user_id))) == []


async def test_log_keeps_insertion_order(service, seeded_log):
    log = await service.find_for_log(build_log_query(seeded_log))
    assert [e.description for e in log] == ["run 1", "run 2", "run 3"]


async def test_log_from_is_inclusive_lower_bound(service, seeded_log):
    log = await service.find_for_log(build_log_query(seeded_log, date_from="2024-02-01"))
    assert [e.date for e in log] == [date(2024, 2, 1), date(2024, 3, 1)]


async def test_log_to_is_inclusive_upper_bound(service, seeded_log):
    log = await service.find_for_log(build_log_query(seeded_log, date_to="2024-02-01"))
    assert [e.date for e in log] == [date(2024, 1, 1), date(2024, 2, 1)]


async def test_log_from_ignores_to(service, seeded_log):
    log = await service.find_for_log(
        build_log_query(seeded_log, date_from="2024-02-01", date_to="2024-01-15"),
    )
    assert all(e.date >= date(2024, 2, 1) for e in log)
    assert len(log) == 2


async def test_log_limit_caps_rows(service, seeded_log):
    log = await service.find_for_log(build_log_query(seeded_log, limit="2"))
    assert len(log) == 2


async def test_log_limit_zero_returns_nothing(service, seeded_log):
    assert await service.find_for_log(build_log_query(seeded_log, limit="0")) == []


async def test_log_unparseable_limit_is_unbounded(service, seeded_log):
    log = await service.find_for_log(build_log_query(seeded_log, limit="many"))
    assert len(log) == 3


async def test_log_only_returns_own_exercises(service, seeded_log, test_db):
    other = await UserService(test_db).create("other")
    await service.create(str(other.user_id), "swim", 20, date(2024, 1, 5))
    log = await service.find_for_log(build_log_query(seeded_log))
    assert "swim" not in [e.description for e in log]


async def test_log_for_malformed_user_id_is_empty(service):
    assert await service.find_for_log(build_log_query("garbage")) == []
