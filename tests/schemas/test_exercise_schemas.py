"""Request/response schemas — field validation at the API boundary."""

from datetime import date, datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from exercise_tracker.schemas.exercise import ExerciseCreate, ExerciseResponse
from exercise_tracker.schemas.user import NewUser, UserResponse


# --- NewUser ------------------------------------------------------------------

def test_new_user_strips_username():
    assert NewUser(username="  alice ").username == "alice"


def test_new_user_rejects_blank_username():
    with pytest.raises(ValidationError):
        NewUser(username="   ")


def test_new_user_requires_username():
    with pytest.raises(ValidationError):
        NewUser.model_validate({})


# --- ExerciseCreate -----------------------------------------------------------

def test_exercise_create_reads_wire_name_user_id():
    body = ExerciseCreate.model_validate({
        "userId": "abc", "description": "run", "duration": "30", "date": "2024-01-01",
    })
    assert body.user_id == "abc"
    assert body.duration == 30.0
    assert body.date == date(2024, 1, 1)


def test_exercise_create_accepts_snake_case_user_id():
    body = ExerciseCreate.model_validate({
        "user_id": "abc", "description": "run", "duration": 30,
    })
    assert body.user_id == "abc"


def test_exercise_create_blank_date_defaults_to_today():
    body = ExerciseCreate.model_validate({
        "userId": "abc", "description": "run", "duration": 5, "date": "",
    })
    assert body.date is None
    assert body.resolved_date() == datetime.now(timezone.utc).date()


def test_exercise_create_rejects_non_numeric_duration():
    with pytest.raises(ValidationError) as exc_info:
        ExerciseCreate.model_validate({
            "userId": "abc", "description": "run", "duration": "long",
        })
    assert exc_info.value.errors()[0]["loc"] == ("duration",)


def test_exercise_create_rejects_negative_duration():
    with pytest.raises(ValidationError):
        ExerciseCreate(userId="abc", description="run", duration=-1)


def test_exercise_create_rejects_malformed_date():
    with pytest.raises(ValidationError):
        ExerciseCreate.model_validate({
            "userId": "abc", "description": "run", "duration": 1, "date": "01/02/2024",
        })


def test_exercise_create_requires_description():
    with pytest.raises(ValidationError):
        ExerciseCreate.model_validate({"userId": "abc", "duration": 1})


# --- Responses ----------------------------------------------------------------

def test_user_response_shape():
    uid = uuid4()
    dumped = UserResponse(user_id=uid, username="alice").model_dump(mode="json")
    assert dumped == {"user_id": str(uid), "username": "alice"}


def test_exercise_response_shape():
    uid = uuid4()
    dumped = ExerciseResponse(
        user_id=uid, description="run", duration=30, date=date(2024, 1, 1),
    ).model_dump(mode="json")
    assert dumped == {
        "user_id": str(uid),
        "description": "run",
        "duration": 30.0,
        "date": "2024-01-01",
    }


@pytest.mark.parametrize("duration", ["inf", "-inf", "nan", float("inf")])
def test_exercise_create_rejects_non_finite_duration(duration):
    with pytest.raises(ValidationError) as exc_info:
        ExerciseCreate.model_validate({
            "userId": "abc", "description": "run", "duration": duration,
        })
    assert exc_info.value.errors()[0]["loc"] == ("duration",)


def test_exercise_create_reads_numeric_user_id_as_string():
    body = ExerciseCreate.model_validate({
        "userId": 123, "description": "run", "duration": 30,
    })
    assert body.user_id == "123"


def test_exercise_response_sends_whole_minutes_as_int():
    dumped = ExerciseResponse(
        user_id=uuid4(), description="run", duration=30.0, date=date(2024, 1, 1),
    ).model_dump(mode="json")
    assert dumped["duration"] == 30
    assert isinstance(dumped["duration"], int)


def test_exercise_response_keeps_fractional_minutes():
    dumped = ExerciseResponse(
        user_id=uuid4(), description="run", duration=12.5, date=date(2024, 1, 1),
    ).model_dump(mode="json")
    assert dumped["duration"] == 12.5
