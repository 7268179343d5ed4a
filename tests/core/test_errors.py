"""Error hierarchy — codes, statuses, and the {"error": message} envelope."""

from exercise_tracker.core.errors import (
    DatabaseError, DuplicateUsernameError, ErrorCategory, ErrorSeverity,
    ExerciseTrackerError, InvalidDateError, MissingUserIdError,
    RouteNotFoundError, StoreValidationError, UserNotFoundError,
)


def test_duplicate_username_is_business_error_with_200():
    err = DuplicateUsernameError("alice")
    assert err.is_business_error
    assert err.http_status == 200
    assert err.category == ErrorCategory.CONFLICT
    assert err.context.username == "alice"
    assert err.to_response() == {"error": "Username already exists"}


def test_user_not_found_message():
    err = UserNotFoundError("abc")
    assert err.to_response() == {"error": "User not found."}
    assert err.context.user_id == "abc"
    assert err.http_status == 200


def test_missing_user_id_message():
    assert MissingUserIdError().to_response() == {"error": "UserId is not provided."}


def test_invalid_date_is_business_error():
    err = InvalidDateError("from", "nope")
    assert err.is_business_error
    assert "nope" in err.message


def test_request_errors_are_not_business_errors():
    assert StoreValidationError("duration: bad", "duration").http_status == 400
    assert RouteNotFoundError("/x").http_status == 404
    assert RouteNotFoundError().message == "not found"
    db_err = DatabaseError("boom", "commit")
    assert db_err.http_status == 500
    assert db_err.severity == ErrorSeverity.CRITICAL
    for err in (StoreValidationError("m", "f"), RouteNotFoundError(), db_err):
        assert not err.is_business_error


def test_all_errors_share_base():
    for err in (
        DuplicateUsernameError("a"), UserNotFoundError("b"),
        MissingUserIdError(), DatabaseError("x", "query"),
    ):
        assert isinstance(err, ExerciseTrackerError)
        assert isinstance(err, Exception)
