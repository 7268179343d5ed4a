"""Log Query Builder — maps raw log query parameters to a LogQuery. Pure, no IO.

Invariants:
    - user_id is required; absent or blank raises MissingUserIdError before any store access
    - from takes precedence over to; a LogQuery never carries both bounds
    - limit parses like a leading-integer parse; absent or unparseable means no limit
    - limit 0 is a real limit (zero rows), not "unbounded"
    - limit is capped at MAX_LIMIT so any integer reaches the store as a valid row count

Design Decisions:
    - user_id stays a string here: a malformed id is a lookup miss (User not found),
      decided by the user service, not a builder error
    - Negative limits use their magnitude, the way the original store treated them
"""

import re
from dataclasses import dataclass
from datetime import date, datetime

from exercise_tracker.core.domain_types import DateBound
from exercise_tracker.core.errors import InvalidDateError, MissingUserIdError

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Largest row count a store accepts (signed 64-bit)
MAX_LIMIT = 2**63 - 1


@dataclass(frozen=True)
class LogQuery:
    """Store query for one user's exercise log."""
    user_id: str
    bound: DateBound = DateBound.NONE
    bound_date: date | None = None
    limit: int | None = None


def parse_limit(raw: str | int | None) -> int | None:
    """Parse a limit; None when absent or unparseable."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return min(abs(raw), MAX_LIMIT)
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    digits = match.group(1).lstrip("+-").lstrip("0")
    if len(digits) > len(str(MAX_LIMIT)):
        return MAX_LIMIT
    return min(int(digits or "0"), MAX_LIMIT)


def parse_date_bound(field_name: str, raw: str | None) -> date | None:
    """Parse a YYYY-MM-DD (or full ISO datetime) bound; None when blank."""
    if raw is None or not raw.strip():
        return None
    value = raw.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        raise InvalidDateError(field_name, value) from None


def build_log_query(
    user_id: str | None,
    date_from: str | None = None,
    date_to: str | None = None,
    limit: str | int | None = None,
) -> LogQuery:
    """Build a LogQuery from raw parameters. Raises MissingUserIdError / InvalidDateError."""
    if user_id is None or not str(user_id).strip():
        raise MissingUserIdError()

    lower = parse_date_bound("from", date_from)
    if lower is not None:
        bound, bound_date = DateBound.FROM, lower
    else:
        upper = parse_date_bound("to", date_to)
        if upper is not None:
            bound, bound_date = DateBound.TO, upper
        else:
            bound, bound_date = DateBound.NONE, None

    return LogQuery(
        user_id=str(user_id).strip(),
        bound=bound,
        bound_date=bound_date,
        limit=parse_limit(limit),
    )
