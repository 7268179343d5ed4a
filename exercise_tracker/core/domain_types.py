"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps a UUID — never pass a raw query-string id into the store
    - A log filter bounds the date on at most one side (DateBound)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class DateBound(str, Enum):
    """Which side of the date range a log query constrains."""
    NONE = "none"
    FROM = "from"   # date >= bound
    TO = "to"       # date <= bound
