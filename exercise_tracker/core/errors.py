"""Error Hierarchy — typed, categorized exceptions for all exercise tracker failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Business errors answer 200 with an {"error": message} body; the rest answer
      plain text with their own http_status (400/404/500)
    - to_response() carries the message string only, never a nested object or trace

Design Decisions:
    - Single hierarchy with ExerciseTrackerError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability without coupling to the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    ROUTE_NOT_FOUND = "route_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    username: str | None = None


class ExerciseTrackerError(Exception):
    """Base exception for all exercise tracker errors."""

    # Business errors are part of the normal response contract of a route
    is_business_error: bool = False

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the {"error": message} envelope."""
        return {"error": self.message}


# ─── Business Errors (reported as {"error"} with HTTP 200) ──────

class BusinessError(ExerciseTrackerError):
    """Expected rejection of a well-formed request."""
    is_business_error = True

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, category, ErrorSeverity.WARNING, context, 200,
        )


class DuplicateUsernameError(BusinessError):
    """Username is already taken."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.username = username
        super().__init__(
            "Username already exists", "DUPLICATE_USERNAME",
            ErrorCategory.CONFLICT, ctx,
        )
        self.username = username


class UserNotFoundError(BusinessError):
    """Referenced user_id has no matching user."""
    def __init__(self, user_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            "User not found.", "USER_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ctx,
        )
        self.user_id = user_id


class MissingUserIdError(BusinessError):
    """Request carries no userId."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "UserId is not provided.", "MISSING_USER_ID",
            ErrorCategory.BUSINESS_RULE, context,
        )


class InvalidDateError(BusinessError):
    """A from/to log bound is not a calendar date."""
    def __init__(self, field_name: str, value: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid date for '{field_name}': {value}", "INVALID_DATE",
            ErrorCategory.VALIDATION, context,
        )
        self.field = field_name
        self.value = value


# ─── Request Errors (plain text, non-200) ───────────────────────

class StoreValidationError(ExerciseTrackerError):
    """A record field failed validation; message is the first failing field's."""
    def __init__(self, message: str, field_name: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field_name


class RouteNotFoundError(ExerciseTrackerError):
    """No route matches the request."""
    def __init__(self, path: str = "", context: ErrorContext | None = None):
        super().__init__(
            "not found", "NOT_FOUND", ErrorCategory.ROUTE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.path = path


# ─── Infrastructure Errors (500) ────────────────────────────────

class DatabaseError(ExerciseTrackerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
