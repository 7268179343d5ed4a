"""Error Handlers — global exception handlers for the exercise tracker API.

Invariants:
    - Business errors (duplicate username, unknown user, missing userId) → {"error": message}, HTTP 200
    - Request validation → plain text, HTTP 400, first failing field's message only
    - Unmatched route or method → plain text "not found", HTTP 404
    - Exception (catch-all) → plain text, HTTP 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (ExerciseTrackerError), validation (Pydantic),
      routing (Starlette HTTPException), catch-all (Exception)
    - The 200-with-error-body asymmetry is the wire contract existing clients rely on
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from exercise_tracker.core.errors import ExerciseTrackerError, RouteNotFoundError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def render_error(exc: ExerciseTrackerError):
    """Business errors as JSON envelopes, everything else as plain text."""
    if exc.is_business_error:
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())
    return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register exercise tracker domain/infrastructure error handler."""

    @app.exception_handler(ExerciseTrackerError)
    async def domain_error_handler(request: Request, exc: ExerciseTrackerError):
        level = logging.WARNING if exc.http_status < 500 else logging.ERROR
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "user_id": exc.context.user_id,
                "username": exc.context.username,
            },
        )
        return render_error(exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return PlainTextResponse(
            first_error_message(exc.errors()),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (unknown path, wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            return render_error(RouteNotFoundError(request.url.path))
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PlainTextResponse(
            INTERNAL_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def first_error_message(errors) -> str:
    """`<field>: <message>` for the first failing field."""
    errors = list(errors)
    if not errors:
        return "Invalid request data"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query")]
    field = ".".join(loc)
    return f"{field}: {first['msg']}" if field else first["msg"]
