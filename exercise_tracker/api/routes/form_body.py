"""Form Body Helpers — read url-encoded, multipart, or JSON bodies into Pydantic models.

Invariants:
    - Form and JSON bodies produce the same plain dict of field -> value
    - A body that fails model validation raises StoreValidationError with the
      first failing field's message (rendered as plain text 400)
    - Unsupported or empty bodies read as {} and fail validation normally

Design Decisions:
    - Manual content negotiation: HTML forms post url-encoded, API clients post JSON,
      and FastAPI's Body/Form parameters cannot accept both on one route
"""

from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from exercise_tracker.api.error_handlers import first_error_message
from exercise_tracker.core.errors import StoreValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_form_body(request: Request) -> dict:
    """Read the request body as a flat dict, whatever its encoding."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            raise StoreValidationError("Malformed JSON body", "body") from None
        if not isinstance(data, dict):
            raise StoreValidationError("Request body must be a JSON object", "body")
        return data
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return {k: v for k, v in form.items() if isinstance(v, str)}
    return {}


def validate_body(model: type[ModelT], data: dict) -> ModelT:
    """Validate a body dict, mapping Pydantic errors to StoreValidationError."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        field = ".".join(str(p) for p in errors[0]["loc"]) if errors else "body"
        raise StoreValidationError(first_error_message(errors), field) from None
