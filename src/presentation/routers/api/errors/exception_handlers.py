"""Global exception handlers.

- ``HTTPException``: ``{"message": detail}`` with the exception's status.
- ``RequestValidationError``: 422 with per-field messages in the wording
  API clients already expect ("The email field is required.").
- Anything else: logged, then 500 ``{"message": "Server Error"}``.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.presentation.routers.api.errors.error_response_builder import (
    SERVER_ERROR_MESSAGE,
    ErrorResponseBuilder,
)

_VALUE_ERROR_PREFIX = "Value error, "

# Model-level errors raised by these custom types belong to a field
_MODEL_ERROR_FIELDS = {"confirmed": "password"}


def _field_label(field: str) -> str:
    return field.replace("_", " ")


def validation_message(error: dict[str, Any], field: str) -> str:
    """Render one pydantic error in client-facing wording.

    Args:
        error: A single entry of ``RequestValidationError.errors()``.
        field: Field name the error belongs to.

    Returns:
        Human readable message.
    """
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}
    label = _field_label(field)

    if error_type == "missing":
        return f"The {label} field is required."
    if error_type == "string_too_short":
        if ctx.get("min_length") == 1:
            return f"The {label} field is required."
        return f"The {label} must be at least {ctx.get('min_length')} characters."
    if error_type == "string_too_long":
        return (
            f"The {label} must not be greater than "
            f"{ctx.get('max_length')} characters."
        )
    if error_type == "string_type":
        return f"The {label} must be a string."

    message = str(error.get("msg", "The given data was invalid."))
    if message.startswith(_VALUE_ERROR_PREFIX):
        message = message[len(_VALUE_ERROR_PREFIX) :]
    return message


def _error_field(error: dict[str, Any]) -> str:
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query")]
    if loc:
        return loc[0]
    return _MODEL_ERROR_FIELDS.get(error.get("type", ""), "body")


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render HTTPException as ``{"message": detail}``."""
    assert isinstance(exc, StarletteHTTPException)

    return ErrorResponseBuilder.message(
        exc.status_code,
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Render request validation failures as field errors.

    Example:
        >>> # POST /auth/registration with {"email": "nope"}
        >>> # {
        >>> #   "message": "The name field is required.",
        >>> #   "errors": {
        >>> #     "name": ["The name field is required."],
        >>> #     "email": ["The email must be a valid email address."],
        >>> #     "password": ["The password field is required."]
        >>> #   }
        >>> # }
    """
    assert isinstance(exc, RequestValidationError)

    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = _error_field(error)
        message = validation_message(error, field)
        messages = errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)

    return ErrorResponseBuilder.field_errors(errors)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and return 500 without leaking its text."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )

    return ErrorResponseBuilder.message(500, SERVER_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
