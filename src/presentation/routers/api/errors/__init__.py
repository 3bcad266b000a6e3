"""Error rendering for the HTTP API."""

from src.presentation.routers.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = ["ErrorResponseBuilder", "register_exception_handlers"]
