"""Result types for railway-oriented programming.

Handlers never raise for business-rule violations. They return either a
Success carrying the value or a Failure carrying a reason constant, and the
presentation layer decides how each reason is rendered.

Usage:
    async def handle(self, cmd: LoginUser) -> Result[LoginResponse, str]:
        if account is None:
            return Failure(error=LoginError.INVALID_CREDENTIALS)
        return Success(value=LoginResponse(access_token=token))

    match await handler.handle(cmd):
        case Success(value=response):
            ...
        case Failure(error=reason):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error reason.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
