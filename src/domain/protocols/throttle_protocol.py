"""Throttle protocol (port) for request rate limiting on auth routes.

Fixed window: at most ``max_attempts`` hits per key within ``decay_seconds``.

Fail-Open Design:
    Implementations MUST return Success with allowed=True when the backing
    store is unavailable. Throttling must never cause a denial of service.
"""

from dataclasses import dataclass
from typing import Protocol

from src.core.result import Result


@dataclass(frozen=True, slots=True, kw_only=True)
class ThrottleResult:
    """Outcome of one throttle hit.

    Attributes:
        allowed: Whether the request may proceed.
        limit: Maximum hits per window.
        remaining: Hits left in the current window.
        retry_after: Seconds until the window resets (0 when allowed).
    """

    allowed: bool
    limit: int
    remaining: int
    retry_after: int = 0


class ThrottleProtocol(Protocol):
    """Protocol for fixed-window throttling.

    Implementations:
        - RedisThrottle: INCR + EXPIRE in one pipeline
    """

    async def hit(
        self,
        *,
        key: str,
        max_attempts: int,
        decay_seconds: int,
    ) -> Result[ThrottleResult, str]:
        """Record a hit and decide whether it is allowed.

        Args:
            key: Throttle key (route and client identifier).
            max_attempts: Maximum hits per window.
            decay_seconds: Window length.

        Returns:
            Success(ThrottleResult); Failure only for unexpected errors.
        """
        ...
