"""Throttle middleware for the public authentication routes.

Applies a fixed window of ``auth_throttle_max_attempts`` hits per
``auth_throttle_decay_seconds`` to each (route, client IP) pair on:

    GET       /auth/verify-email/{id}/{hash}
    GET/POST  /auth/resend-email-verification
    POST      /auth/login
    POST      /auth/logout
    POST      /auth/forgot-password

Over-limit requests get 429 "Too Many Attempts." with Retry-After and
X-RateLimit-* headers. Throttle failures of any kind let the request
through (fail-open) and are logged.

Usage:
    app.add_middleware(ThrottleMiddleware)
"""

import re
from typing import TYPE_CHECKING, Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from src.core.config import settings
from src.core.result import Success

if TYPE_CHECKING:
    from src.domain.protocols import LoggerProtocol, ThrottleProtocol

TOO_MANY_ATTEMPTS_MESSAGE = "Too Many Attempts."

# (methods, compiled path pattern, route template used in the throttle key)
THROTTLED_ROUTES: tuple[tuple[frozenset[str], re.Pattern[str], str], ...] = (
    (
        frozenset({"GET"}),
        re.compile(r"^/auth/verify-email/[^/]+/[^/]+$"),
        "/auth/verify-email/{id}/{hash}",
    ),
    (
        frozenset({"GET", "POST"}),
        re.compile(r"^/auth/resend-email-verification$"),
        "/auth/resend-email-verification",
    ),
    (frozenset({"POST"}), re.compile(r"^/auth/login$"), "/auth/login"),
    (frozenset({"POST"}), re.compile(r"^/auth/logout$"), "/auth/logout"),
    (
        frozenset({"POST"}),
        re.compile(r"^/auth/forgot-password$"),
        "/auth/forgot-password",
    ),
)


def match_throttled_route(method: str, path: str) -> str | None:
    """Return the route template for a throttled request, or None."""
    for methods, pattern, template in THROTTLED_ROUTES:
        if method in methods and pattern.match(path):
            return template
    return None


class ThrottleMiddleware(BaseHTTPMiddleware):
    """Starlette middleware enforcing per-IP attempt limits on auth routes.

    Collaborators default to the container singletons and are resolved
    lazily on first use, so importing the app never touches Redis.

    Attributes:
        _throttle: ThrottleProtocol implementation.
        _logger: LoggerProtocol for fail-open warnings.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        throttle: "ThrottleProtocol | None" = None,
        logger: "LoggerProtocol | None" = None,
        enabled: bool | None = None,
        max_attempts: int | None = None,
        decay_seconds: int | None = None,
    ) -> None:
        super().__init__(app)
        self._throttle = throttle
        self._logger = logger
        self._enabled = settings.auth_throttle_enabled if enabled is None else enabled
        self._max_attempts = max_attempts or settings.auth_throttle_max_attempts
        self._decay_seconds = decay_seconds or settings.auth_throttle_decay_seconds

    def _get_throttle(self) -> "ThrottleProtocol":
        if self._throttle is None:
            from src.core.container import get_throttle

            self._throttle = get_throttle()
        return self._throttle

    def _get_logger(self) -> "LoggerProtocol":
        if self._logger is None:
            from src.core.container import get_logger

            self._logger = get_logger()
        return self._logger

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if not self._enabled:
            return await call_next(request)

        route = match_throttled_route(request.method, request.url.path)
        if route is None:
            return await call_next(request)

        client_ip = self._get_client_ip(request)
        key = f"{request.method} {route}:{client_ip}"

        try:
            result = await self._get_throttle().hit(
                key=key,
                max_attempts=self._max_attempts,
                decay_seconds=self._decay_seconds,
            )
        except Exception as exc:
            self._log_fail_open(key, error=str(exc))
            return await call_next(request)

        match result:
            case Success(value=outcome):
                if not outcome.allowed:
                    return self._build_429_response(
                        retry_after=outcome.retry_after,
                        limit=outcome.limit,
                    )
                response = await call_next(request)
                response.headers["X-RateLimit-Limit"] = str(outcome.limit)
                response.headers["X-RateLimit-Remaining"] = str(outcome.remaining)
                return response
            case _:
                self._log_fail_open(key, error="throttle_result_failure")
                return await call_next(request)

    def _get_client_ip(self, request: Request) -> str:
        """Client IP, honouring X-Forwarded-For / X-Real-IP from a proxy."""
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip.strip()

        if request.client:
            return request.client.host

        return "unknown"

    def _build_429_response(self, *, retry_after: int, limit: int) -> JSONResponse:
        retry_after = max(1, retry_after)
        return JSONResponse(
            status_code=429,
            content={"message": TOO_MANY_ATTEMPTS_MESSAGE},
            headers={
                "Retry-After": str(retry_after),
                "X-RateLimit-Limit": str(limit),
                "X-RateLimit-Remaining": "0",
            },
        )

    def _log_fail_open(self, key: str, *, error: str) -> None:
        self._get_logger().warning(
            "throttle_fail_open",
            key=key,
            error=error,
        )
