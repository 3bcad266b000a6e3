"""Redis fixed-window throttle.

Implements ThrottleProtocol with one pipelined round trip per hit:

    INCR  <key>                 -> hits in the current window
    EXPIRE <key> <decay> NX     -> window starts on the first hit
    TTL   <key>                 -> seconds until the window resets

Fail-open policy:
    Redis errors return Success(allowed=True) and log a warning. The
    throttle must never turn an outage into a denial of service.
"""

from __future__ import annotations

from typing import Any

from redis.exceptions import RedisError

from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.throttle_protocol import ThrottleResult


class ThrottleError:
    """Throttle error reasons."""

    UNEXPECTED = "throttle_unexpected_error"


class RedisThrottle:
    """Fixed-window throttle backed by Redis counters.

    Args:
        redis_client: An async Redis client (redis.asyncio.Redis compatible).
        logger: Logger for fail-open warnings.
        key_prefix: Namespace for throttle keys.
    """

    def __init__(
        self,
        *,
        redis_client: Any,
        logger: LoggerProtocol,
        key_prefix: str = "throttle",
    ) -> None:
        self._redis = redis_client
        self._logger = logger
        self._prefix = key_prefix

    async def hit(
        self,
        *,
        key: str,
        max_attempts: int,
        decay_seconds: int,
    ) -> Result[ThrottleResult, str]:
        """Count a hit against key and decide whether it is allowed.

        Args:
            key: Throttle key without prefix ("POST /auth/login:203.0.113.7").
            max_attempts: Maximum hits per window.
            decay_seconds: Window length.

        Returns:
            Success(ThrottleResult). Failure only for non-Redis errors.
        """
        full_key = f"{self._prefix}:{key}"
        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                pipe.incr(full_key)
                pipe.expire(full_key, decay_seconds, nx=True)
                pipe.ttl(full_key)
                hits, _, ttl = await pipe.execute()
        except RedisError as exc:
            self._logger.warning(
                "throttle_fail_open",
                key=full_key,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            return Success(
                value=ThrottleResult(
                    allowed=True,
                    limit=max_attempts,
                    remaining=max_attempts,
                )
            )
        except Exception as exc:
            self._logger.error("throttle_unexpected_error", error=exc, key=full_key)
            return Failure(error=ThrottleError.UNEXPECTED)

        hits = int(hits)
        retry_after = int(ttl) if ttl and int(ttl) > 0 else decay_seconds
        allowed = hits <= max_attempts
        return Success(
            value=ThrottleResult(
                allowed=allowed,
                limit=max_attempts,
                remaining=max(max_attempts - hits, 0),
                retry_after=0 if allowed else retry_after,
            )
        )
