"""Request throttling adapters."""

from src.infrastructure.rate_limit.redis_throttle import RedisThrottle, ThrottleError

__all__ = [
    "RedisThrottle",
    "ThrottleError",
]
