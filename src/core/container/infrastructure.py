"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL)
- Redis client and route throttle
- Password hashing (bcrypt)
- Access tokens, signed links, reset tokens
- Email (stub) and account notifier
- Logging (structlog console)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from src.domain.protocols import (
        AccessTokenServiceProtocol,
        EmailProtocol,
        LinkSignerProtocol,
        LoggerProtocol,
        NotifierProtocol,
        PasswordHashingProtocol,
        PasswordResetTokenServiceProtocol,
        ThrottleProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_redis() -> "Redis":
    """Get shared async Redis client (app-scoped, pooled)."""
    from redis.asyncio import ConnectionPool, Redis

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=20,
        decode_responses=False,
        socket_connect_timeout=2,
        socket_timeout=2,
        retry_on_timeout=True,
    )
    return Redis(connection_pool=pool)


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception.

    Usage:
        @router.post("/auth/login")
        async def login(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (bcrypt, configured rounds)."""
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_access_token_service() -> "AccessTokenServiceProtocol":
    from src.infrastructure.security import AccessTokenService

    return AccessTokenService()


@lru_cache()
def get_link_signer() -> "LinkSignerProtocol":
    """Get signed link service singleton (itsdangerous signer keyed by app_key)."""
    from src.infrastructure.security import HmacLinkSigner

    return HmacLinkSigner(
        secret_key=settings.app_key,
        expire_minutes=settings.verification_expire_minutes,
    )


@lru_cache()
def get_password_reset_token_service() -> "PasswordResetTokenServiceProtocol":
    from src.infrastructure.security import PasswordResetTokenService

    return PasswordResetTokenService(
        expire_minutes=settings.password_reset_expire_minutes,
        throttle_seconds=settings.password_reset_throttle_seconds,
        cost_factor=settings.bcrypt_rounds,
    )


# ============================================================================
# Email (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Every environment uses StubEmailService until a delivery adapter exists.
    """
    from src.infrastructure.email import StubEmailService

    return StubEmailService(logger=get_logger())


@lru_cache()
def get_notifier() -> "NotifierProtocol":
    """Get account notifier singleton (builds links, sends via email service)."""
    from src.infrastructure.email import AccountNotifier

    return AccountNotifier(
        email_service=get_email_service(),
        link_signer=get_link_signer(),
        frontend_url=settings.frontend_url,
        verify_email_path=settings.frontend_email_verify_url,
        reset_password_path=settings.frontend_reset_password_url,
    )


# ============================================================================
# Throttling (Application-Scoped)
# ============================================================================


@lru_cache()
def get_throttle() -> "ThrottleProtocol":
    """Get route throttle singleton.

    Fail-Open Design:
        Redis failures allow the request. Throttling should NEVER cause
        denial of service.
    """
    from src.infrastructure.rate_limit import RedisThrottle

    return RedisThrottle(redis_client=get_redis(), logger=get_logger())


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
