"""
Main FastAPI application entry point.

Wires middleware (trace first, then throttle), global exception handlers
and the routers. Schema changes are applied with Alembic, never at startup.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.presentation.routers import system_router
from src.presentation.routers.api import auth_router, profile_router
from src.presentation.routers.api.errors import register_exception_handlers
from src.presentation.routers.api.middleware.throttle_middleware import (
    ThrottleMiddleware,
)
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: log configuration summary
    - Shutdown: dispose the database engine and the Redis pool
    """
    from src.core.container import get_database, get_logger, get_redis

    logger = get_logger()
    logger.info(
        "application_starting",
        environment=settings.environment.value,
        version=settings.app_version,
        throttle_enabled=settings.auth_throttle_enabled,
    )

    yield

    await get_database().close()
    await get_redis().aclose()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Account registration, email verification and token authentication",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Starlette runs the last added middleware first: trace wraps throttle
app.add_middleware(ThrottleMiddleware)
app.add_middleware(TraceMiddleware)

register_exception_handlers(app)

app.include_router(system_router)
app.include_router(auth_router)
app.include_router(profile_router)
