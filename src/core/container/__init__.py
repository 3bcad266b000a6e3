"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from src.core.container import get_logger, get_login_user_handler

Modules:
- infrastructure: Core services (database, redis, security, email, logging)
- events: Event bus and subscriptions
- auth_handlers: Request-scoped authentication handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_access_token_service,
    get_database,
    get_db_session,
    get_email_service,
    get_link_signer,
    get_logger,
    get_notifier,
    get_password_reset_token_service,
    get_password_service,
    get_redis,
    get_throttle,
)

# Event bus
from src.core.container.events import get_event_bus

# Auth handlers
from src.core.container.auth_handlers import (
    get_login_user_handler,
    get_logout_user_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_resend_verification_email_handler,
    get_reset_password_handler,
    get_resolve_access_token_handler,
    get_verify_email_handler,
)

__all__ = [
    # Infrastructure
    "get_access_token_service",
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_link_signer",
    "get_logger",
    "get_notifier",
    "get_password_reset_token_service",
    "get_password_service",
    "get_redis",
    "get_throttle",
    # Events
    "get_event_bus",
    # Auth handlers
    "get_login_user_handler",
    "get_logout_user_handler",
    "get_register_user_handler",
    "get_request_password_reset_handler",
    "get_resend_verification_email_handler",
    "get_reset_password_handler",
    "get_resolve_access_token_handler",
    "get_verify_email_handler",
]
