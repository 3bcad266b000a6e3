"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. All
subscriptions are wired here at first use.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Subscriptions:
        - LoggingEventHandler.handle: every event in AUTH_EVENTS
        - EmailEventHandler: UserRegistrationSucceeded (verification email),
          PasswordResetSucceeded (password changed notice)

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(UserRegistrationSucceeded(...))
    """
    from src.core.container.infrastructure import get_logger, get_notifier
    from src.domain.events.auth_events import (
        AUTH_EVENTS,
        PasswordResetSucceeded,
        UserRegistrationSucceeded,
    )
    from src.infrastructure.events.handlers import (
        EmailEventHandler,
        LoggingEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    event_bus = InMemoryEventBus(logger=get_logger())

    logging_handler = LoggingEventHandler(logger=get_logger())
    for event_type in AUTH_EVENTS:
        event_bus.subscribe(event_type, logging_handler.handle)

    email_handler = EmailEventHandler(notifier=get_notifier(), logger=get_logger())
    event_bus.subscribe(
        UserRegistrationSucceeded,
        email_handler.handle_user_registration_succeeded,
    )
    event_bus.subscribe(
        PasswordResetSucceeded,
        email_handler.handle_password_reset_succeeded,
    )

    return event_bus
