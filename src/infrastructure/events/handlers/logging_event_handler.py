"""Logging event handler for domain events.

Structured logging for every authentication event. One generic handle()
method is subscribed to all of AUTH_EVENTS by the container.

Log Levels:
    - INFO: ...Attempted and ...Succeeded events (normal operations)
    - WARNING: ...Failed events (operational issues requiring attention)

Structured Fields:
    - event (message): snake_case event name, e.g. "user_login_failed"
    - event_id: UUID for correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - every payload field of the event (user_id, email, reason, ...)

Events never carry passwords or plaintext tokens, so every field is safe
to log.
"""

import re
from dataclasses import fields
from typing import Any
from uuid import UUID

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.logger_protocol import LoggerProtocol

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def event_log_name(event_type: type[DomainEvent]) -> str:
    """Convert an event class name to its log message.

    Example:
        >>> event_log_name(UserLoginFailed)
        'user_login_failed'
    """
    return _CAMEL_BOUNDARY.sub("_", event_type.__name__).lower()


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> event_bus.subscribe(UserRegistrationSucceeded, handler.handle)
        >>> # Log output: {"event": "user_registration_succeeded", "user_id": "...", ...}
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    async def handle(self, event: DomainEvent) -> None:
        """Log any domain event at the level matching its outcome."""
        name = event_log_name(type(event))
        payload = {f.name: _serialize(getattr(event, f.name)) for f in fields(event)}

        if type(event).__name__.endswith("Failed"):
            self._logger.warning(name, **payload)
        else:
            self._logger.info(name, **payload)


def _serialize(value: Any) -> Any:
    if isinstance(value, UUID):
        return str(value)
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value
