"""Domain event handlers (infrastructure subscribers).

- LoggingEventHandler: structured log line for every authentication event
- EmailEventHandler: verification and password-changed emails
"""

from src.infrastructure.events.handlers.email_event_handler import EmailEventHandler
from src.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = [
    "EmailEventHandler",
    "LoggingEventHandler",
]
