"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: in-process event bus with fail-open behavior

Event Handlers:
    - LoggingEventHandler: Structured logging for all domain events
    - EmailEventHandler: Verification and password changed emails

Usage:
    >>> from src.infrastructure.events import InMemoryEventBus
    >>> from src.infrastructure.events.handlers import LoggingEventHandler
    >>>
    >>> event_bus = InMemoryEventBus(logger=logger)
    >>> logging_handler = LoggingEventHandler(logger=logger)
    >>> event_bus.subscribe(UserRegistrationSucceeded, logging_handler.handle)
"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
