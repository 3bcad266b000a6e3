"""Event bus protocol (port) for domain event publishing.

Handlers publish facts about the account lifecycle; subscribers (logging,
email) react without the handlers knowing about them.

Usage:
    event_bus.subscribe(
        UserRegistrationSucceeded,
        email_handler.handle_user_registration_succeeded,
    )
    await event_bus.publish(
        UserRegistrationSucceeded(user_id=account.id, email=account.email)
    )
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async callable receiving one event and returning None."""


class EventBusProtocol(Protocol):
    """Protocol for domain event publishing.

    Implementations:
        - InMemoryEventBus: dictionary registry, asyncio.gather, fail-open

    Design Decisions:
        - **Fail-open**: A failing subscriber never fails the publisher
        - **Type-based routing**: Exact event type match, no inheritance
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register an async handler for an event type.

        Args:
            event_type: Event class to handle.
            handler: Async function called with each published event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all handlers registered for type(event).

        Args:
            event: Domain event instance.

        Notes:
            - No handlers registered is a no-op
            - Handler exceptions are logged, never propagated
        """
        ...
