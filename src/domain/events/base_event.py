"""Base domain event class.

Domain events are immutable records of things that happened in the account
lifecycle. Names are past tense and every workflow publishes three of them:
``...Attempted`` before the operation, then ``...Succeeded`` or ``...Failed``.

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    ... class UserLogoutSucceeded(DomainEvent):
    ...     user_id: UUID
    >>>
    >>> event = UserLogoutSucceeded(user_id=account.id)
    >>> event.event_id      # auto-generated UUID
    >>> event.occurred_at   # auto-generated UTC timestamp
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (UserRegistrationSucceeded, NOT RegisterUser)
        3. Be frozen dataclasses with kw_only=True
        4. Carry only the data handlers need (never passwords or raw tokens)

    Attributes:
        event_id: Unique identifier for this event instance (UUID v4).
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
