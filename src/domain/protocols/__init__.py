"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
Do NOT re-export from other domain subpackages (events, entities) to avoid
circular import risks.

Usage:
    from src.domain.protocols import AccountRepository, PasswordHashingProtocol
"""

# Service protocols
from src.domain.protocols.access_token_service_protocol import (
    AccessTokenServiceProtocol,
)
from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.link_signer_protocol import LinkSignerProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notifier_protocol import NotifierProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.password_reset_token_service_protocol import (
    PasswordResetTokenServiceProtocol,
)
from src.domain.protocols.throttle_protocol import ThrottleProtocol, ThrottleResult

# Repository protocols
from src.domain.protocols.access_token_repository import (
    AccessTokenData,
    AccessTokenRepository,
)
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.password_reset_repository import (
    PasswordResetData,
    PasswordResetRepository,
)

__all__ = [
    # Service protocols
    "AccessTokenServiceProtocol",
    "EmailProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LinkSignerProtocol",
    "LoggerProtocol",
    "NotifierProtocol",
    "PasswordHashingProtocol",
    "PasswordResetTokenServiceProtocol",
    "ThrottleProtocol",
    "ThrottleResult",
    # Repository protocols
    "AccessTokenData",
    "AccessTokenRepository",
    "AccountRepository",
    "PasswordResetData",
    "PasswordResetRepository",
]
