"""Domain events module.

Usage:
    from src.domain.events import DomainEvent, UserRegistrationSucceeded

    await event_bus.publish(
        UserRegistrationSucceeded(user_id=account.id, email=account.email)
    )
"""

from src.domain.events.auth_events import (
    AUTH_EVENTS,
    EmailVerificationAttempted,
    EmailVerificationFailed,
    EmailVerificationSucceeded,
    PasswordResetAttempted,
    PasswordResetFailed,
    PasswordResetRequestAttempted,
    PasswordResetRequestFailed,
    PasswordResetRequestSucceeded,
    PasswordResetSucceeded,
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
    UserLogoutAttempted,
    UserLogoutFailed,
    UserLogoutSucceeded,
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
    VerificationEmailResendAttempted,
    VerificationEmailResendFailed,
    VerificationEmailResendSucceeded,
)
from src.domain.events.base_event import DomainEvent

__all__ = [
    "AUTH_EVENTS",
    "DomainEvent",
    "EmailVerificationAttempted",
    "EmailVerificationFailed",
    "EmailVerificationSucceeded",
    "PasswordResetAttempted",
    "PasswordResetFailed",
    "PasswordResetRequestAttempted",
    "PasswordResetRequestFailed",
    "PasswordResetRequestSucceeded",
    "PasswordResetSucceeded",
    "UserLoginAttempted",
    "UserLoginFailed",
    "UserLoginSucceeded",
    "UserLogoutAttempted",
    "UserLogoutFailed",
    "UserLogoutSucceeded",
    "UserRegistrationAttempted",
    "UserRegistrationFailed",
    "UserRegistrationSucceeded",
    "VerificationEmailResendAttempted",
    "VerificationEmailResendFailed",
    "VerificationEmailResendSucceeded",
]
