"""Authentication domain events.

Seven workflows, three events each (ATTEMPTED, SUCCEEDED, FAILED):

    Registration:              UserRegistration*
    Email verification:        EmailVerification*
    Resend verification email: VerificationEmailResend*
    Login:                     UserLogin*
    Logout:                    UserLogout*
    Forgot password:           PasswordResetRequest*
    Reset password:            PasswordReset*

Subscribers:
    - LoggingEventHandler: every event (INFO for attempts/successes, WARNING for failures)
    - EmailEventHandler: UserRegistrationSucceeded (verification email),
      PasswordResetSucceeded (password changed notice)
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent

# =============================================================================
# Registration
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class UserRegistrationAttempted(DomainEvent):
    """User registration attempt initiated.

    Attributes:
        email: Email address attempted.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class UserRegistrationSucceeded(DomainEvent):
    """Account created in unverified state.

    Triggers the verification email.

    Attributes:
        user_id: ID of the new account.
        email: Email address the verification link is bound to.
    """

    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class UserRegistrationFailed(DomainEvent):
    """User registration failed.

    Attributes:
        email: Email address attempted.
        reason: Failure reason (e.g., "email_taken", "registration_failed").
    """

    email: str
    reason: str


# =============================================================================
# Email verification
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class EmailVerificationAttempted(DomainEvent):
    """Verification link followed.

    Attributes:
        user_id: Account ID embedded in the link.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class EmailVerificationSucceeded(DomainEvent):
    """Account marked as verified.

    Attributes:
        user_id: Verified account ID.
        email: Verified email address.
    """

    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class EmailVerificationFailed(DomainEvent):
    """Verification rejected.

    Attributes:
        user_id: Account ID embedded in the link.
        reason: Failure reason (e.g., "account_not_found", "already_confirmed").
    """

    user_id: UUID
    reason: str


# =============================================================================
# Resend verification email
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class VerificationEmailResendAttempted(DomainEvent):
    """Verification email resend requested.

    Attributes:
        email: Email address attempted.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class VerificationEmailResendSucceeded(DomainEvent):
    """Fresh verification link dispatched.

    Attributes:
        user_id: Account ID.
        email: Recipient address.
    """

    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class VerificationEmailResendFailed(DomainEvent):
    """Verification email resend rejected.

    Attributes:
        email: Email address attempted.
        reason: Failure reason.
    """

    email: str
    reason: str


# =============================================================================
# Login
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class UserLoginAttempted(DomainEvent):
    """User login attempt initiated.

    Attributes:
        email: Email address attempted.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class UserLoginSucceeded(DomainEvent):
    """Access token minted for the account.

    Attributes:
        user_id: Authenticated account ID.
        email: Account email.
        token_id: ID of the minted access token (never the secret).
    """

    user_id: UUID
    email: str
    token_id: UUID


@dataclass(frozen=True, kw_only=True)
class UserLoginFailed(DomainEvent):
    """User login failed.

    Attributes:
        email: Email address attempted.
        reason: Failure reason ("invalid_credentials" or "not_verified").
        user_id: Account ID when the email matched an account.
    """

    email: str
    reason: str
    user_id: UUID | None = None


# =============================================================================
# Logout
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class UserLogoutAttempted(DomainEvent):
    """Logout initiated by an authenticated account.

    Attributes:
        user_id: Account ID.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class UserLogoutSucceeded(DomainEvent):
    """All access tokens of the account deleted.

    Attributes:
        user_id: Account ID.
        revoked_count: Number of tokens deleted.
    """

    user_id: UUID
    revoked_count: int


@dataclass(frozen=True, kw_only=True)
class UserLogoutFailed(DomainEvent):
    """Token revocation raised an infrastructure error.

    Attributes:
        user_id: Account ID.
        reason: Failure reason.
    """

    user_id: UUID
    reason: str


# =============================================================================
# Forgot password
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequestAttempted(DomainEvent):
    """Password reset link requested.

    Attributes:
        email: Email address attempted.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequestSucceeded(DomainEvent):
    """Reset record stored and reset link dispatched.

    Attributes:
        user_id: Account ID.
        email: Recipient address.
    """

    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequestFailed(DomainEvent):
    """Password reset request rejected.

    Attributes:
        email: Email address attempted.
        reason: Failure reason (e.g., "reset_throttled").
    """

    email: str
    reason: str


# =============================================================================
# Reset password
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class PasswordResetAttempted(DomainEvent):
    """Password reset with token submitted.

    Attributes:
        email: Email address attempted.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetSucceeded(DomainEvent):
    """Password replaced, remember token rotated, reset record consumed.

    Attributes:
        user_id: Account ID.
        email: Account email.
    """

    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetFailed(DomainEvent):
    """Password reset rejected.

    Attributes:
        email: Email address attempted.
        reason: Failure reason (e.g., "invalid_token").
    """

    email: str
    reason: str


AUTH_EVENTS: tuple[type[DomainEvent], ...] = (
    UserRegistrationAttempted,
    UserRegistrationSucceeded,
    UserRegistrationFailed,
    EmailVerificationAttempted,
    EmailVerificationSucceeded,
    EmailVerificationFailed,
    VerificationEmailResendAttempted,
    VerificationEmailResendSucceeded,
    VerificationEmailResendFailed,
    UserLoginAttempted,
    UserLoginSucceeded,
    UserLoginFailed,
    UserLogoutAttempted,
    UserLogoutSucceeded,
    UserLogoutFailed,
    PasswordResetRequestAttempted,
    PasswordResetRequestSucceeded,
    PasswordResetRequestFailed,
    PasswordResetAttempted,
    PasswordResetSucceeded,
    PasswordResetFailed,
)
"""Every authentication event, used by the container to wire logging."""
