"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
- Use Annotated types for validation (DRY principle)
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.types import Email, Name, Password, ResetToken


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new account.

    Creates an unverified account and triggers the verification email.
    The account cannot log in until the email is verified.

    Attributes:
        name: Display name.
        email: Email address (validated, normalized).
        password: Plain text password (hashed before storage).

    Example:
        >>> command = RegisterUser(
        ...     name="Jane",
        ...     email="jane@example.com",
        ...     password="secret-password",
        ... )
        >>> result = await handler.handle(command)
    """

    name: Name
    email: Email
    password: Password


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Confirm an email address from a signed verification link.

    The link signature and expiry are checked by the presentation layer
    before this command is built.

    Attributes:
        account_id: Account ID from the link path.
        email_hash: sha1 hex of the email the link was issued for.
    """

    account_id: UUID
    email_hash: str


@dataclass(frozen=True, kw_only=True)
class ResendVerificationEmail:
    """Send a fresh verification link to an unverified account."""

    email: Email


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Exchange credentials for a bearer token.

    Attributes:
        email: Email address.
        password: Plain text password.
    """

    email: Email
    password: str


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """Revoke every bearer token of the authenticated account.

    Attributes:
        account_id: Account resolved from the bearer token.
    """

    account_id: UUID


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Start the forgot-password flow.

    Attributes:
        email: Email address of the account.
    """

    email: Email


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Set a new password using a reset token.

    Attributes:
        email: Email address of the account.
        password: New plain text password (confirmation already checked).
        token: Plaintext token from the reset link.
    """

    email: Email
    password: Password
    token: ResetToken
