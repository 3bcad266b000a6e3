"""Account domain entity for authentication.

Pure business logic, no framework dependencies.

Lifecycle:
    - Created unverified by registration (verified_at is None)
    - Verified exactly once (verified_at never reverts to None)
    - Password reset replaces password_hash and rotates remember_token
    - Never deleted by the authentication core
"""

import hashlib
import secrets
import string
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

REMEMBER_TOKEN_LENGTH = 60
_REMEMBER_TOKEN_ALPHABET = string.ascii_letters + string.digits


@dataclass
class Account:
    """Account domain entity with credential lifecycle rules.

    Business Rules:
        - Email verification required before login
        - Verification is monotonic (a verified account stays verified)
        - Verification links are bound to the email via sha1(email)

    Attributes:
        id: Unique account identifier (UUIDv7, assigned at creation)
        name: Display name
        email: Unique email address (primary external handle)
        password_hash: Bcrypt hashed password (never plaintext, never exposed)
        verified_at: Timestamp of email verification (None = unverified)
        remember_token: Opaque rotation value, regenerated on password reset
        created_at: Timestamp when account was created
        updated_at: Timestamp when account was last updated
    """

    id: UUID
    name: str
    email: str
    password_hash: str
    verified_at: datetime | None = None
    remember_token: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_verified(self) -> bool:
        """Check whether the email address has been verified."""
        return self.verified_at is not None

    def verification_hash(self) -> str:
        """Hash embedded in verification links for this account.

        Returns:
            Hex sha1 digest of the current email address.
        """
        return hashlib.sha1(self.email.encode("utf-8")).hexdigest()

    def mark_email_verified(self, now: datetime | None = None) -> bool:
        """Mark the email as verified.

        Args:
            now: Verification timestamp (defaults to current UTC time).

        Returns:
            True if the account transitioned to verified, False if it
            was already verified (verified_at is left untouched).
        """
        if self.verified_at is not None:
            return False
        self.verified_at = now or datetime.now(UTC)
        return True

    def change_password(self, password_hash: str) -> None:
        """Replace the password hash and rotate the remember token.

        Args:
            password_hash: New bcrypt hash.
        """
        self.password_hash = password_hash
        self.remember_token = "".join(
            secrets.choice(_REMEMBER_TOKEN_ALPHABET)
            for _ in range(REMEMBER_TOKEN_LENGTH)
        )
