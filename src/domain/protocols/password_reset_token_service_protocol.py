"""PasswordResetTokenServiceProtocol - reset token generation and checks.

Owns the token format, its hashing, and the two time windows:
    - throttle: a new request is refused while the previous one is younger
    - expiry: a token is refused once its record is older
"""

from datetime import datetime
from typing import Protocol


class PasswordResetTokenServiceProtocol(Protocol):
    """Protocol for password reset token handling.

    Implementations:
        - PasswordResetTokenService: src/infrastructure/security/password_reset_token_service.py
    """

    def generate_token(self) -> str:
        """Generate an unguessable reset token.

        Returns:
            64-character hex string.
        """
        ...

    def hash_token(self, token: str) -> str:
        """Hash a token for storage.

        Args:
            token: Plaintext reset token.

        Returns:
            Token hash.
        """
        ...

    def verify_token(self, token: str, token_hash: str) -> bool:
        """Check a presented token against the stored hash.

        Args:
            token: Presented token.
            token_hash: Stored hash.

        Returns:
            True if the token matches.
        """
        ...

    def is_throttled(self, created_at: datetime, now: datetime | None = None) -> bool:
        """Check whether a previous request is too recent to allow a new one.

        Args:
            created_at: Timestamp of the existing record.
            now: Reference time (defaults to current UTC time).

        Returns:
            True if the new request must be refused.
        """
        ...

    def is_expired(self, created_at: datetime, now: datetime | None = None) -> bool:
        """Check whether a record is past its lifetime.

        Args:
            created_at: Timestamp of the record.
            now: Reference time (defaults to current UTC time).

        Returns:
            True if the token must be refused.
        """
        ...
