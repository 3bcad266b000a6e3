"""Password reset token service.

Implements PasswordResetTokenServiceProtocol.

Token Strategy:
    - 32-byte random hex string (64 characters), sent in the reset link only
    - Stored bcrypt-hashed (one live record per email)
    - Throttle window: a new request within N seconds of the last is refused
    - Expiry: the record is refused after N minutes
"""

import secrets
from datetime import UTC, datetime, timedelta

import bcrypt

TOKEN_BYTES = 32


class PasswordResetTokenService:
    """Password reset token generation, hashing and time windows.

    Usage:
        service = PasswordResetTokenService(
            expire_minutes=60,
            throttle_seconds=60,
        )
        token = service.generate_token()
        await reset_repo.replace(
            email=email,
            token_hash=service.hash_token(token),
            created_at=datetime.now(UTC),
        )
    """

    def __init__(
        self,
        expire_minutes: int = 60,
        throttle_seconds: int = 60,
        cost_factor: int = 12,
    ) -> None:
        """Initialize password reset token service.

        Args:
            expire_minutes: Record lifetime in minutes.
            throttle_seconds: Minimum age of the previous record before a new
                request is accepted.
            cost_factor: Bcrypt cost factor for token hashing.
        """
        self._expire = timedelta(minutes=expire_minutes)
        self._throttle = timedelta(seconds=throttle_seconds)
        self._cost_factor = cost_factor

    def generate_token(self) -> str:
        """Generate password reset token.

        Returns:
            64-character hex string (32 bytes of entropy).
        """
        return secrets.token_hex(TOKEN_BYTES)

    def hash_token(self, token: str) -> str:
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(token.encode("utf-8"), salt).decode("utf-8")

    def verify_token(self, token: str, token_hash: str) -> bool:
        """Verify token against stored hash.

        Returns:
            True if token matches hash, False otherwise (including a
            malformed hash).
        """
        try:
            return bcrypt.checkpw(token.encode("utf-8"), token_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            return False

    def is_throttled(self, created_at: datetime, now: datetime | None = None) -> bool:
        if self._throttle <= timedelta(0):
            return False
        return _as_utc(created_at) + self._throttle > (now or datetime.now(UTC))

    def is_expired(self, created_at: datetime, now: datetime | None = None) -> bool:
        return _as_utc(created_at) + self._expire < (now or datetime.now(UTC))


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps from the database are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
