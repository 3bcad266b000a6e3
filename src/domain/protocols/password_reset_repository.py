"""PasswordResetRepository protocol (port) for password reset records.

At most one live record exists per email. A new request replaces the old
record; a successful reset deletes it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass
class PasswordResetData:
    """Data transfer object for a stored password reset request.

    The plaintext token is never stored; only its bcrypt hash.
    """

    email: str
    token_hash: str
    created_at: datetime


class PasswordResetRepository(Protocol):
    """Protocol for password reset record persistence.

    Implementations:
        - PasswordResetRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def find_by_email(self, email: str) -> PasswordResetData | None:
        """Find the live reset record for an email.

        Args:
            email: Account email.

        Returns:
            PasswordResetData if a record exists, None otherwise.
        """
        ...

    async def replace(
        self,
        email: str,
        token_hash: str,
        created_at: datetime,
    ) -> PasswordResetData:
        """Create the record for an email, superseding any previous one.

        Args:
            email: Account email.
            token_hash: Hash of the new reset token.
            created_at: Request timestamp (UTC), drives throttle and expiry.

        Returns:
            Stored PasswordResetData.
        """
        ...

    async def delete(self, email: str) -> None:
        """Delete the record for an email (no-op if absent).

        Args:
            email: Account email.
        """
        ...
