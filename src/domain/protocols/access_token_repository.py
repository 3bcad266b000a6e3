"""AccessTokenRepository protocol (port) for bearer token persistence.

Together with AccessTokenServiceProtocol this forms the token issuer:
the service mints and checks secrets, the repository stores their hashes.

Token Lifecycle:
    1. Created on successful login (one row per login)
    2. Resolved on every authenticated request (last_used_at updated)
    3. Deleted all at once on logout (no single-device revocation)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass
class AccessTokenData:
    """Data transfer object for a stored access token.

    The plaintext secret is never stored; only its sha256 digest.
    """

    id: UUID
    user_id: UUID
    name: str
    token_hash: str
    last_used_at: datetime | None
    created_at: datetime | None


class AccessTokenRepository(Protocol):
    """Protocol for access token persistence operations.

    Implementations:
        - PersonalAccessTokenRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def save(
        self,
        token_id: UUID,
        user_id: UUID,
        token_hash: str,
        name: str = "auth-token",
    ) -> AccessTokenData:
        """Store a freshly minted token.

        Args:
            token_id: Token identifier (embedded in the plaintext token).
            user_id: Owning account.
            token_hash: sha256 hex digest of the secret part.
            name: Token label.

        Returns:
            Stored AccessTokenData.
        """
        ...

    async def find_by_id(self, token_id: UUID) -> AccessTokenData | None:
        """Find token by ID.

        Args:
            token_id: Token identifier.

        Returns:
            AccessTokenData if found, None otherwise.
        """
        ...

    async def touch(self, token_id: UUID, used_at: datetime) -> None:
        """Record token usage.

        Args:
            token_id: Token identifier.
            used_at: Usage timestamp (UTC).
        """
        ...

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every token of an account.

        Args:
            user_id: Owning account.

        Returns:
            Number of tokens deleted.
        """
        ...

    async def count_for_user(self, user_id: UUID) -> int:
        """Count live tokens of an account.

        Args:
            user_id: Owning account.

        Returns:
            Number of stored tokens.
        """
        ...
