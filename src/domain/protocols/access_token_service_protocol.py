"""AccessTokenServiceProtocol - minting and checking opaque bearer tokens.

Plaintext format: ``"<token id>|<random secret>"``. The token id locates the
stored row, the secret is compared against its stored sha256 digest.
"""

from typing import Protocol
from uuid import UUID


class AccessTokenServiceProtocol(Protocol):
    """Protocol for bearer token generation and verification.

    Implementations:
        - AccessTokenService: src/infrastructure/security/access_token_service.py
    """

    def generate_secret(self) -> tuple[str, str]:
        """Generate a random secret and its digest.

        Returns:
            Tuple of (secret, secret_hash). Store the hash, hand out the secret.
        """
        ...

    def format_plain_text(self, token_id: UUID, secret: str) -> str:
        """Build the plaintext bearer token returned to the client once.

        Args:
            token_id: Stored token identifier.
            secret: Random secret from generate_secret().

        Returns:
            Plaintext token.
        """
        ...

    def parse_plain_text(self, plain_text: str) -> tuple[UUID, str] | None:
        """Split a presented bearer token.

        Args:
            plain_text: Token from the Authorization header.

        Returns:
            (token_id, secret) or None if the token is malformed.
        """
        ...

    def verify_secret(self, secret: str, secret_hash: str) -> bool:
        """Compare a presented secret with the stored digest (constant time).

        Args:
            secret: Secret part of the presented token.
            secret_hash: Stored digest.

        Returns:
            True if they match.
        """
        ...
