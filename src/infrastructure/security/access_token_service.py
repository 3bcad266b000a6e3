"""Personal access token service.

Implements AccessTokenServiceProtocol.

Token Strategy:
    - Plaintext format "<token id>|<40 random characters>"
    - Only the sha256 hex digest of the random part is stored
    - Lookup by token id, then constant-time digest comparison
    - No expiry; tokens live until logout
"""

import hashlib
import hmac
import secrets
import string
from uuid import UUID

SECRET_LENGTH = 40
SEPARATOR = "|"
_SECRET_ALPHABET = string.ascii_letters + string.digits


class AccessTokenService:
    """Opaque bearer token minting and verification.

    Usage:
        service = AccessTokenService()
        secret, secret_hash = service.generate_secret()
        await token_repo.save(token_id=token_id, user_id=user_id, token_hash=secret_hash)
        plain_text = service.format_plain_text(token_id, secret)
    """

    def generate_secret(self) -> tuple[str, str]:
        """Generate a random secret and its sha256 digest.

        Returns:
            Tuple of (secret, secret_hash).
        """
        secret = "".join(secrets.choice(_SECRET_ALPHABET) for _ in range(SECRET_LENGTH))
        return secret, self.hash_secret(secret)

    def hash_secret(self, secret: str) -> str:
        return hashlib.sha256(secret.encode("utf-8")).hexdigest()

    def format_plain_text(self, token_id: UUID, secret: str) -> str:
        return f"{token_id}{SEPARATOR}{secret}"

    def parse_plain_text(self, plain_text: str) -> tuple[UUID, str] | None:
        """Split "<id>|<secret>".

        Returns:
            (token_id, secret), or None if the id is not a UUID or the
            secret is missing.
        """
        token_id, sep, secret = plain_text.strip().partition(SEPARATOR)
        if not sep or not secret:
            return None
        try:
            return UUID(token_id), secret
        except ValueError:
            return None

    def verify_secret(self, secret: str, secret_hash: str) -> bool:
        """Compare sha256(secret) with the stored digest in constant time."""
        return hmac.compare_digest(
            self.hash_secret(secret).encode(), secret_hash.encode("utf-8")
        )
