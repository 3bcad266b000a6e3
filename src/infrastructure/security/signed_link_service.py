"""HMAC signed link service.

Implements LinkSignerProtocol on top of itsdangerous. Signed links are
stateless: nothing is stored, validity is the signature plus the expiry
timestamp.

Format:
    <path>?expires=<unix ts>&signature=<urlsafe base64>
    signature = Signer(app_key, salt="verify-email", sha256) over "<path>?expires=<unix ts>"
"""

import hashlib
from datetime import UTC, datetime, timedelta

from itsdangerous import Signer

LINK_SALT = "verify-email"


class HmacLinkSigner:
    """Sign and verify relative URLs with an itsdangerous HMAC-SHA256 signer.

    Usage:
        signer = HmacLinkSigner(secret_key=settings.app_key, expire_minutes=60)
        url = signer.sign(f"/auth/verify-email/{account.id}/{account.verification_hash()}")
        signer.verify(request.url.path, expires, signature)  # True
    """

    def __init__(self, secret_key: str, expire_minutes: int = 60) -> None:
        """Initialize link signer.

        Args:
            secret_key: Application key used as the HMAC key.
            expire_minutes: Default link lifetime.
        """
        self._signer = Signer(
            secret_key,
            salt=LINK_SALT,
            key_derivation="hmac",
            digest_method=hashlib.sha256,
        )
        self._lifetime = timedelta(minutes=expire_minutes)

    def sign(self, path: str, expires_at: datetime | None = None) -> str:
        """Sign a relative path.

        Args:
            path: Relative path.
            expires_at: Expiry (defaults to now + configured lifetime).

        Returns:
            Path with expires and signature query parameters.
        """
        expiry = expires_at or datetime.now(UTC) + self._lifetime
        expires = int(expiry.timestamp())
        signature = self._signer.get_signature(_payload(path, expires)).decode("ascii")
        return f"{path}?expires={expires}&signature={signature}"

    def verify(
        self,
        path: str,
        expires: int | None,
        signature: str | None,
        now: datetime | None = None,
    ) -> bool:
        """Check signature (constant time) and expiry.

        Returns:
            False when either parameter is missing, the signature does not
            match, or the expiry is in the past.
        """
        if expires is None or not signature:
            return False
        if not self._signer.verify_signature(_payload(path, expires), signature):
            return False
        current = now or datetime.now(UTC)
        return expires >= int(current.timestamp())


def _payload(path: str, expires: int) -> str:
    return f"{path}?expires={expires}"
