"""LinkSignerProtocol - stateless signed, time-limited URLs.

A signed link carries ``expires`` (unix timestamp) and ``signature`` query
parameters. Validity is cryptographic signature plus expiry, never database
state.
"""

from datetime import datetime
from typing import Protocol


class LinkSignerProtocol(Protocol):
    """Protocol for signing and verifying relative URLs.

    Implementations:
        - HmacLinkSigner: itsdangerous HMAC-SHA256 signer over path and expiry
    """

    def sign(self, path: str, expires_at: datetime | None = None) -> str:
        """Sign a relative path.

        Args:
            path: Relative path (e.g., "/auth/verify-email/<id>/<hash>").
            expires_at: Expiry (defaults to now + configured lifetime).

        Returns:
            Relative URL with expires and signature query parameters.
        """
        ...

    def verify(
        self,
        path: str,
        expires: int | None,
        signature: str | None,
        now: datetime | None = None,
    ) -> bool:
        """Check a signature and its expiry.

        Args:
            path: Relative path as requested.
            expires: ``expires`` query parameter.
            signature: ``signature`` query parameter.
            now: Reference time (defaults to current UTC time).

        Returns:
            True if the signature matches and has not expired.
        """
        ...
