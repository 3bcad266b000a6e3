"""NotifierProtocol - account notifications with embedded links.

The notifier knows how to build verification and reset links; the email
service only knows how to deliver them.
"""

from typing import Protocol
from uuid import UUID


class NotifierProtocol(Protocol):
    """Account notification interface.

    Implementations:
        - AccountNotifier: src/infrastructure/email/account_notifier.py
    """

    async def send_verification(self, account_id: UUID, email: str) -> None:
        """Send a verification message with a fresh signed link.

        Args:
            account_id: Account to verify.
            email: Current email (bound into the link via sha1).
        """
        ...

    async def send_password_reset(self, email: str, token: str) -> None:
        """Send a password reset link.

        Args:
            email: Recipient email.
            token: Plaintext reset token (embedded in the link only).
        """
        ...

    async def send_password_changed(self, email: str) -> None:
        """Send a password changed notice.

        Args:
            email: Recipient email.
        """
        ...
