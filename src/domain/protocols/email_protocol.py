"""EmailProtocol - Port for email service implementations.

Infrastructure layer provides concrete implementations (StubEmailService).
"""

from typing import Protocol


class EmailProtocol(Protocol):
    """Email service protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.
    """

    async def send_verification_email(
        self,
        to_email: str,
        verification_url: str,
    ) -> None:
        """Send email verification link to user.

        Args:
            to_email: Recipient email address.
            verification_url: Frontend URL embedding the signed verification path.
        """
        ...

    async def send_password_reset_email(
        self,
        to_email: str,
        reset_url: str,
    ) -> None:
        """Send password reset link to user.

        Args:
            to_email: Recipient email address.
            reset_url: Frontend URL with token and email query parameters.
        """
        ...

    async def send_password_changed_notification(
        self,
        to_email: str,
    ) -> None:
        """Send notification that password was changed.

        Args:
            to_email: Recipient email address.
        """
        ...
