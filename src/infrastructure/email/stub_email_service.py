"""Stub email service.

Logs the email that would be sent instead of delivering it. Used in every
environment until a delivery adapter (SMTP, SES) is added behind
EmailProtocol.

Links are not logged in full: they carry signatures and reset tokens.
"""

from src.domain.protocols.logger_protocol import LoggerProtocol


class StubEmailService:
    """EmailProtocol implementation that only logs.

    Attributes:
        sent: In-process record of (template, recipient, link) tuples. Lets
            local tooling inspect what would have been delivered.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize stub service.

        Args:
            logger: Logger for email_would_be_sent lines.
        """
        self._logger = logger
        self.sent: list[tuple[str, str, str | None]] = []

    async def send_verification_email(
        self,
        to_email: str,
        verification_url: str,
    ) -> None:
        self._record("verify_email", to_email, verification_url, "Verify Email Address")

    async def send_password_reset_email(
        self,
        to_email: str,
        reset_url: str,
    ) -> None:
        self._record(
            "password_reset_email", to_email, reset_url, "Reset Password Notification"
        )

    async def send_password_changed_notification(self, to_email: str) -> None:
        self._record("password_changed_email", to_email, None, "Your password was changed")

    def _record(
        self,
        template: str,
        recipient: str,
        link: str | None,
        subject: str,
    ) -> None:
        self.sent.append((template, recipient, link))
        self._logger.info(
            "email_would_be_sent",
            template=template,
            recipient=recipient,
            subject=subject,
            has_link=link is not None,
        )
