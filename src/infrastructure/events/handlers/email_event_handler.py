"""Email event handler for domain events.

Sends account emails in reaction to SUCCEEDED events:
    - UserRegistrationSucceeded -> verification email with signed link
    - PasswordResetSucceeded -> "password changed" notice

Resend-verification and forgot-password send their emails directly from
their handlers, since a send failure there is reported to the caller.
Failures here are absorbed by the event bus (fail-open) and logged.
"""

from src.domain.events.auth_events import (
    PasswordResetSucceeded,
    UserRegistrationSucceeded,
)
from src.domain.protocols import LoggerProtocol, NotifierProtocol


class EmailEventHandler:
    """Event handler for account emails.

    Attributes:
        _notifier: Builds links and hands messages to the email service.
        _logger: Logger protocol implementation (from container).

    Example:
        >>> handler = EmailEventHandler(notifier=notifier, logger=get_logger())
        >>> event_bus.subscribe(
        ...     UserRegistrationSucceeded,
        ...     handler.handle_user_registration_succeeded,
        ... )
    """

    def __init__(self, notifier: NotifierProtocol, logger: LoggerProtocol) -> None:
        self._notifier = notifier
        self._logger = logger

    async def handle_user_registration_succeeded(
        self,
        event: UserRegistrationSucceeded,
    ) -> None:
        """Send the verification email after registration.

        Args:
            event: UserRegistrationSucceeded event with user_id and email.
        """
        await self._notifier.send_verification(event.user_id, event.email)
        self._logger.debug(
            "verification_email_dispatched",
            user_id=str(event.user_id),
            event_id=str(event.event_id),
        )

    async def handle_password_reset_succeeded(
        self,
        event: PasswordResetSucceeded,
    ) -> None:
        """Send the password changed notice after a reset.

        Args:
            event: PasswordResetSucceeded event with user_id and email.
        """
        await self._notifier.send_password_changed(event.email)
        self._logger.debug(
            "password_changed_email_dispatched",
            user_id=str(event.user_id),
            event_id=str(event.event_id),
        )
