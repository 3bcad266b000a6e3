"""Resend verification email handler.

Flow:
1. Emit VerificationEmailResendAttempted event
2. Find account by email
3. Reject if already verified
4. Send a new verification link (fresh signature and expiry)
5. Emit VerificationEmailResendSucceeded event

Request rate is limited at the HTTP boundary (throttle middleware), not here.
"""

from uuid import UUID

from src.application.commands.auth_commands import ResendVerificationEmail
from src.application.commands.handlers.verify_email_handler import VerificationError
from src.core.result import Failure, Result, Success
from src.domain.events.auth_events import (
    VerificationEmailResendAttempted,
    VerificationEmailResendFailed,
    VerificationEmailResendSucceeded,
)
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    NotifierProtocol,
)


class ResendError:
    """Resend verification error reasons.

    Shares the not-found and already-confirmed reasons with verification.
    """

    ACCOUNT_NOT_FOUND = VerificationError.ACCOUNT_NOT_FOUND
    ALREADY_CONFIRMED = VerificationError.ALREADY_CONFIRMED
    SEND_FAILED = "verification_send_failed"


class ResendVerificationEmailHandler:
    """Handler for ResendVerificationEmail command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        notifier: NotifierProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._notifier = notifier
        self._event_bus = event_bus

    async def handle(self, cmd: ResendVerificationEmail) -> Result[UUID, str]:
        """Handle resend verification command.

        Returns:
            Success(account_id) when a new link was sent.
            Failure(ResendError.*) otherwise.
        """
        # Step 1: Emit ATTEMPTED event
        await self._event_bus.publish(VerificationEmailResendAttempted(email=cmd.email))

        # Step 2: Find account
        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            return await self._fail(cmd.email, ResendError.ACCOUNT_NOT_FOUND)

        # Step 3: Already verified
        if account.is_verified:
            return await self._fail(cmd.email, ResendError.ALREADY_CONFIRMED)

        # Step 4: Send new link
        try:
            await self._notifier.send_verification(account.id, account.email)
        except Exception:
            return await self._fail(cmd.email, ResendError.SEND_FAILED)

        # Step 5: Emit SUCCEEDED event
        await self._event_bus.publish(
            VerificationEmailResendSucceeded(user_id=account.id, email=account.email)
        )
        return Success(value=account.id)

    async def _fail(self, email: str, reason: str) -> Failure[str]:
        await self._event_bus.publish(
            VerificationEmailResendFailed(email=email, reason=reason)
        )
        return Failure(error=reason)
