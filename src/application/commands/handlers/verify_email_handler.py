"""Email verification handler.

Runs after the presentation layer has accepted the link signature and
expiry. The remaining check binds the link to the current email address.

Flow:
1. Emit EmailVerificationAttempted event
2. Find account by ID
3. Reject if already verified (repeat verification is an error)
4. Compare link hash with sha1(current email) in constant time
5. Set verified_at and persist
6. Emit EmailVerificationSucceeded event
7. Return Success(account_id)

On failure:
- Emit EmailVerificationFailed event
- Return Failure(error)
"""

import hmac
from datetime import UTC, datetime
from uuid import UUID

from src.application.commands.auth_commands import VerifyEmail
from src.core.result import Failure, Result, Success
from src.domain.events.auth_events import (
    EmailVerificationAttempted,
    EmailVerificationFailed,
    EmailVerificationSucceeded,
)
from src.domain.protocols import AccountRepository, EventBusProtocol


class VerificationError:
    """Email verification error reasons."""

    ACCOUNT_NOT_FOUND = "verification_account_not_found"
    ALREADY_CONFIRMED = "already_confirmed"
    INVALID_HASH = "invalid_hash"
    CONFIRMATION_FAILED = "confirmation_failed"


class VerifyEmailHandler:
    """Handler for email verification command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize email verification handler with dependencies.

        Args:
            account_repo: Account repository for persistence.
            event_bus: Event bus for publishing domain events.
        """
        self._account_repo = account_repo
        self._event_bus = event_bus

    async def handle(self, cmd: VerifyEmail) -> Result[UUID, str]:
        """Handle email verification command.

        Args:
            cmd: VerifyEmail command built from a signature-checked link.

        Returns:
            Success(account_id) on successful verification.
            Failure(VerificationError.*) on failure.

        Side Effects:
            - Publishes EmailVerificationAttempted event (always).
            - Publishes EmailVerificationSucceeded event (on success).
            - Publishes EmailVerificationFailed event (on failure).
            - Sets Account.verified_at.
        """
        # Step 1: Emit ATTEMPTED event
        await self._event_bus.publish(
            EmailVerificationAttempted(user_id=cmd.account_id)
        )

        # Step 2: Find account
        account = await self._account_repo.find_by_id(cmd.account_id)
        if account is None:
            return await self._fail(cmd.account_id, VerificationError.ACCOUNT_NOT_FOUND)

        # Step 3: Already verified
        if account.is_verified:
            return await self._fail(cmd.account_id, VerificationError.ALREADY_CONFIRMED)

        # Step 4: Link must match the current email
        if not hmac.compare_digest(
            cmd.email_hash.lower().encode("utf-8"),
            account.verification_hash().encode("utf-8"),
        ):
            return await self._fail(cmd.account_id, VerificationError.INVALID_HASH)

        # Step 5: Mark verified and persist
        try:
            account.mark_email_verified(datetime.now(UTC))
            account.updated_at = account.verified_at
            await self._account_repo.update(account)
        except Exception:
            return await self._fail(
                cmd.account_id, VerificationError.CONFIRMATION_FAILED
            )

        # Step 6: Emit SUCCEEDED event
        await self._event_bus.publish(
            EmailVerificationSucceeded(user_id=account.id, email=account.email)
        )

        # Step 7: Return Success
        return Success(value=account.id)

    async def _fail(self, account_id: UUID, reason: str) -> Failure[str]:
        """Publish EmailVerificationFailed and build the Failure."""
        await self._event_bus.publish(
            EmailVerificationFailed(user_id=account_id, reason=reason)
        )
        return Failure(error=reason)
