"""Request Password Reset (forgot password) handler.

Flow:
1. Emit PasswordResetRequestAttempted event
2. Look up account by email
3. Refuse if the existing request is inside the throttle window
4. Generate token, store its hash (replacing any previous request)
5. Send password reset email
6. Emit PasswordResetRequestSucceeded event
7. Return Success(account_id)

At most one live request exists per email; a new one supersedes the old.
"""

from datetime import UTC, datetime
from uuid import UUID

from src.application.commands.auth_commands import RequestPasswordReset
from src.core.result import Failure, Result, Success
from src.domain.events.auth_events import (
    PasswordResetRequestAttempted,
    PasswordResetRequestFailed,
    PasswordResetRequestSucceeded,
)
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    NotifierProtocol,
    PasswordResetRepository,
    PasswordResetTokenServiceProtocol,
)


class PasswordResetRequestError:
    """Forgot-password error reasons."""

    ACCOUNT_NOT_FOUND = "reset_account_not_found"
    RESET_THROTTLED = "reset_throttled"
    RESET_REQUEST_FAILED = "reset_request_failed"


class RequestPasswordResetHandler:
    """Handler for request password reset command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (Account entity, protocols)
    - Infrastructure layer (repositories, services via dependency injection)
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        reset_repo: PasswordResetRepository,
        reset_token_service: PasswordResetTokenServiceProtocol,
        notifier: NotifierProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            account_repo: Account repository for lookups.
            reset_repo: Password reset record repository.
            reset_token_service: Token generation, hashing and time windows.
            notifier: Sends the reset link.
            event_bus: Event bus for publishing domain events.
        """
        self._account_repo = account_repo
        self._reset_repo = reset_repo
        self._reset_token_service = reset_token_service
        self._notifier = notifier
        self._event_bus = event_bus

    async def handle(self, cmd: RequestPasswordReset) -> Result[UUID, str]:
        """Handle request password reset command.

        Args:
            cmd: RequestPasswordReset command.

        Returns:
            Success(account_id) when a reset link was sent.
            Failure(PasswordResetRequestError.*) otherwise.

        Side Effects:
            - Publishes PasswordResetRequestAttempted event (always).
            - Publishes PasswordResetRequestSucceeded/Failed event.
            - Replaces the password reset record for the email.
            - Sends a password reset email.
        """
        # Step 1: Emit ATTEMPTED event
        await self._event_bus.publish(PasswordResetRequestAttempted(email=cmd.email))

        # Step 2: Look up account
        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            return await self._fail(
                cmd.email, PasswordResetRequestError.ACCOUNT_NOT_FOUND
            )

        try:
            # Step 3: Throttle repeated requests
            existing = await self._reset_repo.find_by_email(account.email)
            now = datetime.now(UTC)
            if existing is not None and self._reset_token_service.is_throttled(
                existing.created_at, now
            ):
                return await self._fail(
                    cmd.email, PasswordResetRequestError.RESET_THROTTLED
                )

            # Step 4: New token supersedes any previous one
            token = self._reset_token_service.generate_token()
            await self._reset_repo.replace(
                email=account.email,
                token_hash=self._reset_token_service.hash_token(token),
                created_at=now,
            )

            # Step 5: Send reset link
            await self._notifier.send_password_reset(account.email, token)
        except Exception:
            return await self._fail(
                cmd.email, PasswordResetRequestError.RESET_REQUEST_FAILED
            )

        # Step 6: Emit SUCCEEDED event
        await self._event_bus.publish(
            PasswordResetRequestSucceeded(user_id=account.id, email=account.email)
        )

        # Step 7: Return Success
        return Success(value=account.id)

    async def _fail(self, email: str, reason: str) -> Failure[str]:
        await self._event_bus.publish(
            PasswordResetRequestFailed(email=email, reason=reason)
        )
        return Failure(error=reason)
