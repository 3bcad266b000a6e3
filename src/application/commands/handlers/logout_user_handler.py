"""Logout handler.

Flow:
1. Emit UserLogoutAttempted event
2. Delete every access token of the account
3. Emit UserLogoutSucceeded event
4. Return Success(revoked_count)

The account is resolved from the bearer token by the presentation layer
and passed in explicitly. Logout has no business failure modes; only a
storage error produces Failure.
"""

from src.application.commands.auth_commands import LogoutUser
from src.core.result import Failure, Result, Success
from src.domain.events.auth_events import (
    UserLogoutAttempted,
    UserLogoutFailed,
    UserLogoutSucceeded,
)
from src.domain.protocols import AccessTokenRepository, EventBusProtocol


class LogoutError:
    """Logout error reasons."""

    REVOCATION_FAILED = "revocation_failed"


class LogoutUserHandler:
    """Handler for logout user command.

    Revokes all sessions of the account (no single-device logout).
    """

    def __init__(
        self,
        token_repo: AccessTokenRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize logout handler with dependencies.

        Args:
            token_repo: Access token repository for revocation.
            event_bus: Event bus for publishing domain events.
        """
        self._token_repo = token_repo
        self._event_bus = event_bus

    async def handle(self, cmd: LogoutUser) -> Result[int, str]:
        """Handle logout user command.

        Args:
            cmd: LogoutUser command with the authenticated account ID.

        Returns:
            Success(number of tokens deleted).
            Failure(LogoutError.REVOCATION_FAILED) on storage error.

        Side Effects:
            - Publishes UserLogoutAttempted event (always).
            - Publishes UserLogoutSucceeded/Failed event.
            - Deletes all access tokens of the account.
        """
        # Step 1: Emit ATTEMPTED event
        await self._event_bus.publish(UserLogoutAttempted(user_id=cmd.account_id))

        # Step 2: Revoke everything
        try:
            revoked = await self._token_repo.delete_all_for_user(cmd.account_id)
        except Exception:
            await self._event_bus.publish(
                UserLogoutFailed(
                    user_id=cmd.account_id,
                    reason=LogoutError.REVOCATION_FAILED,
                )
            )
            return Failure(error=LogoutError.REVOCATION_FAILED)

        # Step 3: Emit SUCCEEDED event
        await self._event_bus.publish(
            UserLogoutSucceeded(user_id=cmd.account_id, revoked_count=revoked)
        )

        # Step 4: Return Success
        return Success(value=revoked)
