"""Reset Password handler.

Flow:
1. Emit PasswordResetAttempted event
2. Look up account by email
3. Load the live reset record; check token match and expiry
4. Hash new password and rotate remember token
5. Delete the reset record (single use), then persist the account
6. Optionally revoke every access token of the account
7. Emit PasswordResetSucceeded event (triggers "password changed" email)
8. Return Success(account_id)

Existing sessions stay valid unless revoke_tokens is enabled.
"""

from datetime import UTC, datetime
from uuid import UUID

from src.application.commands.auth_commands import ResetPassword
from src.core.result import Failure, Result, Success
from src.domain.events.auth_events import (
    PasswordResetAttempted,
    PasswordResetFailed,
    PasswordResetSucceeded,
)
from src.domain.protocols import (
    AccessTokenRepository,
    AccountRepository,
    EventBusProtocol,
    PasswordHashingProtocol,
    PasswordResetRepository,
    PasswordResetTokenServiceProtocol,
)


class PasswordResetError:
    """Reset password error reasons."""

    ACCOUNT_NOT_FOUND = "reset_account_not_found"
    INVALID_TOKEN = "invalid_token"
    RESET_FAILED = "reset_failed"


class ResetPasswordHandler:
    """Handler for reset password command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        reset_repo: PasswordResetRepository,
        reset_token_service: PasswordResetTokenServiceProtocol,
        password_service: PasswordHashingProtocol,
        token_repo: AccessTokenRepository,
        event_bus: EventBusProtocol,
        revoke_tokens: bool = False,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            account_repo: Account repository.
            reset_repo: Password reset record repository.
            reset_token_service: Token verification and expiry.
            password_service: Password hashing service.
            token_repo: Access token repository (used when revoke_tokens is set).
            event_bus: Event bus for publishing domain events.
            revoke_tokens: Delete all access tokens after a successful reset.
        """
        self._account_repo = account_repo
        self._reset_repo = reset_repo
        self._reset_token_service = reset_token_service
        self._password_service = password_service
        self._token_repo = token_repo
        self._event_bus = event_bus
        self._revoke_tokens = revoke_tokens

    async def handle(self, cmd: ResetPassword) -> Result[UUID, str]:
        """Handle reset password command.

        Args:
            cmd: ResetPassword command (confirmation checked by the request schema).

        Returns:
            Success(account_id) on success.
            Failure(PasswordResetError.*) otherwise.
        """
        # Step 1: Emit ATTEMPTED event
        await self._event_bus.publish(PasswordResetAttempted(email=cmd.email))

        # Step 2: Look up account
        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            return await self._fail(cmd.email, PasswordResetError.ACCOUNT_NOT_FOUND)

        try:
            # Step 3: Token must match the live record and be unexpired
            record = await self._reset_repo.find_by_email(account.email)
            if (
                record is None
                or self._reset_token_service.is_expired(record.created_at)
                or not self._reset_token_service.verify_token(
                    cmd.token, record.token_hash
                )
            ):
                return await self._fail(cmd.email, PasswordResetError.INVALID_TOKEN)

            # Step 4: New password, new remember token (in memory only)
            account.change_password(self._password_service.hash_password(cmd.password))
            account.updated_at = datetime.now(UTC)

            # Step 5: Consume the reset record, then persist the password.
            # A failed delete leaves the stored password unchanged.
            await self._reset_repo.delete(account.email)
            await self._account_repo.update(account)

            # Step 6: Optional session revocation
            if self._revoke_tokens:
                await self._token_repo.delete_all_for_user(account.id)
        except Exception:
            return await self._fail(cmd.email, PasswordResetError.RESET_FAILED)

        # Step 7: Emit SUCCEEDED event
        await self._event_bus.publish(
            PasswordResetSucceeded(user_id=account.id, email=account.email)
        )

        # Step 8: Return Success
        return Success(value=account.id)

    async def _fail(self, email: str, reason: str) -> Failure[str]:
        await self._event_bus.publish(PasswordResetFailed(email=email, reason=reason))
        return Failure(error=reason)
