"""Login handler.

Flow:
1. Emit UserLoginAttempted event
2. Find account by email
3. Check account exists
4. Check email verified
5. Verify password
6. Mint and store a personal access token
7. Emit UserLoginSucceeded event
8. Return Success(LoginResponse)

On failure:
- Emit UserLoginFailed event
- Return Failure(error)

Unknown email and wrong password share INVALID_CREDENTIALS. The verified
check runs before the password check, so an unverified account is
distinguishable from an unknown one.
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.auth_commands import LoginUser
from src.application.dtos import LoginResponse
from src.core.result import Failure, Result, Success
from src.domain.events.auth_events import (
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
)
from src.domain.protocols import (
    AccessTokenRepository,
    AccessTokenServiceProtocol,
    AccountRepository,
    EventBusProtocol,
    PasswordHashingProtocol,
)


class LoginError:
    """Login-specific error reasons."""

    INVALID_CREDENTIALS = "invalid_credentials"
    NOT_VERIFIED = "not_verified"


class LoginUserHandler:
    """Handler for user login command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (Account entity, protocols)
    - Infrastructure layer (repositories, services via dependency injection)
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        token_repo: AccessTokenRepository,
        password_service: PasswordHashingProtocol,
        token_service: AccessTokenServiceProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            account_repo: Account repository for lookups.
            token_repo: Access token repository for persistence.
            password_service: Password verification service.
            token_service: Access token minting service.
            event_bus: Event bus for publishing domain events.
        """
        self._account_repo = account_repo
        self._token_repo = token_repo
        self._password_service = password_service
        self._token_service = token_service
        self._event_bus = event_bus

    async def handle(self, cmd: LoginUser) -> Result[LoginResponse, str]:
        """Handle user login command.

        Args:
            cmd: LoginUser command.

        Returns:
            Success(LoginResponse) on successful login.
            Failure(LoginError.*) on failure.

        Side Effects:
            - Publishes UserLoginAttempted event (always).
            - Publishes UserLoginSucceeded event (on success).
            - Publishes UserLoginFailed event (on failure).
            - Creates a personal access token row.
        """
        # Step 1: Emit ATTEMPTED event
        await self._event_bus.publish(UserLoginAttempted(email=cmd.email))

        # Step 2: Find account by email
        account = await self._account_repo.find_by_email(cmd.email)

        # Step 3: Check account exists
        if account is None:
            # Same reason as wrong password
            return await self._fail(cmd.email, LoginError.INVALID_CREDENTIALS)

        # Step 4: Check email verified
        if not account.is_verified:
            return await self._fail(
                cmd.email, LoginError.NOT_VERIFIED, user_id=account.id
            )

        # Step 5: Verify password
        if not self._password_service.verify_password(
            cmd.password, account.password_hash
        ):
            return await self._fail(
                cmd.email, LoginError.INVALID_CREDENTIALS, user_id=account.id
            )

        # Step 6: Mint token (plaintext is returned once, only the hash is stored)
        token_id = uuid7()
        secret, secret_hash = self._token_service.generate_secret()
        await self._token_repo.save(
            token_id=token_id,
            user_id=account.id,
            token_hash=secret_hash,
        )
        plain_text = self._token_service.format_plain_text(token_id, secret)

        # Step 7: Emit SUCCEEDED event
        await self._event_bus.publish(
            UserLoginSucceeded(
                user_id=account.id,
                email=account.email,
                token_id=token_id,
            )
        )

        # Step 8: Return Success
        return Success(value=LoginResponse(access_token=plain_text))

    async def _fail(
        self,
        email: str,
        reason: str,
        user_id: UUID | None = None,
    ) -> Failure[str]:
        """Publish UserLoginFailed and build the Failure."""
        await self._event_bus.publish(
            UserLoginFailed(email=email, reason=reason, user_id=user_id)
        )
        return Failure(error=reason)
