"""Registration handler.

Flow:
1. Emit UserRegistrationAttempted event
2. Validate name/email/password (handled by Annotated types)
3. Check email uniqueness
4. Hash password
5. Create Account entity (unverified)
6. Save account
7. Emit UserRegistrationSucceeded event (triggers email via EmailEventHandler)
8. Return Success(account_id)

On failure:
- Emit UserRegistrationFailed event
- Return Failure(error)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- NO infrastructure imports (repositories are injected via protocols)
- Handler orchestrates business logic without knowing persistence details
"""

from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterUser
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.events.auth_events import (
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
)
from src.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    PasswordHashingProtocol,
)


class RegistrationError:
    """Registration-specific errors."""

    EMAIL_TAKEN = "email_taken"
    REGISTRATION_FAILED = "registration_failed"


class RegisterUserHandler:
    """Handler for user registration command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (Account entity, protocols)
    - Infrastructure layer (repositories, services via dependency injection)
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        password_service: PasswordHashingProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            account_repo: Account repository for persistence
            password_service: Password hashing service
            event_bus: Event bus for publishing domain events
        """
        self._account_repo = account_repo
        self._password_service = password_service
        self._event_bus = event_bus

    async def handle(self, cmd: RegisterUser) -> Result[UUID, str]:
        """Handle user registration command.

        Args:
            cmd: RegisterUser command (validated by Annotated types)

        Returns:
            Success(account_id) on successful registration
            Failure(RegistrationError.*) on failure

        Side Effects:
            - Publishes UserRegistrationAttempted event (always)
            - Publishes UserRegistrationSucceeded event (on success, triggers email)
            - Publishes UserRegistrationFailed event (on failure)
            - Creates Account in database
        """
        # Step 1: Emit ATTEMPTED event
        await self._event_bus.publish(UserRegistrationAttempted(email=cmd.email))

        try:
            # Step 2: Validation already handled by Annotated types
            # (see domain/validators and domain/types.py)

            # Step 3: Check email uniqueness
            if await self._account_repo.exists_by_email(cmd.email):
                await self._publish_failed(cmd.email, RegistrationError.EMAIL_TAKEN)
                return Failure(error=RegistrationError.EMAIL_TAKEN)

            # Step 4: Hash password
            password_hash = self._password_service.hash_password(cmd.password)

            # Step 5: Create Account entity
            now = datetime.now(UTC)
            account = Account(
                id=uuid7(),
                name=cmd.name,
                email=cmd.email,
                password_hash=password_hash,
                verified_at=None,  # Email verification required
                created_at=now,
                updated_at=now,
            )

            # Step 6: Save account
            await self._account_repo.save(account)
        except Exception:
            # Unique-constraint race or storage failure; cause is not surfaced
            await self._publish_failed(
                cmd.email, RegistrationError.REGISTRATION_FAILED
            )
            return Failure(error=RegistrationError.REGISTRATION_FAILED)

        # Step 7: Emit SUCCEEDED event (triggers email via EmailEventHandler)
        await self._event_bus.publish(
            UserRegistrationSucceeded(user_id=account.id, email=account.email)
        )

        # Step 8: Return Success
        return Success(value=account.id)

    async def _publish_failed(self, email: str, reason: str) -> None:
        await self._event_bus.publish(
            UserRegistrationFailed(email=email, reason=reason)
        )
