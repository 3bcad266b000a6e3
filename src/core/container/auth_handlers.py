"""Authentication handler dependency factories.

Request-scoped handler instances. Each factory builds repositories on the
request's session and injects app-scoped services from the container.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_access_token_service,
    get_db_session,
    get_notifier,
    get_password_reset_token_service,
    get_password_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.application.commands.handlers.resend_verification_email_handler import (
        ResendVerificationEmailHandler,
    )
    from src.application.commands.handlers.reset_password_handler import (
        ResetPasswordHandler,
    )
    from src.application.commands.handlers.verify_email_handler import (
        VerifyEmailHandler,
    )
    from src.application.queries.handlers.resolve_access_token_handler import (
        ResolveAccessTokenHandler,
    )


async def get_register_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped).

    Usage:
        @router.post("/auth/registration")
        async def register(
            handler: RegisterUserHandler = Depends(get_register_user_handler),
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return RegisterUserHandler(
        account_repo=UserRepository(session=session),
        password_service=get_password_service(),
        event_bus=get_event_bus(),
    )


async def get_verify_email_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "VerifyEmailHandler":
    from src.application.commands.handlers.verify_email_handler import (
        VerifyEmailHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return VerifyEmailHandler(
        account_repo=UserRepository(session=session),
        event_bus=get_event_bus(),
    )


async def get_resend_verification_email_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ResendVerificationEmailHandler":
    from src.application.commands.handlers.resend_verification_email_handler import (
        ResendVerificationEmailHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return ResendVerificationEmailHandler(
        account_repo=UserRepository(session=session),
        notifier=get_notifier(),
        event_bus=get_event_bus(),
    )


async def get_login_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped).

    Dependencies:
    - UserRepository, PersonalAccessTokenRepository (request-scoped, share session)
    - BcryptPasswordService, AccessTokenService, EventBus (app-scoped)
    """
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.infrastructure.persistence.repositories import (
        PersonalAccessTokenRepository,
        UserRepository,
    )

    return LoginUserHandler(
        account_repo=UserRepository(session=session),
        token_repo=PersonalAccessTokenRepository(session=session),
        password_service=get_password_service(),
        token_service=get_access_token_service(),
        event_bus=get_event_bus(),
    )


async def get_logout_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LogoutUserHandler":
    from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
    from src.infrastructure.persistence.repositories import (
        PersonalAccessTokenRepository,
    )

    return LogoutUserHandler(
        token_repo=PersonalAccessTokenRepository(session=session),
        event_bus=get_event_bus(),
    )


async def get_request_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RequestPasswordResetHandler":
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.infrastructure.persistence.repositories import (
        PasswordResetRepository,
        UserRepository,
    )

    return RequestPasswordResetHandler(
        account_repo=UserRepository(session=session),
        reset_repo=PasswordResetRepository(session=session),
        reset_token_service=get_password_reset_token_service(),
        notifier=get_notifier(),
        event_bus=get_event_bus(),
    )


async def get_reset_password_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ResetPasswordHandler":
    """Get ResetPassword command handler (request-scoped).

    Token revocation after reset follows settings.password_reset_revokes_tokens.
    """
    from src.application.commands.handlers.reset_password_handler import (
        ResetPasswordHandler,
    )
    from src.infrastructure.persistence.repositories import (
        PasswordResetRepository,
        PersonalAccessTokenRepository,
        UserRepository,
    )

    return ResetPasswordHandler(
        account_repo=UserRepository(session=session),
        reset_repo=PasswordResetRepository(session=session),
        reset_token_service=get_password_reset_token_service(),
        password_service=get_password_service(),
        token_repo=PersonalAccessTokenRepository(session=session),
        event_bus=get_event_bus(),
        revoke_tokens=settings.password_reset_revokes_tokens,
    )


async def get_resolve_access_token_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ResolveAccessTokenHandler":
    from src.application.queries.handlers.resolve_access_token_handler import (
        ResolveAccessTokenHandler,
    )
    from src.infrastructure.persistence.repositories import (
        PersonalAccessTokenRepository,
        UserRepository,
    )

    return ResolveAccessTokenHandler(
        token_repo=PersonalAccessTokenRepository(session=session),
        account_repo=UserRepository(session=session),
        token_service=get_access_token_service(),
    )
