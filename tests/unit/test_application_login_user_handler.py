"""Unit tests for LoginUserHandler.

Tests cover:
- Unknown email and wrong password share one reason
- Unverified accounts are rejected before the password is checked
- Successful login stores only the token hash and returns "<id>|<secret>"
"""

from unittest.mock import AsyncMock, Mock

import pytest

from src.application.commands.auth_commands import LoginUser
from src.application.commands.handlers.login_user_handler import (
    LoginError,
    LoginUserHandler,
)
from src.application.dtos import LoginResponse
from src.core.result import Failure, Success
from src.domain.events.auth_events import (
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
)
from src.infrastructure.security import AccessTokenService
from tests.fakes import (
    InMemoryAccessTokenRepository,
    InMemoryAccountRepository,
    make_account,
    published_types,
)


def _handler(account, *, password_ok=True, event_bus=None, token_repo=None):
    password_service = Mock()
    password_service.verify_password.return_value = password_ok
    return LoginUserHandler(
        account_repo=InMemoryAccountRepository(*([account] if account else [])),
        token_repo=token_repo or InMemoryAccessTokenRepository(),
        password_service=password_service,
        token_service=AccessTokenService(),
        event_bus=event_bus or AsyncMock(),
    ), password_service


@pytest.mark.unit
class TestLoginUserHandlerFailures:
    async def test_unknown_email_is_invalid_credentials(self, mock_event_bus):
        handler, _ = _handler(None, event_bus=mock_event_bus)

        result = await handler.handle(
            LoginUser(email="nobody@example.com", password="secret-password")
        )

        assert result == Failure(error=LoginError.INVALID_CREDENTIALS)
        assert published_types(mock_event_bus) == [UserLoginAttempted, UserLoginFailed]

    async def test_wrong_password_is_invalid_credentials(self):
        account = make_account()
        handler, _ = _handler(account, password_ok=False)

        result = await handler.handle(LoginUser(email=account.email, password="wrong"))

        assert result == Failure(error=LoginError.INVALID_CREDENTIALS)

    async def test_unverified_checked_before_password(self):
        account = make_account(verified=False)
        handler, password_service = _handler(account, password_ok=False)

        result = await handler.handle(LoginUser(email=account.email, password="wrong"))

        assert result == Failure(error=LoginError.NOT_VERIFIED)
        password_service.verify_password.assert_not_called()

    async def test_failure_issues_no_token(self):
        account = make_account()
        token_repo = InMemoryAccessTokenRepository()
        handler, _ = _handler(account, password_ok=False, token_repo=token_repo)

        await handler.handle(LoginUser(email=account.email, password="wrong"))

        assert token_repo.tokens == {}


@pytest.mark.unit
class TestLoginUserHandlerSuccess:
    async def test_returns_plain_text_token(self):
        account = make_account()
        token_repo = InMemoryAccessTokenRepository()
        handler, _ = _handler(account, token_repo=token_repo)

        result = await handler.handle(
            LoginUser(email=account.email, password="secret-password")
        )

        assert isinstance(result, Success)
        assert isinstance(result.value, LoginResponse)
        token_id, secret = AccessTokenService().parse_plain_text(
            result.value.access_token
        )
        stored = token_repo.tokens[token_id]
        assert stored.user_id == account.id
        assert stored.name == "auth-token"
        assert stored.token_hash != secret
        assert AccessTokenService().verify_secret(secret, stored.token_hash)

    async def test_each_login_creates_a_new_token(self):
        account = make_account()
        token_repo = InMemoryAccessTokenRepository()
        handler, _ = _handler(account, token_repo=token_repo)

        first = await handler.handle(LoginUser(email=account.email, password="pw"))
        second = await handler.handle(LoginUser(email=account.email, password="pw"))

        assert first.value.access_token != second.value.access_token
        assert await token_repo.count_for_user(account.id) == 2

    async def test_succeeded_event_carries_token_id(self, mock_event_bus):
        account = make_account()
        handler, _ = _handler(account, event_bus=mock_event_bus)

        result = await handler.handle(LoginUser(email=account.email, password="pw"))

        succeeded = mock_event_bus.publish.call_args_list[-1].args[0]
        assert isinstance(succeeded, UserLoginSucceeded)
        assert result.value.access_token.startswith(f"{succeeded.token_id}|")
