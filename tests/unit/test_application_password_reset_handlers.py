"""Unit tests for RequestPasswordResetHandler and ResetPasswordHandler.

Tests cover:
- Unknown email for both operations
- Throttle window on repeated requests (freezegun)
- Token replacement, single use and expiry
- Remember token rotation and optional token revocation
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.application.commands.auth_commands import RequestPasswordReset, ResetPassword
from src.application.commands.handlers.request_password_reset_handler import (
    PasswordResetRequestError,
    RequestPasswordResetHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    PasswordResetError,
    ResetPasswordHandler,
)
from src.core.result import Failure, Success
from src.domain.events.auth_events import (
    PasswordResetFailed,
    PasswordResetRequestAttempted,
    PasswordResetRequestFailed,
    PasswordResetRequestSucceeded,
    PasswordResetSucceeded,
)
from src.infrastructure.security import PasswordResetTokenService
from tests.fakes import (
    InMemoryAccessTokenRepository,
    InMemoryAccountRepository,
    InMemoryPasswordResetRepository,
    make_account,
    published_types,
)


@pytest.fixture
def reset_token_service():
    return PasswordResetTokenService(
        expire_minutes=60, throttle_seconds=60, cost_factor=4
    )


@pytest.fixture
def account():
    return make_account()


@pytest.fixture
def account_repo(account):
    return InMemoryAccountRepository(account)


@pytest.fixture
def reset_repo():
    return InMemoryPasswordResetRepository()


@pytest.fixture
def notifier():
    return AsyncMock()


@pytest.fixture
def request_handler(
    account_repo, reset_repo, reset_token_service, notifier, mock_event_bus
):
    return RequestPasswordResetHandler(
        account_repo=account_repo,
        reset_repo=reset_repo,
        reset_token_service=reset_token_service,
        notifier=notifier,
        event_bus=mock_event_bus,
    )


def _sent_token(notifier) -> str:
    return notifier.send_password_reset.call_args.args[1]


@pytest.mark.unit
class TestRequestPasswordResetHandler:
    async def test_unknown_email(self, request_handler, notifier, mock_event_bus):
        result = await request_handler.handle(
            RequestPasswordReset(email="nobody@example.com")
        )

        assert result == Failure(error=PasswordResetRequestError.ACCOUNT_NOT_FOUND)
        notifier.send_password_reset.assert_not_called()
        assert published_types(mock_event_bus) == [
            PasswordResetRequestAttempted,
            PasswordResetRequestFailed,
        ]

    async def test_stores_hash_and_sends_plain_token(
        self, request_handler, account, reset_repo, reset_token_service, notifier
    ):
        result = await request_handler.handle(RequestPasswordReset(email=account.email))

        assert result == Success(value=account.id)
        token = _sent_token(notifier)
        assert len(token) == 64
        record = reset_repo.records[account.email]
        assert record.token_hash != token
        assert reset_token_service.verify_token(token, record.token_hash)

    async def test_second_request_inside_window_is_throttled(
        self, request_handler, account, notifier, mock_event_bus
    ):
        with freeze_time("2026-01-01 12:00:00"):
            await request_handler.handle(RequestPasswordReset(email=account.email))
        with freeze_time("2026-01-01 12:00:30"):
            result = await request_handler.handle(
                RequestPasswordReset(email=account.email)
            )

        assert result == Failure(error=PasswordResetRequestError.RESET_THROTTLED)
        assert notifier.send_password_reset.await_count == 1

    async def test_request_after_window_replaces_token(
        self, request_handler, account, reset_repo, reset_token_service, notifier
    ):
        with freeze_time("2026-01-01 12:00:00"):
            await request_handler.handle(RequestPasswordReset(email=account.email))
            first = _sent_token(notifier)
        with freeze_time("2026-01-01 12:01:01"):
            result = await request_handler.handle(
                RequestPasswordReset(email=account.email)
            )
            second = _sent_token(notifier)

        assert isinstance(result, Success)
        record = reset_repo.records[account.email]
        assert not reset_token_service.verify_token(first, record.token_hash)
        assert reset_token_service.verify_token(second, record.token_hash)

    async def test_notifier_error(self, request_handler, account, notifier):
        notifier.send_password_reset.side_effect = ConnectionError("smtp down")

        result = await request_handler.handle(RequestPasswordReset(email=account.email))

        assert result == Failure(error=PasswordResetRequestError.RESET_REQUEST_FAILED)

    async def test_succeeded_event(self, request_handler, account, mock_event_bus):
        await request_handler.handle(RequestPasswordReset(email=account.email))

        assert published_types(mock_event_bus)[-1] is PasswordResetRequestSucceeded


@pytest.mark.unit
class TestResetPasswordHandler:
    @pytest.fixture
    def password_service(self):
        service = Mock()
        service.hash_password.return_value = "new-bcrypt-hash"
        return service

    @pytest.fixture
    def token_repo(self):
        return InMemoryAccessTokenRepository()

    def _handler(
        self,
        account_repo,
        reset_repo,
        reset_token_service,
        password_service,
        token_repo,
        event_bus,
        revoke_tokens=False,
    ):
        return ResetPasswordHandler(
            account_repo=account_repo,
            reset_repo=reset_repo,
            reset_token_service=reset_token_service,
            password_service=password_service,
            token_repo=token_repo,
            event_bus=event_bus,
            revoke_tokens=revoke_tokens,
        )

    async def _issue(self, reset_repo, reset_token_service, email, created_at=None):
        token = reset_token_service.generate_token()
        await reset_repo.replace(
            email=email,
            token_hash=reset_token_service.hash_token(token),
            created_at=created_at or datetime.now(UTC),
        )
        return token

    async def test_unknown_email(
        self,
        account_repo,
        reset_repo,
        reset_token_service,
        password_service,
        token_repo,
        mock_event_bus,
    ):
        handler = self._handler(
            account_repo,
            reset_repo,
            reset_token_service,
            password_service,
            token_repo,
            mock_event_bus,
        )

        result = await handler.handle(
            ResetPassword(email="nobody@example.com", password="new-password", token="t")
        )

        assert result == Failure(error=PasswordResetError.ACCOUNT_NOT_FOUND)

    async def test_wrong_token(
        self,
        account,
        account_repo,
        reset_repo,
        reset_token_service,
        password_service,
        token_repo,
        mock_event_bus,
    ):
        await self._issue(reset_repo, reset_token_service, account.email)
        handler = self._handler(
            account_repo,
            reset_repo,
            reset_token_service,
            password_service,
            token_repo,
            mock_event_bus,
        )

        result = await handler.handle(
            ResetPassword(email=account.email, password="new-password", token="f" * 64)
        )

        assert result == Failure(error=PasswordResetError.INVALID_TOKEN)
        assert account_repo.accounts[account.id].password_hash == "hashed"
        assert published_types(mock_event_bus)[-1] is PasswordResetFailed

    async def test_no_live_record(
        self,
        account,
        account_repo,
        reset_repo,
        reset_token_service,
        password_service,
        token_repo,
        mock_event_bus,
    ):
        handler = self._handler(
            account_repo,
            reset_repo,
            reset_token_service,
            password_service,
            token_repo,
            mock_event_bus,
        )

        result = await handler.handle(
            ResetPassword(email=account.email, password="new-password", token="a" * 64)
        )

        assert result == Failure(error=PasswordResetError.INVALID_TOKEN)

    async def test_expired_token(
        self,
        account,
        account_repo,
        reset_repo,
        reset_token_service,
        password_service,
        token_repo,
        mock_event_bus,
    ):
        token = await self._issue(
            reset_repo,
            reset_token_service,
            account.email,
            created_at=datetime.now(UTC) - timedelta(minutes=61),
        )
        handler = self._handler(
            account_repo,
            reset_repo,
            reset_token_service,
            password_service,
            token_repo,
            mock_event_bus,
        )

        result = await handler.handle(
            ResetPassword(email=account.email, password="new-password", token=token)
        )

        assert result == Failure(error=PasswordResetError.INVALID_TOKEN)

    async def test_success_changes_password_and_consumes_token(
        self,
        account,
        account_repo,
        reset_repo,
        reset_token_service,
        password_service,
        token_repo,
        mock_event_bus,
    ):
        token = await self._issue(reset_repo, reset_token_service, account.email)
        await token_repo.save(token_id=uuid7(), user_id=account.id, token_hash="a" * 64)
        handler = self._handler(
            account_repo,
            reset_repo,
            reset_token_service,
            password_service,
            token_repo,
            mock_event_bus,
        )

        result = await handler.handle(
            ResetPassword(email=account.email, password="new-password", token=token)
        )

        assert result == Success(value=account.id)
        stored = account_repo.accounts[account.id]
        password_service.hash_password.assert_called_once_with("new-password")
        assert stored.password_hash == "new-bcrypt-hash"
        assert len(stored.remember_token) == 60
        assert account.email not in reset_repo.records
        # Existing sessions survive by default
        assert await token_repo.count_for_user(account.id) == 1
        assert published_types(mock_event_bus)[-1] is PasswordResetSucceeded

    async def test_token_is_single_use(
        self,
        account,
        account_repo,
        reset_repo,
        reset_token_service,
        password_service,
        token_repo,
        mock_event_bus,
    ):
        token = await self._issue(reset_repo, reset_token_service, account.email)
        handler = self._handler(
            account_repo,
            reset_repo,
            reset_token_service,
            password_service,
            token_repo,
            mock_event_bus,
        )
        command = ResetPassword(email=account.email, password="new-password", token=token)

        await handler.handle(command)
        result = await handler.handle(command)

        assert result == Failure(error=PasswordResetError.INVALID_TOKEN)

    async def test_revoke_tokens_option(
        self,
        account,
        account_repo,
        reset_repo,
        reset_token_service,
        password_service,
        token_repo,
        mock_event_bus,
    ):
        token = await self._issue(reset_repo, reset_token_service, account.email)
        await token_repo.save(token_id=uuid7(), user_id=account.id, token_hash="a" * 64)
        handler = self._handler(
            account_repo,
            reset_repo,
            reset_token_service,
            password_service,
            token_repo,
            mock_event_bus,
            revoke_tokens=True,
        )

        await handler.handle(
            ResetPassword(email=account.email, password="new-password", token=token)
        )

        assert await token_repo.count_for_user(account.id) == 0

    async def test_storage_error(
        self,
        account,
        reset_repo,
        reset_token_service,
        password_service,
        token_repo,
        mock_event_bus,
    ):
        token = await self._issue(reset_repo, reset_token_service, account.email)
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = account
        account_repo.update.side_effect = RuntimeError("db down")
        handler = self._handler(
            account_repo,
            reset_repo,
            reset_token_service,
            password_service,
            token_repo,
            mock_event_bus,
        )

        result = await handler.handle(
            ResetPassword(email=account.email, password="new-password", token=token)
        )

        assert result == Failure(error=PasswordResetError.RESET_FAILED)

    async def test_failed_token_delete_keeps_old_password(
        self,
        account,
        account_repo,
        reset_token_service,
        password_service,
        token_repo,
        mock_event_bus,
    ):
        store = InMemoryPasswordResetRepository()
        token = await self._issue(store, reset_token_service, account.email)
        reset_repo = AsyncMock()
        reset_repo.find_by_email.side_effect = store.find_by_email
        reset_repo.delete.side_effect = RuntimeError("db down")
        handler = self._handler(
            account_repo,
            reset_repo,
            reset_token_service,
            password_service,
            token_repo,
            mock_event_bus,
        )

        result = await handler.handle(
            ResetPassword(email=account.email, password="new-password", token=token)
        )

        assert result == Failure(error=PasswordResetError.RESET_FAILED)
        stored = account_repo.accounts[account.id]
        assert stored.password_hash == account.password_hash
        assert stored.remember_token == account.remember_token
