"""Unit tests for RegisterUserHandler.

Tests cover:
- Successful registration (unverified account persisted, hash stored)
- Duplicate email
- Storage failure collapses to a generic reason
- Event publishing (ATTEMPTED, SUCCEEDED, FAILED)
"""

from unittest.mock import AsyncMock, Mock
from uuid import UUID

import pytest

from src.application.commands.auth_commands import RegisterUser
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
    RegistrationError,
)
from src.core.result import Failure, Success
from src.domain.events.auth_events import (
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
)
from tests.fakes import published_types


def _handler(account_repo=None, event_bus=None, password_service=None):
    if account_repo is None:
        account_repo = AsyncMock()
        account_repo.exists_by_email.return_value = False
    if password_service is None:
        password_service = Mock()
        password_service.hash_password.return_value = "hashed_password"
    return RegisterUserHandler(
        account_repo=account_repo,
        password_service=password_service,
        event_bus=event_bus or AsyncMock(),
    )


def _command(**overrides):
    data = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "password": "secret-password",
    }
    data.update(overrides)
    return RegisterUser(**data)


@pytest.mark.unit
class TestRegisterUserHandlerSuccess:
    """Test successful registration scenarios."""

    async def test_returns_new_account_id(self):
        handler = _handler()

        result = await handler.handle(_command())

        assert isinstance(result, Success)
        assert isinstance(result.value, UUID)

    async def test_saves_unverified_account_with_hash(self):
        account_repo = AsyncMock()
        account_repo.exists_by_email.return_value = False
        password_service = Mock()
        password_service.hash_password.return_value = "bcrypt-hash"
        handler = _handler(account_repo=account_repo, password_service=password_service)

        result = await handler.handle(_command())

        password_service.hash_password.assert_called_once_with("secret-password")
        saved = account_repo.save.call_args[0][0]
        assert saved.id == result.value
        assert saved.name == "Jane Doe"
        assert saved.email == "jane@example.com"
        assert saved.password_hash == "bcrypt-hash"
        assert saved.is_verified is False

    async def test_publishes_attempted_then_succeeded(self, mock_event_bus):
        handler = _handler(event_bus=mock_event_bus)

        result = await handler.handle(_command())

        assert published_types(mock_event_bus) == [
            UserRegistrationAttempted,
            UserRegistrationSucceeded,
        ]
        succeeded = mock_event_bus.publish.call_args_list[1].args[0]
        assert succeeded.user_id == result.value
        assert succeeded.email == "jane@example.com"


@pytest.mark.unit
class TestRegisterUserHandlerFailure:
    """Test registration failure scenarios."""

    async def test_duplicate_email_fails_without_saving(self, mock_event_bus):
        account_repo = AsyncMock()
        account_repo.exists_by_email.return_value = True
        handler = _handler(account_repo=account_repo, event_bus=mock_event_bus)

        result = await handler.handle(_command())

        assert result == Failure(error=RegistrationError.EMAIL_TAKEN)
        account_repo.save.assert_not_called()
        assert published_types(mock_event_bus) == [
            UserRegistrationAttempted,
            UserRegistrationFailed,
        ]

    async def test_storage_error_maps_to_registration_failed(self, mock_event_bus):
        account_repo = AsyncMock()
        account_repo.exists_by_email.return_value = False
        account_repo.save.side_effect = RuntimeError("unique violation")
        handler = _handler(account_repo=account_repo, event_bus=mock_event_bus)

        result = await handler.handle(_command())

        assert result == Failure(error=RegistrationError.REGISTRATION_FAILED)
        failed = mock_event_bus.publish.call_args_list[-1].args[0]
        assert isinstance(failed, UserRegistrationFailed)
        assert failed.reason == RegistrationError.REGISTRATION_FAILED
        assert "unique violation" not in failed.reason
