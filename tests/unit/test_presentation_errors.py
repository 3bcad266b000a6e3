"""Unit tests for error responses and exception handlers."""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from src.application.commands.handlers.login_user_handler import LoginError
from src.application.commands.handlers.register_user_handler import RegistrationError
from src.application.commands.handlers.verify_email_handler import VerificationError
from src.presentation.routers.api.errors import (
    ErrorResponseBuilder,
    register_exception_handlers,
)
from src.presentation.routers.api.errors.exception_handlers import validation_message
from src.schemas.auth_schemas import RegistrationRequest


def _body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.unit
class TestErrorResponseBuilder:
    def test_plain_reason(self):
        response = ErrorResponseBuilder.from_reason(LoginError.NOT_VERIFIED)

        assert response.status_code == 422
        assert _body(response) == {"message": "Account not verified."}

    def test_field_reason(self):
        response = ErrorResponseBuilder.from_reason(RegistrationError.EMAIL_TAKEN)

        assert response.status_code == 422
        assert _body(response) == {
            "message": "The email has already been taken.",
            "errors": {"email": ["The email has already been taken."]},
        }

    def test_unknown_reason_is_server_error(self):
        response = ErrorResponseBuilder.from_reason("something_internal")

        assert response.status_code == 500
        assert _body(response) == {"message": "Server Error"}

    def test_verification_reason(self):
        response = ErrorResponseBuilder.from_reason(VerificationError.INVALID_HASH)

        assert _body(response) == {"message": "Incorrect data to confirm the account."}

    def test_field_errors_first_message(self):
        response = ErrorResponseBuilder.field_errors(
            {"name": ["The name field is required."], "email": ["Bad email."]}
        )

        assert _body(response)["message"] == "The name field is required."


@pytest.mark.unit
class TestValidationMessage:
    @pytest.mark.parametrize(
        "error,field,expected",
        [
            ({"type": "missing"}, "email", "The email field is required."),
            (
                {"type": "string_too_short", "ctx": {"min_length": 8}},
                "password",
                "The password must be at least 8 characters.",
            ),
            (
                {"type": "string_too_short", "ctx": {"min_length": 1}},
                "password",
                "The password field is required.",
            ),
            (
                {"type": "string_too_long", "ctx": {"max_length": 255}},
                "name",
                "The name must not be greater than 255 characters.",
            ),
            ({"type": "string_type"}, "name", "The name must be a string."),
            (
                {
                    "type": "value_error",
                    "msg": "Value error, The email must be a valid email address.",
                },
                "email",
                "The email must be a valid email address.",
            ),
            ({"type": "missing"}, "password_confirmation", (
                "The password confirmation field is required."
            )),
        ],
    )
    def test_messages(self, error, field, expected):
        assert validation_message(error, field) == expected


@pytest.mark.unit
class TestExceptionHandlers:
    @pytest.fixture
    def client(self):
        app = FastAPI()
        register_exception_handlers(app)

        @app.post("/register")
        async def register(body: RegistrationRequest):
            return {}

        @app.get("/forbidden")
        async def forbidden():
            raise HTTPException(
                status_code=401,
                detail="Unauthenticated.",
                headers={"WWW-Authenticate": "Bearer"},
            )

        @app.get("/boom")
        async def boom():
            raise RuntimeError("database password is hunter2")

        return TestClient(app, raise_server_exceptions=False)

    def test_http_exception(self, client):
        response = client.get("/forbidden")

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthenticated."}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_unknown_route(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.json() == {"message": "Not Found"}

    def test_validation_errors(self, client):
        response = client.post("/register", json={"email": "nope", "password": "short"})

        assert response.status_code == 422
        assert response.json() == {
            "message": "The name field is required.",
            "errors": {
                "name": ["The name field is required."],
                "email": ["The email must be a valid email address."],
                "password": ["The password must be at least 8 characters."],
            },
        }

    def test_confirmation_error_belongs_to_password(self, client):
        response = client.post(
            "/register",
            json={
                "name": "Jane",
                "email": "jane@example.com",
                "password": "secret-password",
                "password_confirmation": "other-password",
            },
        )

        assert response.json()["errors"] == {
            "password": ["The password confirmation does not match."]
        }

    def test_unhandled_exception_is_logged_not_leaked(self, client):
        logger = Mock()
        with patch(
            "src.presentation.routers.api.errors.exception_handlers.get_logger",
            return_value=logger,
        ):
            response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"message": "Server Error"}
        assert "hunter2" not in response.text
        assert logger.error.call_args.args[0] == "unhandled_exception"
