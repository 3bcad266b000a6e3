"""Unit tests for request schemas and the annotated domain types."""

import pytest
from pydantic import ValidationError

from src.domain.validators import (
    validate_email,
    validate_name,
    validate_password_bytes,
)
from src.schemas.auth_schemas import (
    ForgotPasswordRequest,
    LoginRequest,
    RegistrationRequest,
    ResetPasswordRequest,
    ResendVerificationRequest,
)


def _error_types(exc_info) -> list[tuple[tuple, str]]:
    return [(e["loc"], e["type"]) for e in exc_info.value.errors()]


@pytest.mark.unit
class TestValidators:
    def test_email_normalized(self):
        assert validate_email("  Jane@Example.COM ") == "jane@example.com"

    @pytest.mark.parametrize("value", ["", "plain", "a@", "@b.com", "a b@c.com"])
    def test_email_invalid(self, value):
        with pytest.raises(ValueError, match="valid email address"):
            validate_email(value)

    def test_name_trimmed(self):
        assert validate_name("  Jane Doe ") == "Jane Doe"

    def test_blank_name(self):
        with pytest.raises(ValueError, match="name field is required"):
            validate_name("   ")

    @pytest.mark.parametrize("value", ["p" * 72, "€" * 24])
    def test_password_at_byte_limit(self, value):
        assert validate_password_bytes(value) == value

    @pytest.mark.parametrize("value", ["p" * 73, "€" * 25])
    def test_password_over_byte_limit(self, value):
        with pytest.raises(ValueError, match="greater than 72 bytes"):
            validate_password_bytes(value)


@pytest.mark.unit
class TestRegistrationRequest:
    def test_valid(self):
        request = RegistrationRequest(
            name="Jane",
            email="JANE@example.com",
            password="secret-password",
            password_confirmation="secret-password",
        )

        assert request.email == "jane@example.com"

    def test_missing_fields_in_declaration_order(self):
        with pytest.raises(ValidationError) as exc_info:
            RegistrationRequest()

        assert _error_types(exc_info) == [
            (("name",), "missing"),
            (("email",), "missing"),
            (("password",), "missing"),
        ]

    def test_short_password(self):
        with pytest.raises(ValidationError) as exc_info:
            RegistrationRequest(
                name="Jane",
                email="jane@example.com",
                password="short",
                password_confirmation="short",
            )

        assert _error_types(exc_info) == [(("password",), "string_too_short")]

    @pytest.mark.parametrize("password", ["p" * 80, "€" * 25])
    def test_password_longer_than_bcrypt_input(self, password):
        with pytest.raises(ValidationError) as exc_info:
            RegistrationRequest(
                name="Jane",
                email="jane@example.com",
                password=password,
                password_confirmation=password,
            )

        assert _error_types(exc_info) == [(("password",), "value_error")]

    def test_name_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            RegistrationRequest(
                name="x" * 256,
                email="jane@example.com",
                password="secret-password",
                password_confirmation="secret-password",
            )

        assert _error_types(exc_info) == [(("name",), "string_too_long")]

    @pytest.mark.parametrize("confirmation", [None, "different-password"])
    def test_confirmation_must_match(self, confirmation):
        with pytest.raises(ValidationError) as exc_info:
            RegistrationRequest(
                name="Jane",
                email="jane@example.com",
                password="secret-password",
                password_confirmation=confirmation,
            )

        assert _error_types(exc_info) == [((), "confirmed")]
        assert exc_info.value.errors()[0]["msg"] == (
            "The password confirmation does not match."
        )


@pytest.mark.unit
class TestOtherRequests:
    def test_login_requires_password(self):
        with pytest.raises(ValidationError) as exc_info:
            LoginRequest(email="jane@example.com", password="")

        assert _error_types(exc_info) == [(("password",), "string_too_short")]

    def test_login_accepts_short_password(self):
        # Length rules apply when passwords are set, not when they are checked
        assert LoginRequest(email="jane@example.com", password="x").password == "x"

    def test_resend_does_not_validate_format(self):
        assert ResendVerificationRequest(email="anything").email == "anything"

    def test_forgot_password_invalid_email(self):
        with pytest.raises(ValidationError) as exc_info:
            ForgotPasswordRequest(email="nope")

        assert _error_types(exc_info) == [(("email",), "value_error")]

    def test_reset_password(self):
        request = ResetPasswordRequest(
            email="Jane@example.com",
            token="abc",
            password="secret-password",
            password_confirmation="secret-password",
        )

        assert request.email == "jane@example.com"

    def test_reset_password_requires_token(self):
        with pytest.raises(ValidationError) as exc_info:
            ResetPasswordRequest(
                email="jane@example.com",
                password="secret-password",
                password_confirmation="secret-password",
            )

        assert _error_types(exc_info) == [(("token",), "missing")]

    def test_reset_password_longer_than_bcrypt_input(self):
        with pytest.raises(ValidationError) as exc_info:
            ResetPasswordRequest(
                email="jane@example.com",
                token="abc",
                password="p" * 80,
                password_confirmation="p" * 80,
            )

        assert _error_types(exc_info) == [(("password",), "value_error")]
