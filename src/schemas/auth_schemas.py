"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST     /auth/registration                - RegistrationRequest
    GET|POST /auth/resend-email-verification   - ResendVerificationRequest
    POST     /auth/login                       - LoginRequest -> AccessTokenResponse
    POST     /auth/forgot-password             - ForgotPasswordRequest
    POST     /auth/reset-password              - ResetPasswordRequest
    GET      /profile                          - ProfileResponse
"""

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError

from src.domain.types import Email, Name, Password, ResetToken

RequiredString = Annotated[str, Field(min_length=1)]


class _ConfirmedPassword(BaseModel):
    """Base for requests whose ``password_confirmation`` must equal ``password``.

    Subclasses declare both fields so they keep their own field order.
    """

    @model_validator(mode="after")
    def check_confirmation(self) -> "_ConfirmedPassword":
        password = getattr(self, "password", None)
        if getattr(self, "password_confirmation", None) != password:
            raise PydanticCustomError(
                "confirmed",
                "The password confirmation does not match.",
            )
        return self


# =============================================================================
# Registration
# =============================================================================


class RegistrationRequest(_ConfirmedPassword):
    """Request schema for registration.

    POST /auth/registration
    Returns: 201 Created (empty body)
    """

    name: Name = Field(..., description="Display name", examples=["Jane Doe"])
    email: Email = Field(
        ...,
        description="Email address (must be unique)",
        examples=["jane@example.com"],
    )
    password: Password = Field(..., examples=["secret-password"])
    password_confirmation: str | None = Field(
        default=None,
        description="Must match password",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "password": "secret-password",
                "password_confirmation": "secret-password",
            }
        }
    )


# =============================================================================
# Email verification
# =============================================================================


class ResendVerificationRequest(BaseModel):
    """Request body for POST /auth/resend-email-verification."""

    email: RequiredString = Field(
        ...,
        description="Email address of the unverified account",
        examples=["jane@example.com"],
    )


# =============================================================================
# Login
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /auth/login
    Returns: 200 OK with AccessTokenResponse
    """

    email: Email = Field(..., examples=["jane@example.com"])
    password: RequiredString = Field(..., examples=["secret-password"])


class AccessTokenResponse(BaseModel):
    """Response schema for a successful login.

    ``access_token`` is sent back as ``Authorization: Bearer <access_token>``.
    """

    access_token: str = Field(
        ...,
        description="Personal access token in the form '<id>|<secret>'",
    )


# =============================================================================
# Password reset
# =============================================================================


class ForgotPasswordRequest(BaseModel):
    """Request schema for POST /auth/forgot-password."""

    email: Email = Field(..., examples=["jane@example.com"])


class ResetPasswordRequest(_ConfirmedPassword):
    """Request schema for POST /auth/reset-password.

    ``token`` and ``email`` come from the link in the reset email.
    """

    email: Email = Field(..., examples=["jane@example.com"])
    token: ResetToken = Field(..., description="Reset token from the email link")
    password: Password = Field(..., examples=["secret-password"])
    password_confirmation: str | None = Field(
        default=None,
        description="Must match password",
    )


# =============================================================================
# Profile
# =============================================================================


class ProfileResponse(BaseModel):
    """Response schema for GET /profile."""

    id: UUID
    name: str
    email: str
