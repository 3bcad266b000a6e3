"""Request/response schemas for API endpoints.

Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import LoginRequest, AccessTokenResponse
"""

from src.schemas.auth_schemas import (
    AccessTokenResponse,
    ForgotPasswordRequest,
    LoginRequest,
    ProfileResponse,
    RegistrationRequest,
    ResendVerificationRequest,
    ResetPasswordRequest,
)

__all__ = [
    "AccessTokenResponse",
    "ForgotPasswordRequest",
    "LoginRequest",
    "ProfileResponse",
    "RegistrationRequest",
    "ResendVerificationRequest",
    "ResetPasswordRequest",
]
