"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere.
All custom types use Pydantic's Annotated with Field constraints and AfterValidator.

Usage:
    from src.domain.types import Email, Password

    class LoginRequest(BaseModel):
        email: Email  # Validation included!
        password: Password  # Validation included!
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_email,
    validate_name,
    validate_password_bytes,
)

Email = Annotated[
    str,
    Field(
        max_length=255,
        description="Email address",
        examples=["user@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address with validation and normalization.

Validation:
- At most 255 characters
- RFC format via email-validator
- Normalized to lowercase

Examples:
    >>> from pydantic import BaseModel
    >>> class ForgotPassword(BaseModel):
    ...     email: Email
    >>> ForgotPassword(email="User@Example.COM").email
    'user@example.com'
"""

Password = Annotated[
    str,
    Field(
        min_length=8,
        description="Account password (at least 8 characters, at most 72 bytes)",
        examples=["secret-password"],
    ),
    AfterValidator(validate_password_bytes),
]
"""Password with length bounds.

No composition rules; only length is enforced:
- At least 8 characters
- At most 72 bytes once UTF-8 encoded (bcrypt input limit)
"""

Name = Annotated[
    str,
    Field(
        max_length=255,
        description="Display name",
        examples=["Jane Doe"],
    ),
    AfterValidator(validate_name),
]

ResetToken = Annotated[
    str,
    Field(
        min_length=1,
        max_length=255,
        description="Password reset token from the reset link",
    ),
]
