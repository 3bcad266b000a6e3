"""Validators package exports."""

from src.domain.validators.functions import (
    PASSWORD_MAX_BYTES,
    validate_email,
    validate_name,
    validate_password_bytes,
)

__all__ = [
    "PASSWORD_MAX_BYTES",
    "validate_email",
    "validate_name",
    "validate_password_bytes",
]
