"""Centralized validation functions (DRY principle).

All validation logic defined once, reused everywhere via Annotated types.
Validators are pure functions that raise ValueError on validation failure.
The ValueError text is the message shown to API clients.
"""

from email_validator import EmailNotValidError
from email_validator import validate_email as _check_email


def validate_email(v: str) -> str:
    """Validate email format.

    Uses the email-validator library without deliverability (DNS) checks.

    Args:
        v: Email address to validate.

    Returns:
        Email stripped and lowercased.

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("User@Example.COM")
        'user@example.com'
    """
    candidate = v.strip()
    try:
        _check_email(candidate, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError("The email must be a valid email address.") from e
    return candidate.lower()


def validate_name(v: str) -> str:
    """Validate display name (non-blank after trimming)."""
    stripped = v.strip()
    if not stripped:
        raise ValueError("The name field is required.")
    return stripped


# bcrypt only reads the first 72 bytes of its input
PASSWORD_MAX_BYTES = 72


def validate_password_bytes(v: str) -> str:
    """Reject passwords bcrypt cannot hash in full.

    The limit is on UTF-8 bytes, so multi-byte characters count more than once.

    Raises:
        ValueError: If the encoded password is longer than 72 bytes.
    """
    if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(
            f"The password must not be greater than {PASSWORD_MAX_BYTES} bytes."
        )
    return v
