"""Error responses for the authentication API.

Every error body carries a human ``message``. Field-level failures also
carry ``errors`` mapping field names to message lists:

    {"message": "The email has already been taken.",
     "errors": {"email": ["The email has already been taken."]}}

Handler failure reasons are translated by ``ErrorResponseBuilder.from_reason``.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.login_user_handler import LoginError
from src.application.commands.handlers.logout_user_handler import LogoutError
from src.application.commands.handlers.register_user_handler import (
    RegistrationError,
)
from src.application.commands.handlers.request_password_reset_handler import (
    PasswordResetRequestError,
)
from src.application.commands.handlers.resend_verification_email_handler import (
    ResendError,
)
from src.application.commands.handlers.reset_password_handler import (
    PasswordResetError,
)
from src.application.commands.handlers.verify_email_handler import (
    VerificationError,
)

SERVER_ERROR_MESSAGE = "Server Error"

_UNPROCESSABLE = status.HTTP_422_UNPROCESSABLE_ENTITY

# reason -> (status code, message, field the message belongs to)
REASON_RESPONSES: dict[str, tuple[int, str, str | None]] = {
    VerificationError.ACCOUNT_NOT_FOUND: (
        _UNPROCESSABLE,
        "No account found for confirmation.",
        None,
    ),
    VerificationError.ALREADY_CONFIRMED: (
        _UNPROCESSABLE,
        "The account has already been confirmed.",
        None,
    ),
    VerificationError.INVALID_HASH: (
        _UNPROCESSABLE,
        "Incorrect data to confirm the account.",
        None,
    ),
    VerificationError.CONFIRMATION_FAILED: (
        _UNPROCESSABLE,
        "Account confirmation error.",
        None,
    ),
    ResendError.SEND_FAILED: (_UNPROCESSABLE, "Account confirmation error.", None),
    LoginError.INVALID_CREDENTIALS: (
        _UNPROCESSABLE,
        "These credentials do not match our records.",
        None,
    ),
    LoginError.NOT_VERIFIED: (_UNPROCESSABLE, "Account not verified.", None),
    PasswordResetRequestError.ACCOUNT_NOT_FOUND: (
        _UNPROCESSABLE,
        "No account found for password reset.",
        "email",
    ),
    PasswordResetRequestError.RESET_THROTTLED: (
        _UNPROCESSABLE,
        "The password reset has been requested previously.",
        None,
    ),
    PasswordResetRequestError.RESET_REQUEST_FAILED: (
        _UNPROCESSABLE,
        "Error sending a link to create a new password.",
        None,
    ),
    PasswordResetError.INVALID_TOKEN: (_UNPROCESSABLE, "Invalid reset token.", None),
    PasswordResetError.RESET_FAILED: (
        _UNPROCESSABLE,
        "Error setting a new password.",
        None,
    ),
    RegistrationError.EMAIL_TAKEN: (
        _UNPROCESSABLE,
        "The email has already been taken.",
        "email",
    ),
    RegistrationError.REGISTRATION_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Registration failed",
        None,
    ),
    LogoutError.REVOCATION_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        SERVER_ERROR_MESSAGE,
        None,
    ),
}


class ErrorResponseBuilder:
    """Build ``{"message": ...}`` error responses.

    Example:
        >>> ErrorResponseBuilder.from_reason(LoginError.NOT_VERIFIED)
        >>> # 422 {"message": "Account not verified."}
    """

    @staticmethod
    def message(
        status_code: int,
        message: str,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Plain error response with a single message."""
        return JSONResponse(
            status_code=status_code,
            content={"message": message},
            headers=headers,
        )

    @staticmethod
    def field_errors(errors: dict[str, list[str]]) -> JSONResponse:
        """422 response for field-level failures.

        The top-level message is the first message of the first field.

        Args:
            errors: Field name to list of messages (insertion ordered).
        """
        first = next(
            (messages[0] for messages in errors.values() if messages),
            "The given data was invalid.",
        )
        return JSONResponse(
            status_code=_UNPROCESSABLE,
            content={"message": first, "errors": errors},
        )

    @staticmethod
    def from_reason(reason: str) -> JSONResponse:
        """Translate a handler failure reason into an HTTP response.

        Unknown reasons become 500 "Server Error" so internal detail never
        reaches the client.
        """
        status_code, message, field = REASON_RESPONSES.get(
            reason,
            (status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE, None),
        )
        if field is not None:
            return ErrorResponseBuilder.field_errors({field: [message]})
        return ErrorResponseBuilder.message(status_code, message)
