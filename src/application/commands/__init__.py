"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RegisterUser, ResetPassword).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.auth_commands import (
    LoginUser,
    LogoutUser,
    RegisterUser,
    RequestPasswordReset,
    ResendVerificationEmail,
    ResetPassword,
    VerifyEmail,
)

__all__ = [
    "LoginUser",
    "LogoutUser",
    "RegisterUser",
    "RequestPasswordReset",
    "ResendVerificationEmail",
    "ResetPassword",
    "VerifyEmail",
]
