"""Authentication router.

Endpoints:
    POST     /auth/registration                      - Register an account (201)
    GET      /auth/verify-email/{id}/{hash}          - Verify email via signed link
    GET|POST /auth/resend-email-verification         - Resend verification email
    POST     /auth/login                             - Issue a personal access token
    POST     /auth/logout                            - Delete every token of the caller
    POST     /auth/forgot-password                   - Email a password reset link
    POST     /auth/reset-password                    - Set a new password with a reset token

Successful calls other than login return an empty body. Failures render
``{"message": ...}`` through ErrorResponseBuilder.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import (
    LoginUser,
    LogoutUser,
    RegisterUser,
    RequestPasswordReset,
    ResendVerificationEmail,
    ResetPassword,
    VerifyEmail,
)
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from src.application.commands.handlers.resend_verification_email_handler import (
    ResendVerificationEmailHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.commands.handlers.verify_email_handler import (
    VerificationError,
    VerifyEmailHandler,
)
from src.application.dtos import CurrentAccount
from src.core.container import (
    get_login_user_handler,
    get_logout_user_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_resend_verification_email_handler,
    get_reset_password_handler,
    get_verify_email_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_account,
)
from src.presentation.routers.api.middleware.signature_dependencies import (
    require_valid_signature,
)
from src.schemas.auth_schemas import (
    AccessTokenResponse,
    ForgotPasswordRequest,
    LoginRequest,
    RegistrationRequest,
    ResendVerificationRequest,
    ResetPasswordRequest,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])

_ERROR_RESPONSES: dict[int | str, dict[str, str]] = {
    422: {"description": "Validation or business rule failure"},
}


@router.post(
    "/registration",
    status_code=status.HTTP_201_CREATED,
    responses={
        **_ERROR_RESPONSES,
        500: {"description": "Registration failed"},
    },
    summary="Register account",
)
async def register(
    data: RegistrationRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> Response:
    """Create an unverified account and send the verification email."""
    command = RegisterUser(name=data.name, email=data.email, password=data.password)

    result = await handler.handle(command)

    match result:
        case Success(value=_):
            return Response(status_code=status.HTTP_201_CREATED)
        case Failure(error=error):
            return ErrorResponseBuilder.from_reason(error)


@router.get(
    "/verify-email/{account_id}/{email_hash}",
    dependencies=[Depends(require_valid_signature)],
    responses={
        **_ERROR_RESPONSES,
        403: {"description": "Invalid or expired signature"},
    },
    summary="Verify email",
)
async def verify_email(
    account_id: str,
    email_hash: str,
    handler: VerifyEmailHandler = Depends(get_verify_email_handler),
) -> Response:
    """Mark the account's email as verified.

    The signature dependency has already checked ``expires``/``signature``
    against the request path before this runs.
    """
    try:
        parsed_id = UUID(account_id)
    except ValueError:
        return ErrorResponseBuilder.from_reason(VerificationError.ACCOUNT_NOT_FOUND)

    result = await handler.handle(
        VerifyEmail(account_id=parsed_id, email_hash=email_hash)
    )

    match result:
        case Success(value=_):
            return Response(status_code=status.HTTP_200_OK)
        case Failure(error=error):
            return ErrorResponseBuilder.from_reason(error)


async def _resend(email: str, handler: ResendVerificationEmailHandler) -> Response:
    result = await handler.handle(ResendVerificationEmail(email=email))

    match result:
        case Success(value=_):
            return Response(status_code=status.HTTP_200_OK)
        case Failure(error=error):
            return ErrorResponseBuilder.from_reason(error)


@router.get(
    "/resend-email-verification",
    responses=_ERROR_RESPONSES,
    summary="Resend verification email",
)
async def resend_email_verification_query(
    email: str | None = Query(default=None),
    handler: ResendVerificationEmailHandler = Depends(
        get_resend_verification_email_handler
    ),
) -> Response:
    """Resend the verification email (email from the query string)."""
    if not email:
        return ErrorResponseBuilder.field_errors(
            {"email": ["The email field is required."]}
        )
    return await _resend(email, handler)


@router.post(
    "/resend-email-verification",
    responses=_ERROR_RESPONSES,
    summary="Resend verification email",
)
async def resend_email_verification(
    data: ResendVerificationRequest,
    handler: ResendVerificationEmailHandler = Depends(
        get_resend_verification_email_handler
    ),
) -> Response:
    """Resend the verification email (email from the JSON body)."""
    return await _resend(data.email, handler)


@router.post(
    "/login",
    response_model=AccessTokenResponse,
    responses=_ERROR_RESPONSES,
    summary="Log in",
)
async def login(
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> AccessTokenResponse | JSONResponse:
    """Check credentials and issue a personal access token.

    Returns:
        AccessTokenResponse on success; 422 for unknown email, wrong
        password or an unverified account.
    """
    result = await handler.handle(LoginUser(email=data.email, password=data.password))

    match result:
        case Success(value=response):
            return AccessTokenResponse(access_token=response.access_token)
        case Failure(error=error):
            return ErrorResponseBuilder.from_reason(error)


@router.post(
    "/logout",
    responses={401: {"description": "Unauthenticated"}},
    summary="Log out",
)
async def logout(
    current: CurrentAccount = Depends(get_current_account),
    handler: LogoutUserHandler = Depends(get_logout_user_handler),
) -> Response:
    """Delete every access token of the calling account."""
    result = await handler.handle(LogoutUser(account_id=current.account_id))

    match result:
        case Success(value=_):
            return Response(status_code=status.HTTP_200_OK)
        case Failure(error=error):
            return ErrorResponseBuilder.from_reason(error)


@router.post(
    "/forgot-password",
    responses=_ERROR_RESPONSES,
    summary="Request password reset",
)
async def forgot_password(
    data: ForgotPasswordRequest,
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> Response:
    """Email a password reset link unless one was requested moments ago."""
    result = await handler.handle(RequestPasswordReset(email=data.email))

    match result:
        case Success(value=_):
            return Response(status_code=status.HTTP_200_OK)
        case Failure(error=error):
            return ErrorResponseBuilder.from_reason(error)


@router.post(
    "/reset-password",
    responses=_ERROR_RESPONSES,
    summary="Reset password",
)
async def reset_password(
    data: ResetPasswordRequest,
    handler: ResetPasswordHandler = Depends(get_reset_password_handler),
) -> Response:
    """Set a new password using the token from the reset email."""
    command = ResetPassword(email=data.email, password=data.password, token=data.token)

    result = await handler.handle(command)

    match result:
        case Success(value=_):
            return Response(status_code=status.HTTP_200_OK)
        case Failure(error=error):
            return ErrorResponseBuilder.from_reason(error)
