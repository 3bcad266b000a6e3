"""Bearer token authentication dependencies.

Protected routes declare ``get_current_account`` and receive the resolved
account. A missing, malformed or unknown token yields 401 "Unauthenticated.".

Usage:
    @router.get("/profile")
    async def profile(
        current: CurrentAccount = Depends(get_current_account),
    ):
        return {"id": str(current.account_id)}
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.application.dtos import CurrentAccount
from src.application.queries import ResolveAccessToken
from src.application.queries.handlers.resolve_access_token_handler import (
    ResolveAccessTokenHandler,
)
from src.core.container import get_resolve_access_token_handler
from src.core.result import Failure, Success

UNAUTHENTICATED_MESSAGE = "Unauthenticated."

# auto_error=False so a missing header renders our own 401 body
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHENTICATED_MESSAGE,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_account(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    handler: Annotated[
        ResolveAccessTokenHandler, Depends(get_resolve_access_token_handler)
    ],
) -> CurrentAccount:
    """Resolve the bearer token into the calling account.

    Args:
        credentials: Bearer credentials from the Authorization header.
        handler: Token resolution query handler (injected).

    Returns:
        CurrentAccount for the token's owner.

    Raises:
        HTTPException 401: If the token is missing or does not resolve.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthenticated()

    result = await handler.handle(ResolveAccessToken(plain_text=credentials.credentials))

    match result:
        case Success(value=current):
            return current
        case Failure(error=_):
            raise _unauthenticated()
