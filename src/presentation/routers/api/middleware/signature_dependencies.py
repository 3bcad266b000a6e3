"""Signed link validation for routes reached through emailed URLs."""

from typing import Annotated

from fastapi import Depends, HTTPException, Query, Request, status

from src.core.container import get_link_signer
from src.domain.protocols import LinkSignerProtocol

INVALID_SIGNATURE_MESSAGE = "Invalid signature."


async def require_valid_signature(
    request: Request,
    signer: Annotated[LinkSignerProtocol, Depends(get_link_signer)],
    expires: Annotated[str | None, Query()] = None,
    signature: Annotated[str | None, Query()] = None,
) -> None:
    """Reject requests whose ``expires``/``signature`` do not match the path.

    ``expires`` is taken as text so a tampered value fails the signature
    check (403) instead of request validation (422).

    Raises:
        HTTPException 403: If the signature is missing, wrong or expired.
    """
    # str.isdigit() also accepts non-ASCII digits that int() rejects
    expires_at = (
        int(expires)
        if expires is not None and expires.isascii() and expires.isdigit()
        else None
    )
    if not signer.verify(request.url.path, expires_at, signature):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=INVALID_SIGNATURE_MESSAGE,
        )
