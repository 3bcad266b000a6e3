"""Profile router.

Endpoints:
    GET /profile - Current account (bearer token required)
"""

from fastapi import APIRouter, Depends

from src.application.dtos import CurrentAccount
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_account,
)
from src.schemas.auth_schemas import ProfileResponse

router = APIRouter(tags=["Profile"])


@router.get(
    "/profile",
    response_model=ProfileResponse,
    responses={401: {"description": "Unauthenticated"}},
    summary="Current account",
)
async def show_profile(
    current: CurrentAccount = Depends(get_current_account),
) -> ProfileResponse:
    return ProfileResponse(id=current.account_id, name=current.name, email=current.email)
