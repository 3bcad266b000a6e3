"""HTTP API routers, middleware and error rendering."""

from src.presentation.routers.api.auth import router as auth_router
from src.presentation.routers.api.profile import router as profile_router

__all__ = ["auth_router", "profile_router"]
