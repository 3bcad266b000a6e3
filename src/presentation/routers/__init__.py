"""Routers mounted by the application.

- system_router: root and health endpoints
- api: authentication and profile endpoints
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
