"""Application DTOs package."""

from src.application.dtos.auth_dtos import CurrentAccount, LoginResponse

__all__ = [
    "CurrentAccount",
    "LoginResponse",
]
