"""Repository implementations (SQLAlchemy adapters for domain protocols)."""

from src.infrastructure.persistence.repositories.password_reset_repository import (
    PasswordResetRepository,
)
from src.infrastructure.persistence.repositories.personal_access_token_repository import (
    PersonalAccessTokenRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "PasswordResetRepository",
    "PersonalAccessTokenRepository",
    "UserRepository",
]
