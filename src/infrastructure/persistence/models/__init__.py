"""Database models package.

Importing this package registers every table on Base.metadata
(used by Database.create_all and Alembic autogenerate).
"""

from src.infrastructure.persistence.models.password_reset import PasswordReset
from src.infrastructure.persistence.models.personal_access_token import (
    PersonalAccessToken,
)
from src.infrastructure.persistence.models.user import User

__all__ = [
    "PasswordReset",
    "PersonalAccessToken",
    "User",
]
