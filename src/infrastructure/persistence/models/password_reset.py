"""Password reset database model.

Keyed by email: at most one live reset request per address. A new
request overwrites the row; a successful reset deletes it.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import Base


class PasswordReset(Base):
    """Password reset request model.

    Fields:
        email: Account email (primary key)
        token_hash: Bcrypt hash of the plaintext token
        created_at: Request timestamp (drives throttle and expiry)
    """

    __tablename__ = "password_resets"

    email: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
    )

    token_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<PasswordReset(email={self.email})>"
