"""User database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - email_verified_at: NULL until the email is verified; login requires it
    - remember_token: rotated on every password reset
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model for authentication.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Registration timestamp (from BaseMutableModel)
        updated_at: Last modification (from BaseMutableModel)
        name: Display name
        email: Unique email address (lowercase, indexed)
        password_hash: Bcrypt hashed password
        email_verified_at: Verification timestamp (nullable)
        remember_token: 60-character rotation value (nullable)

    Relationships:
        - access_tokens: One-to-many (cascade delete)
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    email_verified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Email verification timestamp (NULL = unverified)",
    )

    remember_token: Mapped[str | None] = mapped_column(
        String(60),
        nullable=True,
    )

    access_tokens = relationship(
        "PersonalAccessToken",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
