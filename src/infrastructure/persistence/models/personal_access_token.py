"""Personal access token database model.

One row per successful login. The plaintext secret is never stored;
token_hash is its sha256 hex digest.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel


class PersonalAccessToken(BaseModel):
    """Bearer token model.

    Fields:
        id: Token ID, embedded in the plaintext token (from BaseModel)
        created_at: Login timestamp (from BaseModel)
        user_id: Owning user (cascade delete)
        name: Token label ("auth-token")
        token_hash: sha256 hex digest of the secret (unique)
        last_used_at: Last successful bearer resolution (nullable)

    Indexes:
        - user_id: for logout (delete all tokens of a user)
    """

    __tablename__ = "personal_access_tokens"

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="auth-token",
    )

    token_hash: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
    )

    last_used_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    user = relationship("User", back_populates="access_tokens")
