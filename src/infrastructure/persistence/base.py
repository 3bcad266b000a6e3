"""Declarative base and model base classes.

This module provides:
- Base: DeclarativeBase shared by every table (single metadata)
- BaseModel: id + created_at, for append-only rows
- BaseMutableModel: BaseModel + updated_at, for rows that change

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities should NOT inherit from this
- Repositories map domain entities to/from these models

Usage:
    class UserModel(BaseMutableModel):
        __tablename__ = "users"
        email: Mapped[str]
        # Has: id, created_at, updated_at

Tables keyed by something other than a UUID (password_resets is keyed by
email) inherit Base directly.
"""

from datetime import datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class Base(DeclarativeBase):
    """Root declarative class; owns the shared MetaData."""


class BaseModel(Base):
    """Base class for UUID-keyed models.

    Provides:
    - id: UUID primary key (UUIDv7, normally assigned by the application)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),  # Database sets this on INSERT
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class BaseMutableModel(BaseModel):
    """Base class for mutable models.

    Adds updated_at, refreshed by the database on every UPDATE.
    """

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data
