"""PasswordResetRepository - SQLAlchemy implementation of PasswordResetRepository.

One row per email. replace() deletes and re-inserts inside the same
transaction so the row never disappears for concurrent readers.
"""

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.protocols.password_reset_repository import PasswordResetData
from src.infrastructure.persistence.models.password_reset import PasswordReset


class PasswordResetRepository:
    """SQLAlchemy implementation of PasswordResetRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_email(self, email: str) -> PasswordResetData | None:
        """Find the reset row for an email.

        Args:
            email: Account email.

        Returns:
            PasswordResetData if present, None otherwise.
        """
        stmt = select(PasswordReset).where(PasswordReset.email == email)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return PasswordResetData(
            email=model.email,
            token_hash=model.token_hash,
            created_at=model.created_at,
        )

    async def replace(
        self,
        email: str,
        token_hash: str,
        created_at: datetime,
    ) -> PasswordResetData:
        """Store a new reset request, superseding any previous one."""
        await self.session.execute(
            delete(PasswordReset).where(PasswordReset.email == email)
        )
        self.session.add(
            PasswordReset(email=email, token_hash=token_hash, created_at=created_at)
        )
        await self.session.commit()
        return PasswordResetData(
            email=email,
            token_hash=token_hash,
            created_at=created_at,
        )

    async def delete(self, email: str) -> None:
        await self.session.execute(
            delete(PasswordReset).where(PasswordReset.email == email)
        )
        await self.session.commit()
