"""PersonalAccessTokenRepository - SQLAlchemy implementation of AccessTokenRepository.

Maps personal_access_tokens rows to AccessTokenData DTOs.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.protocols.access_token_repository import AccessTokenData
from src.infrastructure.persistence.models.personal_access_token import (
    PersonalAccessToken,
)


class PersonalAccessTokenRepository:
    """SQLAlchemy implementation of AccessTokenRepository protocol.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = PersonalAccessTokenRepository(session)
        ...     revoked = await repo.delete_all_for_user(user_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(
        self,
        token_id: UUID,
        user_id: UUID,
        token_hash: str,
        name: str = "auth-token",
    ) -> AccessTokenData:
        """Insert a token row.

        Returns:
            Stored token as AccessTokenData.
        """
        model = PersonalAccessToken(
            id=token_id,
            user_id=user_id,
            name=name,
            token_hash=token_hash,
        )
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        return self._to_data(model)

    async def find_by_id(self, token_id: UUID) -> AccessTokenData | None:
        stmt = select(PersonalAccessToken).where(PersonalAccessToken.id == token_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._to_data(model)

    async def touch(self, token_id: UUID, used_at: datetime) -> None:
        stmt = (
            update(PersonalAccessToken)
            .where(PersonalAccessToken.id == token_id)
            .values(last_used_at=used_at)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every token of a user.

        Returns:
            Number of rows deleted.
        """
        stmt = delete(PersonalAccessToken).where(
            PersonalAccessToken.user_id == user_id
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0

    async def count_for_user(self, user_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(PersonalAccessToken)
            .where(PersonalAccessToken.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    def _to_data(self, model: PersonalAccessToken) -> AccessTokenData:
        return AccessTokenData(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            token_hash=model.token_hash,
            last_used_at=model.last_used_at,
            created_at=model.created_at,
        )
