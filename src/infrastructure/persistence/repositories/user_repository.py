"""UserRepository - SQLAlchemy implementation of AccountRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Account entities and the users table.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.account import Account
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of AccountRepository protocol.

    This class does NOT inherit from the protocol (structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     account = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Domain Account entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.id == account_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email address (case-insensitive).

        Args:
            email: Email address.

        Returns:
            Domain Account entity if found, None otherwise.
        """
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(UserModel.id).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, account: Account) -> None:
        """Create new user row.

        Raises:
            IntegrityError: If email already exists.
        """
        user_model = self._to_model(account)
        self.session.add(user_model)
        await self.session.commit()
        await self.session.refresh(user_model)

    async def update(self, account: Account) -> None:
        """Persist mutable fields of an existing account.

        Raises:
            NoResultFound: If the account doesn't exist.
        """
        stmt = select(UserModel).where(UserModel.id == account.id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        user_model.name = account.name
        user_model.email = account.email
        user_model.password_hash = account.password_hash
        user_model.email_verified_at = account.verified_at
        user_model.remember_token = account.remember_token
        if account.updated_at is not None:
            user_model.updated_at = account.updated_at

        await self.session.commit()

    def _to_domain(self, user_model: UserModel) -> Account:
        return Account(
            id=user_model.id,
            name=user_model.name,
            email=user_model.email,
            password_hash=user_model.password_hash,
            verified_at=user_model.email_verified_at,
            remember_token=user_model.remember_token,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )

    def _to_model(self, account: Account) -> UserModel:
        user_model = UserModel(
            id=account.id,
            name=account.name,
            email=account.email,
            password_hash=account.password_hash,
            email_verified_at=account.verified_at,
            remember_token=account.remember_token,
        )
        # Leave timestamps to server defaults when the entity has none
        if account.created_at is not None:
            user_model.created_at = account.created_at
        if account.updated_at is not None:
            user_model.updated_at = account.updated_at
        return user_model
