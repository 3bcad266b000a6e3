"""AccountRepository protocol (port) for the credential store.

Following hexagonal architecture:
- Domain defines what it needs (this protocol)
- Infrastructure provides the SQLAlchemy implementation
- Email uniqueness is enforced by the store (unique constraint)
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.account import Account


class AccountRepository(Protocol):
    """Account persistence operations.

    Implementations:
        - UserRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email address (case-insensitive).

        Args:
            email: Email address.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check whether an account uses this email.

        Args:
            email: Email address (case-insensitive).

        Returns:
            True if an account exists.
        """
        ...

    async def save(self, account: Account) -> None:
        """Create a new account.

        Args:
            account: Account to persist.

        Raises:
            Exception: Store failures (including unique violations) propagate.
        """
        ...

    async def update(self, account: Account) -> None:
        """Persist changes to an existing account.

        Args:
            account: Account with modified fields.

        Raises:
            ValueError: If the account does not exist.
        """
        ...
