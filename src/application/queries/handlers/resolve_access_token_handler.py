"""Resolve access token query handler.

Turns a presented bearer token into the authenticated account. The only
side effect is recording token usage (last_used_at).
"""

from datetime import UTC, datetime

from src.application.dtos import CurrentAccount
from src.application.queries.auth_queries import ResolveAccessToken
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    AccessTokenRepository,
    AccessTokenServiceProtocol,
    AccountRepository,
)


class ResolveTokenError:
    """Bearer resolution error reasons."""

    MALFORMED_TOKEN = "malformed_token"
    TOKEN_NOT_FOUND = "token_not_found"
    TOKEN_MISMATCH = "token_mismatch"
    ACCOUNT_NOT_FOUND = "token_account_not_found"


class ResolveAccessTokenHandler:
    """Handler for ResolveAccessToken query."""

    def __init__(
        self,
        token_repo: AccessTokenRepository,
        account_repo: AccountRepository,
        token_service: AccessTokenServiceProtocol,
    ) -> None:
        self._token_repo = token_repo
        self._account_repo = account_repo
        self._token_service = token_service

    async def handle(self, query: ResolveAccessToken) -> Result[CurrentAccount, str]:
        """Handle resolve access token query.

        Args:
            query: ResolveAccessToken query with the plaintext token.

        Returns:
            Success(CurrentAccount) for a live token.
            Failure(ResolveTokenError.*) otherwise (all map to 401).
        """
        # Step 1: Parse "<id>|<secret>"
        parsed = self._token_service.parse_plain_text(query.plain_text)
        if parsed is None:
            return Failure(error=ResolveTokenError.MALFORMED_TOKEN)
        token_id, secret = parsed

        # Step 2: Look up by ID
        token = await self._token_repo.find_by_id(token_id)
        if token is None:
            return Failure(error=ResolveTokenError.TOKEN_NOT_FOUND)

        # Step 3: Constant-time secret comparison
        if not self._token_service.verify_secret(secret, token.token_hash):
            return Failure(error=ResolveTokenError.TOKEN_MISMATCH)

        # Step 4: Load owner
        account = await self._account_repo.find_by_id(token.user_id)
        if account is None:
            return Failure(error=ResolveTokenError.ACCOUNT_NOT_FOUND)

        # Step 5: Record usage
        await self._token_repo.touch(token.id, datetime.now(UTC))

        return Success(
            value=CurrentAccount(
                account_id=account.id,
                name=account.name,
                email=account.email,
                token_id=token.id,
            )
        )
