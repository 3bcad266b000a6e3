"""Authentication DTOs (Data Transfer Objects).

Response/result dataclasses for authentication handlers.
These carry data from handlers back to the presentation layer.

DTOs:
    - LoginResponse: Result from LoginUser command
    - CurrentAccount: Result from ResolveAccessToken query
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class LoginResponse:
    """Response from successful login.

    Attributes:
        access_token: Plaintext bearer token, shown to the client once.
    """

    access_token: str


@dataclass(frozen=True, kw_only=True)
class CurrentAccount:
    """Account resolved from a bearer token.

    Attributes:
        account_id: Account identifier.
        name: Display name.
        email: Email address.
        token_id: Token used for this request.
    """

    account_id: UUID
    name: str
    email: str
    token_id: UUID
