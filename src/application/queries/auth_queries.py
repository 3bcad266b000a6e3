"""Authentication queries (CQRS read operations).

Queries represent requests for data. They are immutable dataclasses
with question-like names and do NOT emit domain events.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ResolveAccessToken:
    """Resolve the account behind a presented bearer token.

    Attributes:
        plain_text: Token from the Authorization header ("<id>|<secret>").
    """

    plain_text: str
