"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (ResolveAccessToken).

Each query has a corresponding handler that fetches and returns the requested
data. Queries never emit domain events.
"""

from src.application.queries.auth_queries import ResolveAccessToken

__all__ = [
    "ResolveAccessToken",
]
