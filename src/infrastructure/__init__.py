"""Infrastructure layer - Adapters for domain protocols (ports).

Structure:
- persistence/: SQLAlchemy models, Database, repositories (PostgreSQL)
- security/: bcrypt hashing, access tokens, signed links, reset tokens
- email/: stub email delivery and the account notifier
- events/: in-memory event bus and its subscribers
- logging/: structlog console adapter
- rate_limit/: Redis fixed-window throttle

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
