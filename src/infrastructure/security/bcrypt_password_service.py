"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol (structural typing, no inheritance).
Injected via the dependency container with the configured cost factor.

Performance:
    Cost factor is logarithmic: each +1 doubles computation time.
    - 4 = test suites only
    - 12 = ~250ms per hash (production default)
"""

import bcrypt

MIN_COST_FACTOR = 4
MAX_COST_FACTOR = 31


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("secret-password")
        password_service.verify_password("secret-password", password_hash)  # True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12).

        Raises:
            ValueError: If cost_factor is outside the range bcrypt accepts.
        """
        if not MIN_COST_FACTOR <= cost_factor <= MAX_COST_FACTOR:
            msg = (
                f"Cost factor must be between {MIN_COST_FACTOR} "
                f"and {MAX_COST_FACTOR}"
            )
            raise ValueError(msg)

        self._cost_factor = cost_factor

    @property
    def cost_factor(self) -> int:
        return self._cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$..., 60 characters).
            Each call produces a different hash (random salt).
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Hashed password from database.

        Returns:
            True if password matches hash, False otherwise (including a
            malformed hash).
        """
        try:
            # bcrypt.checkpw does constant-time comparison
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            # Invalid hash format or encoding error
            return False
