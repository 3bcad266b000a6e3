"""Security infrastructure adapters.

This package contains security-related infrastructure implementations:
- Password hashing (bcrypt)
- Personal access tokens (sha256-hashed opaque bearer tokens)
- Signed links (HMAC-SHA256 with expiry)
- Password reset tokens (bcrypt-hashed hex tokens with throttle and expiry)
"""

from src.infrastructure.security.access_token_service import AccessTokenService
from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.password_reset_token_service import (
    PasswordResetTokenService,
)
from src.infrastructure.security.signed_link_service import HmacLinkSigner

__all__ = [
    "AccessTokenService",
    "BcryptPasswordService",
    "HmacLinkSigner",
    "PasswordResetTokenService",
]
