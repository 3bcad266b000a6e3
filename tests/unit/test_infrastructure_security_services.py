"""Unit tests for the security adapters.

Tests cover:
- BcryptPasswordService hashing, verification and cost bounds
- AccessTokenService format, parsing and digest comparison
- HmacLinkSigner signing, tampering and expiry
- PasswordResetTokenService windows
"""

import hashlib
from datetime import UTC, datetime, timedelta
from urllib.parse import parse_qs, urlsplit
from uuid import uuid4

import pytest

from src.infrastructure.security import (
    AccessTokenService,
    BcryptPasswordService,
    HmacLinkSigner,
    PasswordResetTokenService,
)


@pytest.mark.unit
class TestBcryptPasswordService:
    @pytest.fixture
    def service(self):
        return BcryptPasswordService(cost_factor=4)

    def test_hash_and_verify(self, service):
        password_hash = service.hash_password("correct horse")

        assert password_hash.startswith("$2b$04$")
        assert service.verify_password("correct horse", password_hash)
        assert not service.verify_password("wrong horse", password_hash)

    def test_hashes_are_salted(self, service):
        assert service.hash_password("same") != service.hash_password("same")

    def test_malformed_hash_does_not_verify(self, service):
        assert service.verify_password("anything", "not-a-bcrypt-hash") is False

    @pytest.mark.parametrize("cost_factor", [3, 32])
    def test_cost_factor_bounds(self, cost_factor):
        with pytest.raises(ValueError, match="Cost factor"):
            BcryptPasswordService(cost_factor=cost_factor)


@pytest.mark.unit
class TestAccessTokenService:
    @pytest.fixture
    def service(self):
        return AccessTokenService()

    def test_generate_secret(self, service):
        secret, secret_hash = service.generate_secret()

        assert len(secret) == 40
        assert secret.isalnum()
        assert secret_hash == hashlib.sha256(secret.encode()).hexdigest()

    def test_plain_text_round_trip(self, service):
        token_id = uuid4()

        plain_text = service.format_plain_text(token_id, "abc")

        assert plain_text == f"{token_id}|abc"
        assert service.parse_plain_text(plain_text) == (token_id, "abc")

    @pytest.mark.parametrize(
        "plain_text", ["", "abc", f"{uuid4()}|", "not-a-uuid|secret"]
    )
    def test_parse_rejects_malformed(self, service, plain_text):
        assert service.parse_plain_text(plain_text) is None

    def test_verify_secret(self, service):
        secret, secret_hash = service.generate_secret()

        assert service.verify_secret(secret, secret_hash)
        assert not service.verify_secret(secret + "x", secret_hash)


@pytest.mark.unit
class TestHmacLinkSigner:
    PATH = "/auth/verify-email/abc/def"

    @pytest.fixture
    def signer(self):
        return HmacLinkSigner(secret_key="test-app-key", expire_minutes=60)

    def _params(self, url):
        query = parse_qs(urlsplit(url).query)
        return int(query["expires"][0]), query["signature"][0]

    def test_signed_link_verifies(self, signer):
        url = signer.sign(self.PATH)
        expires, signature = self._params(url)

        assert url.startswith(self.PATH + "?expires=")
        assert signer.verify(self.PATH, expires, signature)

    def test_default_lifetime(self, signer):
        now = datetime.now(UTC)
        expires, _ = self._params(signer.sign(self.PATH))

        assert abs(expires - int((now + timedelta(minutes=60)).timestamp())) <= 1

    def test_signature_is_url_safe(self, signer):
        _, signature = self._params(signer.sign(self.PATH))

        assert signature
        assert set(signature) <= set(
            "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
        )

    @pytest.mark.parametrize("signature", ["not-base64!!", "²", "00"])
    def test_garbage_signature_rejected(self, signer, signature):
        expires, _ = self._params(signer.sign(self.PATH))

        assert signer.verify(self.PATH, expires, signature) is False

    def test_case_changed_signature_rejected(self, signer):
        expires, signature = self._params(signer.sign(self.PATH))

        assert not signer.verify(self.PATH, expires, signature.swapcase())

    def test_tampered_path(self, signer):
        expires, signature = self._params(signer.sign(self.PATH))

        assert not signer.verify("/auth/verify-email/abc/other", expires, signature)

    def test_tampered_expiry(self, signer):
        expires, signature = self._params(signer.sign(self.PATH))

        assert not signer.verify(self.PATH, expires + 3600, signature)

    def test_expired_link(self, signer):
        expires_at = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        expires, signature = self._params(signer.sign(self.PATH, expires_at))

        assert signer.verify(self.PATH, expires, signature, now=expires_at)
        assert not signer.verify(
            self.PATH, expires, signature, now=expires_at + timedelta(seconds=1)
        )

    def test_other_key_rejected(self, signer):
        expires, signature = self._params(signer.sign(self.PATH))
        other = HmacLinkSigner(secret_key="other-key")

        assert not other.verify(self.PATH, expires, signature)

    @pytest.mark.parametrize("expires,signature", [(None, "abc"), (1, None), (1, "")])
    def test_missing_parameters(self, signer, expires, signature):
        assert signer.verify(self.PATH, expires, signature) is False


@pytest.mark.unit
class TestPasswordResetTokenService:
    @pytest.fixture
    def service(self):
        return PasswordResetTokenService(
            expire_minutes=60, throttle_seconds=60, cost_factor=4
        )

    def test_token_shape_and_hash(self, service):
        token = service.generate_token()
        token_hash = service.hash_token(token)

        assert len(token) == 64
        int(token, 16)
        assert service.verify_token(token, token_hash)
        assert not service.verify_token(service.generate_token(), token_hash)

    def test_malformed_hash(self, service):
        assert service.verify_token("abc", "garbage") is False

    def test_throttle_window(self, service):
        created = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

        assert service.is_throttled(created, created + timedelta(seconds=59))
        assert not service.is_throttled(created, created + timedelta(seconds=60))

    def test_throttle_disabled(self):
        service = PasswordResetTokenService(throttle_seconds=0, cost_factor=4)
        created = datetime(2026, 1, 1, tzinfo=UTC)

        assert service.is_throttled(created, created) is False

    def test_expiry(self, service):
        created = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

        assert not service.is_expired(created, created + timedelta(minutes=60))
        assert service.is_expired(created, created + timedelta(minutes=61))

    def test_naive_timestamps_are_utc(self, service):
        created = datetime(2026, 1, 1, 12, 0)

        assert service.is_expired(
            created, datetime(2026, 1, 1, 13, 1, tzinfo=UTC)
        )
