"""Unit tests for the salted HMAC password scheme."""

from __future__ import annotations

import base64
import hashlib
import hmac

from authrealm.kernel.security import HmacPasswordHasher, PasswordHasher
from authrealm.security.random import SecureRandomGenerator


class TestHmacPasswordHasher:
    def _hasher(self) -> HmacPasswordHasher:
        return HmacPasswordHasher(SecureRandomGenerator(), salt_bits=96)

    def test_is_password_hasher(self) -> None:
        assert isinstance(self._hasher(), PasswordHasher)

    def test_record_format(self) -> None:
        salt, hashed = self._hasher().hash("secret").split(" ")
        assert len(salt) == 16  # 96 bits -> 12 bytes -> 16 base64 chars
        expected = hmac.new(salt.encode(), b"secret", hashlib.sha256).digest()
        assert hashed == base64.urlsafe_b64encode(expected).rstrip(b"=").decode()

    def test_salts_differ(self) -> None:
        hasher = self._hasher()
        assert hasher.hash("secret") != hasher.hash("secret")

    def test_verify(self) -> None:
        hasher = self._hasher()
        record = hasher.hash("secret")
        assert hasher.verify("secret", record) is True
        assert hasher.verify("wrong", record) is False

    def test_verify_malformed_record(self) -> None:
        hasher = self._hasher()
        assert hasher.verify("secret", "") is False
        assert hasher.verify("secret", "nospace") is False
        assert hasher.verify("secret", " trailing") is False

    def test_digest_is_deterministic(self) -> None:
        assert HmacPasswordHasher.digest("salt", "pw") == HmacPasswordHasher.digest("salt", "pw")

    def test_verify_non_ascii_record(self) -> None:
        hasher = self._hasher()
        assert hasher.verify("secret", "sälz abc") is False
        assert hasher.verify("secret", "é é") is False

    def test_non_ascii_password_round_trip(self) -> None:
        hasher = self._hasher()
        record = hasher.hash("päss")
        assert hasher.verify("päss", record) is True
        assert hasher.verify("pass", record) is False
