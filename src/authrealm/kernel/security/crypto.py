"""Kernel security – PasswordHasher port and the salted HMAC scheme."""
from __future__ import annotations

import abc
import base64
import hashlib
import hmac
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from authrealm.security.random import SecureRandomGenerator


class PasswordHasher(abc.ABC):
    """Port: one-way password hashing."""

    @abc.abstractmethod
    def hash(self, password: str) -> str: ...

    @abc.abstractmethod
    def verify(self, password: str, hashed: str) -> bool: ...


class HmacPasswordHasher(PasswordHasher):
    """Salted keyed hash stored as ``"<salt> <hash>"``.

    The salt is a random base64url string; the hash is the unpadded
    base64url HMAC-SHA256 of the password keyed with that salt.
    """

    ALG = hashlib.sha256

    def __init__(self, random: "SecureRandomGenerator", salt_bits: int = 128) -> None:
        self._random = random
        self._salt_bits = salt_bits

    @classmethod
    def digest(cls, salt: str, password: str) -> str:
        mac = hmac.new(salt.encode(), password.encode(), cls.ALG).digest()
        return base64.urlsafe_b64encode(mac).rstrip(b"=").decode("ascii")

    def hash(self, password: str) -> str:
        salt = self._random.generate(self._salt_bits)
        return f"{salt} {self.digest(salt, password)}"

    def verify(self, password: str, hashed: str) -> bool:
        salt, sep, expected = hashed.partition(" ")
        if not sep or not salt or not expected:
            return False
        computed = f"{salt} {self.digest(salt, password)}"
        return hmac.compare_digest(computed.encode(), hashed.encode())


__all__ = ["HmacPasswordHasher", "PasswordHasher"]
