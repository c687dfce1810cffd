from __future__ import annotations

import base64
import os
import threading
from typing import Protocol

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from authrealm.kernel.errors import ValidationError

__all__ = ["SecureRandomGenerator", "SupportsWrite"]

_KEY_LEN = 32
_NONCE_LEN = 16
# Re-key well before the 32-bit block counter can wrap.
_RESEED_AFTER = 1 << 30
# Multiple of 3 so only the final chunk can carry padding.
_ENCODE_CHUNK = 48


class SupportsWrite(Protocol):
    def write(self, s: str, /) -> object: ...


class SecureRandomGenerator:
    """Shared CSPRNG producing base64url tokens.

    The bit source is a ChaCha20 keystream keyed from ``os.urandom`` when
    the generator is created. Every draw holds an internal lock for the
    duration of the call, so threads sharing one instance never see
    interleaved or repeated output.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._seed()

    def _seed(self) -> None:
        cipher = Cipher(algorithms.ChaCha20(os.urandom(_KEY_LEN), os.urandom(_NONCE_LEN)), mode=None)
        self._stream = cipher.encryptor()
        self._drawn = 0

    def reset(self) -> None:
        """Re-seed the source. Tests only; never call from request handling."""
        with self._lock:
            self._seed()

    def generate_bytes(self, count: int) -> bytes:
        if count <= 0:
            raise ValidationError("byte count must be positive")
        with self._lock:
            if self._drawn + count > _RESEED_AFTER:
                self._seed()
            self._drawn += count
            return self._stream.update(bytes(count))

    def generate(self, bits: int) -> str:
        """Return an unpadded base64url string carrying at least *bits* random bits."""
        return _encode(self.generate_bytes(_byte_count(bits)))

    def generate_into(self, bits: int, buffer: SupportsWrite) -> None:
        """Write the encoding of :meth:`generate` into *buffer* (e.g. ``io.StringIO``).

        The encoding is written in fixed-size pieces, so the full token string
        is never materialised.
        """
        raw = memoryview(self.generate_bytes(_byte_count(bits)))
        for start in range(0, len(raw), _ENCODE_CHUNK):
            buffer.write(_encode(raw[start:start + _ENCODE_CHUNK]))


def _byte_count(bits: int) -> int:
    if bits <= 0:
        raise ValidationError("bit count must be positive", errors=[{"field": "bits", "value": bits}])
    return (bits + 7) // 8


def _encode(raw: bytes | memoryview) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")
