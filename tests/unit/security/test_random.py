"""Unit tests for the shared secure random generator."""

from __future__ import annotations

import base64
import io
import threading

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from authrealm.kernel.errors import ValidationError
from authrealm.security.random import SecureRandomGenerator


def _decode(token: str) -> bytes:
    return base64.urlsafe_b64decode(token + "=" * (-len(token) % 4))


class TestSecureRandomGenerator:
    @settings(max_examples=50)
    @given(bits=st.integers(min_value=1, max_value=2048))
    def test_decoded_width_covers_bits(self, bits: int) -> None:
        token = SecureRandomGenerator().generate(bits)
        assert len(_decode(token)) * 8 >= bits
        assert len(_decode(token)) == (bits + 7) // 8

    def test_base64url_alphabet(self) -> None:
        token = SecureRandomGenerator().generate(1024)
        assert "=" not in token
        assert "+" not in token and "/" not in token

    def test_successive_tokens_differ(self) -> None:
        gen = SecureRandomGenerator()
        tokens = {gen.generate(128) for _ in range(200)}
        assert len(tokens) == 200

    def test_generate_into_appends(self) -> None:
        gen = SecureRandomGenerator()
        buffer = io.StringIO()
        buffer.write("Bearer ")
        gen.generate_into(256, buffer)
        value = buffer.getvalue()
        assert value.startswith("Bearer ")
        assert len(_decode(value[len("Bearer "):])) == 32

    def test_generate_into_writes_in_pieces(self) -> None:
        class Collector:
            def __init__(self) -> None:
                self.parts: list[str] = []

            def write(self, s: str) -> int:
                self.parts.append(s)
                return len(s)

        sink = Collector()
        SecureRandomGenerator().generate_into(1000, sink)
        assert len(sink.parts) == 3
        value = "".join(sink.parts)
        assert "=" not in value
        assert len(_decode(value)) == 125

    def test_generate_into_rejects_non_positive_bits(self) -> None:
        with pytest.raises(ValidationError):
            SecureRandomGenerator().generate_into(0, io.StringIO())

    def test_generate_bytes(self) -> None:
        assert len(SecureRandomGenerator().generate_bytes(17)) == 17

    @pytest.mark.parametrize("bits", [0, -8])
    def test_non_positive_bits_rejected(self, bits: int) -> None:
        with pytest.raises(ValidationError):
            SecureRandomGenerator().generate(bits)

    def test_reset_reseeds(self) -> None:
        gen = SecureRandomGenerator()
        before = gen.generate(256)
        gen.reset()
        assert gen.generate(256) != before

    def test_instances_are_independent(self) -> None:
        assert SecureRandomGenerator().generate(256) != SecureRandomGenerator().generate(256)

    def test_concurrent_callers_never_share_output(self) -> None:
        gen = SecureRandomGenerator()
        results: list[str] = []
        lock = threading.Lock()

        def worker() -> None:
            local = [gen.generate(128) for _ in range(100)]
            with lock:
                results.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(results) == 800
        assert len(set(results)) == 800
