"""
Unit tests for Verifier.

Tests verify:
- Exact content verifies; any changed byte or missing suffix does not
- verified() is recomputed on every call
- Construction fails fast on invalid targets
"""

import io

import pytest

from contentdigest.algorithm import SHA256, SHA512
from contentdigest.core.exceptions import ContractViolation, DigestMismatchError
from contentdigest.digest import Digest
from contentdigest.verifier import Verifier, verify_reader


@pytest.fixture
def payload() -> bytes:
    """1 MiB of known bytes."""
    return bytes((i * 31 + 7) % 256 for i in range(1 << 20))


class TestVerified:
    def test_exact_bytes_verify(self, payload):
        digest = SHA256.from_bytes(payload)
        verifier = digest.verifier()
        verifier.write(payload)
        assert verifier.verified() is True

    def test_chunked_writes_verify(self, payload):
        digest = SHA256.from_bytes(payload)
        verifier = Verifier(digest)
        for start in range(0, len(payload), 4096):
            verifier.write(payload[start : start + 4096])
        assert verifier.verified() is True

    @pytest.mark.parametrize("position", [0, 1 << 19, (1 << 20) - 1])
    def test_single_changed_byte_fails(self, payload, position):
        digest = SHA256.from_bytes(payload)
        tampered = bytearray(payload)
        tampered[position] ^= 0x01

        verifier = Verifier(digest)
        verifier.write(bytes(tampered))
        assert verifier.verified() is False

    def test_prefix_then_remainder(self, payload):
        """A strict prefix is not verified until the rest arrives."""
        digest = SHA256.from_bytes(payload)
        verifier = Verifier(digest)

        half = len(payload) // 2
        verifier.write(payload[:half])
        assert verifier.verified() is False

        verifier.write(payload[half:])
        assert verifier.verified() is True

    def test_extra_bytes_fail(self, payload):
        """Not memoized: writing past the content flips the verdict back."""
        digest = SHA256.from_bytes(payload)
        verifier = Verifier(digest)
        verifier.write(payload)
        assert verifier.verified() is True
        verifier.write(b"\x00")
        assert verifier.verified() is False

    def test_other_algorithm(self, payload):
        digest = SHA512.from_bytes(payload)
        verifier = digest.verifier()
        verifier.update(payload)
        assert verifier.verified() is True

    def test_write_returns_length(self):
        verifier = SHA256.from_bytes(b"").verifier()
        assert verifier.write(b"abc") == 3

    def test_verify_reader(self, payload):
        digest = SHA256.from_bytes(payload)
        assert verify_reader(digest, io.BytesIO(payload)) is True
        assert verify_reader(digest, io.BytesIO(payload[:-1])) is False


class TestCheck:
    def test_check_passes(self):
        verifier = SHA256.from_string("foo").verifier()
        verifier.write(b"foo")
        verifier.check()

    def test_check_raises_mismatch(self):
        target = SHA256.from_string("foo")
        verifier = target.verifier()
        verifier.write(b"bar")
        with pytest.raises(DigestMismatchError) as exc_info:
            verifier.check()
        assert exc_info.value.context["expected"] == target
        assert exc_info.value.context["actual"] == SHA256.from_string("bar")


class TestUnsupportedTarget:
    """Construction resolves the algorithm immediately."""

    @pytest.mark.parametrize(
        "digest,message",
        [
            ("", "no ':' separator in digest ''"),
            (":", "empty digest algorithm for :"),
            ("bean:0123456789abcdef", "unrecognized algorithm bean"),
            ("sha256-garbage:pure", "unrecognized algorithm sha256-garbage"),
        ],
    )
    def test_invalid_target(self, digest, message):
        with pytest.raises(ContractViolation) as exc_info:
            Verifier(Digest(digest))
        assert str(exc_info.value) == message
