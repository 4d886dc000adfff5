"""Checking streamed content against a previously declared digest."""

from __future__ import annotations

from typing import BinaryIO

from .core.exceptions import DigestMismatchError
from .core.models.config import DEFAULT_CHUNK_SIZE
from .digest import Digest
from .digester import Digester


class Verifier:
    """
    A Digester bound to a target digest.

    The algorithm is resolved at construction, so an invalid or unsupported
    target fails immediately rather than on first write. Every verified()
    call recomputes from the bytes written so far; nothing is cached.
    """

    def __init__(self, digest: str) -> None:
        """
        Raises:
            ContractViolation: If the digest is malformed or its algorithm
                is unregistered or unavailable
        """
        self._digest = Digest(digest)
        self._digester = Digester(self._digest.algorithm)

    @property
    def digest(self) -> Digest:
        """The target digest."""
        return self._digest

    def write(self, data: bytes) -> int:
        self._digester.update(data)
        return len(data)

    def update(self, data: bytes) -> None:
        self._digester.update(data)

    def verified(self) -> bool:
        """True if the bytes written so far hash to the target digest."""
        return self._digester.digest() == self._digest

    def check(self) -> None:
        """
        Raise unless verified.

        Raises:
            DigestMismatchError: With the expected and actual digests
        """
        actual = self._digester.digest()
        if actual != self._digest:
            raise DigestMismatchError(expected=str(self._digest), actual=str(actual))

    def __repr__(self) -> str:
        return f"Verifier({str(self._digest)!r})"


def verify_reader(digest: str, reader: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bool:
    """Drain a binary stream through a verifier and return the verdict."""
    verifier = Verifier(digest)
    for chunk in iter(lambda: reader.read(chunk_size), b""):
        verifier.write(chunk)
    return verifier.verified()
