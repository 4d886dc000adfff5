"""
Algorithm names and the operations derived from them.

An Algorithm is only a name. Its size, availability and validation pattern
all come from the process-wide registry at call time, so an algorithm
registered by a plugin after import behaves exactly like a built-in one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

from .core.exceptions import (
    InvalidFormatError,
    InvalidLengthError,
    UnsupportedAlgorithmError,
)
from .core.models.config import DEFAULT_CHUNK_SIZE
from .encoding import HEX, HexEncoding
from .hashing.registry import get_registry

if TYPE_CHECKING:
    from .digest import Digest
    from .digester import Digester
    from .hashing.strategies import HashSink


class Algorithm(str):
    """Name of a registered hash algorithm, e.g. ``Algorithm("sha256")``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Algorithm({str(self)!r})"

    @property
    def encoding(self) -> HexEncoding:
        return HEX

    def available(self) -> bool:
        """True if registered and the implementation is present."""
        return get_registry().available(self)

    def size(self) -> int:
        """Raw digest size in bytes, 0 if unregistered."""
        return get_registry().size(self)

    def encoded_size(self) -> int:
        """Expected length of the encoded portion of a digest."""
        return self.encoding.encoded_size(self.size())

    def validate(self, encoded: str) -> None:
        """
        Check that ``encoded`` is a well-formed hash for this algorithm.

        Raises:
            UnsupportedAlgorithmError: Unregistered or unavailable algorithm
            InvalidLengthError: Wrong number of characters
            InvalidFormatError: Anything other than lowercase hex
        """
        registry = get_registry()
        if not registry.available(self):
            raise UnsupportedAlgorithmError(algorithm=str(self))
        if len(encoded) != self.encoded_size():
            raise InvalidLengthError(
                context={"expected": self.encoded_size(), "actual": len(encoded)}
            )
        matcher = registry.encoded_matcher(self)
        if matcher is None or not matcher.fullmatch(encoded):
            raise InvalidFormatError()

    def hash(self) -> HashSink:
        """
        Start a new live hash.

        Raises:
            ContractViolation: If the algorithm is empty or unavailable
        """
        return get_registry().new_hash(self)

    def digester(self) -> Digester:
        """Return a Digester accumulating bytes for this algorithm."""
        from .digester import Digester

        return Digester(self)

    def from_reader(self, reader: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Digest:
        """
        Digest everything read from a binary stream.

        OSError from the stream propagates to the caller.
        """
        digester = self.digester()
        for chunk in iter(lambda: reader.read(chunk_size), b""):
            digester.update(chunk)
        return digester.digest()

    def from_bytes(self, data: bytes) -> Digest:
        """Digest a byte string."""
        digester = self.digester()
        digester.update(data)
        return digester.digest()

    def from_string(self, text: str) -> Digest:
        """Digest the UTF-8 encoding of ``text``."""
        return self.from_bytes(text.encode("utf-8"))


SHA256 = Algorithm("sha256")
SHA384 = Algorithm("sha384")
SHA512 = Algorithm("sha512")
BLAKE3 = Algorithm("blake3")

# Used when no algorithm is specified
CANONICAL = SHA256


def require_available(name: str) -> Algorithm:
    """
    Turn an algorithm name from untrusted input into an Algorithm.

    Raises:
        UnsupportedAlgorithmError: If the name is unknown or unavailable
    """
    algorithm = Algorithm(name)
    if not algorithm.available():
        raise UnsupportedAlgorithmError(algorithm=name)
    return algorithm
