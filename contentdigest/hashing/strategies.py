"""
Hash algorithm strategy implementations.

Each strategy describes one hash primitive to the registry: whether it can
be used in this process, how many bytes it produces, and how to start a new
streaming hash. The primitives themselves come from hashlib and the blake3
package.
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

try:
    import blake3 as _blake3

    blake3: Any | None = _blake3
except ImportError:
    blake3 = None

BLAKE3_DIGEST_SIZE = 32


@runtime_checkable
class HashSink(Protocol):
    """Live, writable hash state.

    ``digest()`` must read the current state without finalizing it, as
    hashlib and blake3 objects do.
    """

    def update(self, data: bytes, /) -> Any: ...

    def digest(self) -> bytes: ...


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - available(): Whether a concrete implementation is present
    - size(): Raw digest length in bytes
    - create_hasher(): Factory method for live hash sinks
    """

    @abstractmethod
    def available(self) -> bool:
        """Return True if hashers can be created in this process."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the raw digest size in bytes."""
        pass

    @abstractmethod
    def create_hasher(self) -> HashSink:
        """Create a new hasher instance."""
        pass


class HashlibStrategy(HashStrategy):
    """Strategy backed by a named hashlib constructor."""

    def __init__(self, hashlib_name: str) -> None:
        self._hashlib_name = hashlib_name
        self._size: int | None = None

    @property
    def hashlib_name(self) -> str:
        return self._hashlib_name

    def available(self) -> bool:
        return self._hashlib_name in hashlib.algorithms_available

    def size(self) -> int:
        if self._size is None:
            if not self.available():
                return 0
            self._size = hashlib.new(self._hashlib_name).digest_size
        return self._size

    def create_hasher(self) -> HashSink:
        return hashlib.new(self._hashlib_name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._hashlib_name!r})"


class SHA256Strategy(HashlibStrategy):
    """SHA-256 hashing strategy - the canonical algorithm."""

    def __init__(self) -> None:
        super().__init__("sha256")


class SHA384Strategy(HashlibStrategy):
    """SHA-384 hashing strategy - truncated SHA-512."""

    def __init__(self) -> None:
        super().__init__("sha384")


class SHA512Strategy(HashlibStrategy):
    """SHA-512 hashing strategy - stronger variant of SHA-2."""

    def __init__(self) -> None:
        super().__init__("sha512")


class Blake3Strategy(HashStrategy):
    """BLAKE3 hashing strategy - fast cryptographic hash.

    Reports unavailable when the blake3 package is not installed, so digests
    naming blake3 fail validation as unsupported instead of crashing.
    """

    def available(self) -> bool:
        return blake3 is not None

    def size(self) -> int:
        return BLAKE3_DIGEST_SIZE

    def create_hasher(self) -> HashSink:
        if blake3 is None:
            raise ImportError("blake3 package not installed")
        return blake3.blake3()
