"""
Streaming digest accumulation.

A Digester owns one live hash for one algorithm. Bytes written to it
accumulate; digest() reads the current state without resetting it, so
snapshots can be taken at any point in a stream.
"""

from __future__ import annotations

from .algorithm import Algorithm
from .core.exceptions import ContractViolation
from .digest import Digest, new_digest_from_bytes
from .hashing.strategies import HashSink


class Digester:
    """Accumulates bytes and produces digests of everything seen so far."""

    def __init__(self, algorithm: str, sink: HashSink | None = None) -> None:
        """
        Args:
            algorithm: Algorithm name; must be registered and available
            sink: Existing live hash to wrap instead of starting a new one

        Raises:
            ContractViolation: If no sink is given and the algorithm cannot hash
        """
        self._algorithm = Algorithm(algorithm)
        self._hash = sink if sink is not None else self._algorithm.hash()

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def hash(self) -> HashSink:
        """The live hash. Writes to it are reflected in the next digest()."""
        return self._hash

    def update(self, data: bytes) -> None:
        """Feed bytes into the hash."""
        try:
            self._hash.update(data)
        except (TypeError, ValueError, BufferError, OSError) as e:
            raise ContractViolation(f"write to hash function returned error: {e}") from e

    def write(self, data: bytes) -> int:
        """File-like write; returns the number of bytes consumed."""
        self.update(data)
        return len(data)

    def digest(self) -> Digest:
        """Digest of all bytes written so far. Does not reset the hash."""
        return new_digest_from_bytes(self._algorithm, self._hash.digest())

    def __repr__(self) -> str:
        return f"Digester({str(self._algorithm)!r})"
