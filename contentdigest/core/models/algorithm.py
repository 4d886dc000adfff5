"""Read-only views of registered hash algorithms."""

from __future__ import annotations

from .base import ImmutableModel


class AlgorithmInfo(ImmutableModel):
    """One registry entry as reported to tooling.

    Attributes:
        name: Registered algorithm identifier
        size: Raw digest size in bytes
        encoded_size: Length of the hex-encoded portion (2 * size)
        available: Whether the implementation can hash right now
    """

    name: str
    size: int
    encoded_size: int
    available: bool
