"""
Shared pytest fixtures for contentdigest tests.

- reset_services: drops the DI container and bootstrap state around every test
- registry: a fresh AlgorithmRegistry with the built-in algorithms
- fixed_strategy: factory for HashStrategy doubles with a chosen size
"""

import hashlib
from collections.abc import Callable

import pytest

from contentdigest.core import bootstrap as bootstrap_module
from contentdigest.hashing.registry import AlgorithmRegistry
from contentdigest.hashing.strategies import HashSink, HashStrategy


class FixedStrategy(HashStrategy):
    """Test strategy: a truncated sha256 of configurable size and availability."""

    def __init__(self, size: int = 16, available: bool = True) -> None:
        self._size = size
        self._available = available

    def available(self) -> bool:
        return self._available

    def size(self) -> int:
        return self._size

    def create_hasher(self) -> HashSink:
        return _TruncatedSha256(self._size)


class _TruncatedSha256:
    def __init__(self, size: int) -> None:
        self._inner = hashlib.sha256()
        self._size = size

    def update(self, data: bytes) -> None:
        self._inner.update(data)

    def digest(self) -> bytes:
        return self._inner.digest()[: self._size]


@pytest.fixture(autouse=True)
def reset_services():
    """Give every test its own container and process-wide registry."""
    bootstrap_module.reset()
    yield
    bootstrap_module.reset()


@pytest.fixture
def registry() -> AlgorithmRegistry:
    """A standalone registry with the built-in algorithms."""
    return AlgorithmRegistry()


@pytest.fixture
def fixed_strategy() -> Callable[..., FixedStrategy]:
    """Factory for FixedStrategy doubles."""
    return FixedStrategy
