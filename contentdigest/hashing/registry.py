"""
Hash algorithm registry.

Maps algorithm names to hash strategies and owns the anchored patterns used
to check the encoded portion of a digest. One registry is shared by the
whole process (see get_registry()); providers add entries during startup and
the table is read on every digest validated or computed afterwards.

Readers never lock. The table is published as an immutable snapshot and
writers serialize on a lock, copy the snapshot, add their entry and swap the
reference, so a reader sees either the old table or the new one.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..core.container import ServiceContainer, get_container
from ..core.di import get_logger
from ..core.exceptions import ContractViolation
from ..core.models.algorithm import AlgorithmInfo
from ..core.models.config import ALGORITHM_NAME_PATTERN
from .strategies import (
    Blake3Strategy,
    HashSink,
    HashStrategy,
    SHA256Strategy,
    SHA384Strategy,
    SHA512Strategy,
)


@dataclass(frozen=True)
class _Entry:
    strategy: HashStrategy
    size: int
    pattern: re.Pattern[str]


class AlgorithmRegistry:
    """
    Registry for hash algorithm strategies.

    Registration is additive: a name is registered at most once and later
    attempts are refused rather than overwriting.

    Example:
        registry = AlgorithmRegistry()

        registry.available("sha256")            # True
        sink = registry.new_hash("sha256")

        registry.register("my-hash", MyStrategy())
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, register built-in algorithms
        """
        self._lock = threading.Lock()
        self._entries: Mapping[str, _Entry] = MappingProxyType({})
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in hash algorithms."""
        self.register("sha256", SHA256Strategy())
        self.register("sha384", SHA384Strategy())
        self.register("sha512", SHA512Strategy())
        self.register("blake3", Blake3Strategy())

    def register(self, name: str, strategy: HashStrategy) -> bool:
        """
        Register a hash strategy under a name.

        Args:
            name: Algorithm identifier, e.g. 'sha256' or 'sha256+b64u'
            strategy: HashStrategy implementation

        Returns:
            False if the name was already registered, True otherwise

        Raises:
            ContractViolation: If the name breaks the naming grammar
        """
        with self._lock:
            if name in self._entries:
                get_logger().debug("Algorithm %s already registered; keeping existing", name)
                return False

            if not isinstance(name, str) or not ALGORITHM_NAME_PATTERN.fullmatch(name):
                raise ContractViolation(f"algorithm name {name!r} does not match naming grammar")

            size = strategy.size()
            entry = _Entry(
                strategy=strategy,
                size=size,
                pattern=re.compile(rf"^[a-f0-9]{{{2 * size}}}$"),
            )
            entries = dict(self._entries)
            entries[name] = entry
            self._entries = MappingProxyType(entries)

        get_logger().debug("Registered hash algorithm %s (%d bytes)", name, size)
        return True

    def get(self, name: str) -> HashStrategy | None:
        """
        Get strategy by algorithm name.

        Returns:
            HashStrategy or None if not found
        """
        entry = self._entries.get(name)
        return entry.strategy if entry else None

    def available(self, name: str) -> bool:
        """Return True if the algorithm is registered and usable."""
        entry = self._entries.get(name)
        return entry is not None and entry.strategy.available()

    def size(self, name: str) -> int:
        """Return the raw digest size in bytes, or 0 if unknown."""
        entry = self._entries.get(name)
        return entry.size if entry else 0

    def encoded_matcher(self, name: str) -> re.Pattern[str] | None:
        """Return the anchored lowercase-hex pattern for the algorithm."""
        entry = self._entries.get(name)
        return entry.pattern if entry else None

    def new_hash(self, name: str) -> HashSink:
        """
        Create a live hash sink for the algorithm.

        Callers that do not statically know the name is registered must
        check available() first.

        Raises:
            ContractViolation: If the name is empty, unknown or unavailable
        """
        if not name:
            raise ContractViolation("empty digest algorithm")
        entry = self._entries.get(name)
        if entry is None or not entry.strategy.available():
            raise ContractViolation(f"unsupported digest algorithm: {name}")
        return entry.strategy.create_hasher()

    def names(self) -> list[str]:
        """List registered algorithm names, sorted."""
        return sorted(self._entries)

    def entries(self) -> list[AlgorithmInfo]:
        """Describe every registered algorithm, sorted by name."""
        snapshot = self._entries
        return [
            AlgorithmInfo(
                name=name,
                size=snapshot[name].size,
                encoded_size=2 * snapshot[name].size,
                available=snapshot[name].strategy.available(),
            )
            for name in sorted(snapshot)
        ]

    @property
    def available_algorithms(self) -> list[str]:
        """List names of algorithms that can hash right now."""
        return [name for name in self.names() if self.available(name)]

    def __contains__(self, name: object) -> bool:
        """Check if algorithm is registered."""
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._entries)


# Reentrant: providers may call back into get_registry() during discovery
_registry_lock = threading.RLock()


def install_default_registry(
    container: ServiceContainer, load_plugins: bool = True
) -> AlgorithmRegistry:
    """
    Publish the process-wide registry and load entry-point providers into it.

    The registry holds the built-in algorithms and is registered with the
    container before any provider is imported, so a provider module that
    calls register_algorithm() while loading reaches this same registry.
    Returns the existing registry if one is already installed.
    """
    with _registry_lock:
        registry = container.try_resolve(AlgorithmRegistry)
        if registry is not None:
            return registry

        registry = AlgorithmRegistry()
        container.register_singleton(AlgorithmRegistry, implementation=registry)

        if load_plugins:
            from .plugins import discover_algorithm_plugins

            discover_algorithm_plugins(registry)
    return registry


def get_registry() -> AlgorithmRegistry:
    """
    Return the process-wide registry.

    Resolved from the service container. If the application has not been
    bootstrapped, a default registry is installed on first use.
    """
    container = get_container()
    registry = container.try_resolve(AlgorithmRegistry)
    if registry is not None:
        return registry
    return install_default_registry(container)


def register_algorithm(name: str, strategy: HashStrategy) -> bool:
    """Register a strategy with the process-wide registry."""
    return get_registry().register(name, strategy)
