"""
Hash algorithm strategies and registry.

New algorithms are added by registering strategies, never by editing the
registry itself.
"""

from .registry import (
    AlgorithmRegistry,
    get_registry,
    install_default_registry,
    register_algorithm,
)
from .strategies import (
    Blake3Strategy,
    HashlibStrategy,
    HashSink,
    HashStrategy,
    SHA256Strategy,
    SHA384Strategy,
    SHA512Strategy,
)

__all__ = [
    "AlgorithmRegistry",
    "Blake3Strategy",
    "HashSink",
    "HashStrategy",
    "HashlibStrategy",
    "SHA256Strategy",
    "SHA384Strategy",
    "SHA512Strategy",
    "get_registry",
    "install_default_registry",
    "register_algorithm",
]
