"""
contentdigest - content identifiers of the form ``algorithm:encoded``.

Parse, validate, compute and stream-verify digests against a registry of
pluggable hash algorithms.

Usage:
    from contentdigest import SHA256, parse

    d = SHA256.from_bytes(b"hello")
    parse(str(d)) == d

    verifier = d.verifier()
    verifier.write(b"hello")
    verifier.verified()  # True
"""

from .algorithm import BLAKE3, CANONICAL, SHA256, SHA384, SHA512, Algorithm
from .core.exceptions import (
    ContractViolation,
    DigestException,
    DigestMismatchError,
    DigestValidationError,
    InvalidFormatError,
    InvalidLengthError,
    UnsupportedAlgorithmError,
)
from .digest import (
    DIGEST_PATTERN,
    DIGEST_PATTERN_ANCHORED,
    Digest,
    from_bytes,
    from_reader,
    from_string,
    new_digest,
    new_digest_from_bytes,
    new_digest_from_encoded,
    parse,
)
from .digester import Digester
from .encoding import HEX, HexEncoding
from .hashing import AlgorithmRegistry, HashStrategy, get_registry, register_algorithm
from .selection import AlgorithmFlag
from .verifier import Verifier, verify_reader

__all__ = [
    "BLAKE3",
    "CANONICAL",
    "DIGEST_PATTERN",
    "DIGEST_PATTERN_ANCHORED",
    "HEX",
    "SHA256",
    "SHA384",
    "SHA512",
    "Algorithm",
    "AlgorithmFlag",
    "AlgorithmRegistry",
    "ContractViolation",
    "Digest",
    "DigestException",
    "DigestMismatchError",
    "DigestValidationError",
    "Digester",
    "HashStrategy",
    "HexEncoding",
    "InvalidFormatError",
    "InvalidLengthError",
    "UnsupportedAlgorithmError",
    "Verifier",
    "from_bytes",
    "from_reader",
    "from_string",
    "get_registry",
    "new_digest",
    "new_digest_from_bytes",
    "new_digest_from_encoded",
    "parse",
    "register_algorithm",
    "verify_reader",
]
