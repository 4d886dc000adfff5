"""
The digest value type.

A digest names content by its hash: ``<algorithm>:<encoded>``, for example
``sha256:e58fcf7418d4390dec8e8fb69d88c06ec07039d651fedd3aa72af9972e7d046b``.
This string is the wire format, used as map keys, JSON values and storage
path components.

Digest subclasses str, so it can be stored, compared and serialized like
one. Constructing ``Digest(text)`` does not validate; use parse() for
anything that came from outside the process.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, BinaryIO

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .algorithm import CANONICAL, Algorithm
from .core.exceptions import (
    ContractViolation,
    InvalidFormatError,
    UnsupportedAlgorithmError,
)
from .core.models.config import DEFAULT_CHUNK_SIZE
from .hashing.registry import get_registry

if TYPE_CHECKING:
    from .hashing.strategies import HashSink
    from .verifier import Verifier

ALGORITHM_PATTERN = r"[a-z0-9]+(?:[.+_-][a-z0-9]+)*"
ENCODED_PATTERN = r"[a-zA-Z0-9=_-]+"

DIGEST_PATTERN = re.compile(rf"{ALGORITHM_PATTERN}:{ENCODED_PATTERN}")
DIGEST_PATTERN_ANCHORED = re.compile(rf"^{ALGORITHM_PATTERN}:{ENCODED_PATTERN}$")


class Digest(str):
    """Immutable ``algorithm:encoded`` content identifier."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Digest({str(self)!r})"

    @classmethod
    def parse(cls, text: str) -> Digest:
        """Construct and validate a digest from untrusted text."""
        digest = cls(text)
        digest.validate()
        return digest

    def validate(self) -> None:
        """
        Check the digest against the grammar and the registry.

        Raises:
            InvalidFormatError: Not ``algorithm:encoded``, or the encoded
                portion is not lowercase hex
            UnsupportedAlgorithmError: Unknown or unavailable algorithm
            InvalidLengthError: Encoded length does not match the algorithm
        """
        s = str(self)
        i = s.find(":")
        if i < 0 or i + 1 == len(s) or not DIGEST_PATTERN_ANCHORED.fullmatch(s):
            raise InvalidFormatError(digest=s)

        name, encoded = s[:i], s[i + 1 :]
        if not get_registry().available(name):
            raise UnsupportedAlgorithmError(algorithm=name, digest=s)

        Algorithm(name).validate(encoded)

    def _sep_index(self) -> int:
        i = self.find(":")
        if i < 0:
            raise ContractViolation(f"no ':' separator in digest {str(self)!r}")
        return i

    @property
    def algorithm(self) -> Algorithm:
        """
        The digest's algorithm.

        Raises:
            ContractViolation: If the digest is malformed or names an
                unregistered or unavailable algorithm
        """
        name = self[: self._sep_index()]
        if not name:
            raise ContractViolation(f"empty digest algorithm for {self}")
        registry = get_registry()
        if name not in registry:
            raise ContractViolation(f"unrecognized algorithm {name}")
        if not registry.available(name):
            raise ContractViolation(f"unavailable algorithm {name}")
        return Algorithm(name)

    @property
    def encoded(self) -> str:
        """The portion after the separator."""
        return str(self[self._sep_index() + 1 :])

    @property
    def hex(self) -> str:
        return self.encoded

    def verifier(self) -> Verifier:
        """Return a Verifier checking streamed bytes against this digest."""
        from .verifier import Verifier

        return Verifier(self)

    def marshal_text(self) -> str:
        return str(self)

    @classmethod
    def unmarshal_text(cls, text: str | bytes) -> Digest | None:
        """
        Parse the text form; empty input means "no digest".

        Raises:
            DigestValidationError: For any non-empty invalid input
        """
        if isinstance(text, bytes):
            text = text.decode("ascii", errors="replace")
        if text == "":
            return None
        return cls.parse(text)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate model fields through unmarshal_text and dump them as plain strings."""
        return core_schema.no_info_after_validator_function(
            cls.unmarshal_text,
            core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: None if v is None else str(v)
            ),
        )


def parse(text: str) -> Digest:
    """Parse and validate a digest string."""
    return Digest.parse(text)


def new_digest_from_encoded(algorithm: str, encoded: str) -> Digest:
    """Join an algorithm and an already-encoded hash. No validation."""
    return Digest(f"{algorithm}:{encoded}")


def new_digest_from_bytes(algorithm: str, raw: bytes) -> Digest:
    """Encode raw hash bytes and join them with the algorithm."""
    return new_digest_from_encoded(algorithm, Algorithm(algorithm).encoding.encode(raw))


def new_digest(algorithm: str, sink: HashSink) -> Digest:
    """Snapshot the current state of a live hash."""
    return new_digest_from_bytes(algorithm, sink.digest())


def from_reader(reader: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Digest:
    """Digest a stream with the canonical algorithm."""
    return CANONICAL.from_reader(reader, chunk_size)


def from_bytes(data: bytes) -> Digest:
    """Digest bytes with the canonical algorithm."""
    return CANONICAL.from_bytes(data)


def from_string(text: str) -> Digest:
    """Digest a string with the canonical algorithm."""
    return CANONICAL.from_string(text)
