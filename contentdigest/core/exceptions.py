"""
Custom exception hierarchy for contentdigest.

Two families live here:

- Validation errors (``DigestValidationError`` and subclasses) are returned
  to callers handling untrusted input: parsing digests, selecting an
  algorithm by name, unmarshaling text. They inherit from ValueError.
- ``ContractViolation`` signals a programming error, such as calling an
  accessor on a digest that was never validated. It is deliberately not a
  ValueError so input-handling code does not catch it by accident.
"""

from __future__ import annotations


class DigestException(Exception):
    """
    Base exception for all contentdigest errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (digest, algorithm, etc.)
        exit_code: Exit status the CLI uses when this error ends a command
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Contract Violations
# =============================================================================


class ContractViolation(DigestException):
    """
    A precondition of the API was broken by the caller.

    Raised for accessors on malformed digests, hashing with an empty or
    unavailable algorithm, a hash sink failing a write, and registering an
    algorithm whose name breaks the naming grammar. These are only reachable
    when validation was skipped.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class DigestValidationError(DigestException, ValueError):
    """
    Base class for digest input validation errors.

    Inherits from ValueError so pydantic and generic callers treat it as
    bad input.
    """

    default_message = "invalid digest"

    def __init__(
        self,
        message: str | None = None,
        *,
        digest: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if digest is not None:
            ctx["digest"] = digest
        super().__init__(message or self.default_message, context=ctx, cause=cause)


class InvalidFormatError(DigestValidationError):
    """
    Input is not ``algorithm:encoded``.

    Also raised when the encoded portion holds characters outside
    lowercase hex, including uppercase hex digits.
    """

    default_message = "invalid checksum digest format"


class InvalidLengthError(DigestValidationError):
    """Encoded portion length does not match the algorithm's digest size."""

    default_message = "invalid checksum digest length"


class UnsupportedAlgorithmError(DigestValidationError):
    """
    Algorithm name is well formed but unregistered or unavailable.
    """

    default_message = "unsupported digest algorithm"

    def __init__(
        self,
        message: str | None = None,
        *,
        algorithm: str | None = None,
        digest: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm is not None:
            ctx["algorithm"] = algorithm
        super().__init__(message, digest=digest, context=ctx, cause=cause)


class DigestMismatchError(DigestValidationError):
    """Content read from a stream does not hash to the expected digest."""

    default_message = "content does not match digest"

    def __init__(
        self,
        message: str | None = None,
        *,
        expected: str | None = None,
        actual: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if expected is not None:
            ctx["expected"] = expected
        if actual is not None:
            ctx["actual"] = actual
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigValidationError(DigestException, ValueError):
    """
    A configuration value from TOML or the environment failed validation.

    Unreadable or unparsable config files are not errors; they are recorded
    in DigestSettings.config_error and reported as a warning.
    """

    # EX_CONFIG from sysexits.h
    exit_code: int = 78

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Plugin Errors
# =============================================================================


class PluginLoadError(DigestException):
    """
    Error loading an algorithm provider from an entry point.

    Discovery logs and skips these so one broken provider cannot stop
    startup.
    """

    def __init__(
        self,
        message: str,
        *,
        plugin_name: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if plugin_name:
            ctx["plugin_name"] = plugin_name
        super().__init__(message, context=ctx, cause=cause)
