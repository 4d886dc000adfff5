"""
Native Click implementation of the validate command.

Usage: contentdigest validate DIGEST...
"""

from __future__ import annotations

import click

from ...core.exceptions import (
    DigestValidationError,
    InvalidFormatError,
    InvalidLengthError,
    UnsupportedAlgorithmError,
)
from ...digest import Digest

ERROR_KINDS: dict[type[DigestValidationError], str] = {
    InvalidFormatError: "invalid-format",
    InvalidLengthError: "invalid-length",
    UnsupportedAlgorithmError: "unsupported",
}


@click.command("validate")
@click.argument("digests", nargs=-1, required=True)
def validate(digests: tuple[str, ...]) -> None:
    """Check digest strings without hashing anything.

    Prints one line per digest. Exits 1 if any digest is invalid.
    """
    failed = False
    for text in digests:
        try:
            Digest.parse(text)
        except DigestValidationError as e:
            failed = True
            kind = ERROR_KINDS.get(type(e), "invalid")
            click.echo(f"{text}: {kind} ({e.message})")
            continue
        click.echo(f"{text}: valid")

    if failed:
        raise SystemExit(1)
