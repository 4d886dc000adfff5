"""
Native Click implementation of the verify command.

Usage: contentdigest verify DIGEST [PATH]
"""

from __future__ import annotations

import sys

import click

from ...core.di import get_logger
from ...core.exceptions import DigestMismatchError
from ...digest import Digest
from ...verifier import verify_reader
from ..context import DigestContext
from ..params import DIGEST


@click.command("verify")
@click.argument("digest", type=DIGEST)
@click.argument("path", required=False, default="-", type=click.Path(dir_okay=False, allow_dash=True))
@click.pass_obj
def verify(ctx: DigestContext, digest: Digest, path: str) -> None:
    """Check that a file (or stdin) matches a digest.

    Exits 0 and prints OK on a match, exits 1 and prints FAILED otherwise.

    \b
    Examples:

        contentdigest verify sha256:2c26b4... model.bin
    """
    try:
        if path == "-":
            matched = verify_reader(digest, sys.stdin.buffer, ctx.chunk_size)
        else:
            with open(path, "rb") as f:
                matched = verify_reader(digest, f, ctx.chunk_size)
    except OSError as e:
        raise click.ClickException(f"cannot read {path}: {e}") from e

    if matched:
        click.echo(f"{path}: OK")
        return

    get_logger().info("Digest mismatch for %s (expected %s)", path, digest)
    click.echo(f"{path}: FAILED")
    raise SystemExit(DigestMismatchError.exit_code)
