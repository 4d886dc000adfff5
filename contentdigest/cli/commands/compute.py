"""
Native Click implementation of the compute command.

Usage: contentdigest compute [-a ALGORITHM] [PATH...]
"""

from __future__ import annotations

import sys

import click

from ...algorithm import Algorithm
from ...core.di import get_logger
from ..context import DigestContext
from ..params import ALGORITHM


@click.command("compute")
@click.option(
    "-a",
    "--algorithm",
    type=ALGORITHM,
    default=None,
    help="Hash algorithm (defaults to digest.algorithm from config, else sha256)",
)
@click.argument("paths", nargs=-1, type=click.Path(dir_okay=False, allow_dash=True))
@click.pass_obj
def compute(ctx: DigestContext, algorithm: Algorithm | None, paths: tuple[str, ...]) -> None:
    """Compute the digest of files or stdin.

    \b
    Examples:

        contentdigest compute model.bin

        contentdigest compute -a sha512 a.tar b.tar

        cat data.csv | contentdigest compute
    """
    if algorithm is None:
        algorithm = ctx.default_algorithm
        if not algorithm.available():
            raise click.ClickException(
                f"configured algorithm {algorithm} is not available; "
                f"choose one of: {', '.join(ctx.registry.available_algorithms)}"
            )

    if not paths:
        paths = ("-",)

    for path in paths:
        try:
            if path == "-":
                digest = algorithm.from_reader(sys.stdin.buffer, ctx.chunk_size)
            else:
                with open(path, "rb") as f:
                    digest = algorithm.from_reader(f, ctx.chunk_size)
        except OSError as e:
            raise click.ClickException(f"cannot read {path}: {e}") from e

        get_logger().debug("Computed %s for %s", digest, path)
        click.echo(f"{digest}  {path}")
