"""
Click-based CLI for contentdigest.

Usage:
    from contentdigest.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from ..core.exceptions import DigestException
from .context import DigestContext

try:
    from importlib.metadata import version

    __version__ = version("contentdigest")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="contentdigest")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """contentdigest - compute and verify algorithm:hex content digests

    \b
    Commands:
        contentdigest compute [PATH...]     Digest files or stdin
        contentdigest verify DIGEST [PATH]  Check content against a digest
        contentdigest validate DIGEST...    Check digest syntax and algorithm
        contentdigest algorithms            List registered algorithms
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    elif ctx.obj is None:
        try:
            ctx.obj = DigestContext.create()
        except DigestException as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(e.exit_code)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "DigestContext",
    "__version__",
    "cli",
    "register_commands",
]
