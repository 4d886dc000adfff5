"""
Native Click implementation of the algorithms command.

Usage: contentdigest algorithms [--json]
"""

from __future__ import annotations

import json

import click

from ..context import DigestContext


@click.command("algorithms")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of a table")
@click.pass_obj
def algorithms(ctx: DigestContext, as_json: bool) -> None:
    """List registered hash algorithms."""
    entries = ctx.registry.entries()

    if as_json:
        click.echo(json.dumps([entry.model_dump() for entry in entries], indent=2))
        return

    default = ctx.settings.digest.algorithm
    for entry in entries:
        marker = "*" if entry.name == default else " "
        status = "available" if entry.available else "unavailable"
        click.echo(f"{marker} {entry.name:<16} {entry.size * 8:>5} bits  {status}")
