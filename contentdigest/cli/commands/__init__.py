"""
Click command implementations for the contentdigest CLI.

Each module corresponds to one subcommand. Commands are registered with the
main group by register_commands() in contentdigest.cli.
"""

from .algorithms import algorithms
from .compute import compute
from .validate import validate
from .verify import verify

COMMANDS = [
    algorithms,
    compute,
    validate,
    verify,
]

__all__ = ["COMMANDS"]
