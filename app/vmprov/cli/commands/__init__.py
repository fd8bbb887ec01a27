"""CLI commands for vmprov.

This package contains all subcommand implementations.
"""

from vmprov.cli.commands import check, init, run

__all__ = ["check", "init", "run"]
