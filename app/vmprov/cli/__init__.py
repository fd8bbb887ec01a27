"""CLI package for vmprov.

This package contains the Typer application and all subcommands.
"""

from vmprov.cli.main import app

__all__ = ["app"]
