"""Shared helpers for CLI commands.

This module provides the option types and backend factories used across
multiple CLI command modules.
"""

from pathlib import Path
from typing import Annotated

import typer

from vmprov.operators.apt import AptOperator
from vmprov.queries.apt import AptQuery
from vmprov.utils.formatting import print_error

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to provision.toml (default: ~/.config/vmprov/provision.toml).",
        dir_okay=False,
    ),
]


def get_query() -> AptQuery:
    """Get the package query, exiting if apt is not available.

    Returns:
        AptQuery instance.

    Raises:
        typer.Exit: If dpkg or apt-cache are missing.
    """
    query = AptQuery()
    if not query.is_available():
        print_error("APT package manager is not available on this system.")
        raise typer.Exit(code=1)
    return query


def get_operator(dry_run: bool = False) -> AptOperator:
    """Get the package operator, exiting if apt-get is not available.

    Args:
        dry_run: Whether to simulate mutations.

    Returns:
        AptOperator instance.

    Raises:
        typer.Exit: If apt-get is missing.
    """
    operator = AptOperator(dry_run=dry_run)
    if not operator.is_available():
        print_error("apt-get is not available on this system.")
        raise typer.Exit(code=1)
    return operator
