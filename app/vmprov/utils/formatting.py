"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from vmprov.core.theme import get_rich_theme

if TYPE_CHECKING:
    from vmprov.models.package import PackageStatus

NOT_INSTALLED_MARKER = "[not installed]"


def _detect_color_system() -> str | None:
    """Use truecolor on interactive terminals, Rich auto-detection otherwise."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


_theme = get_rich_theme()

# Shared console instances (theme loaded once at import)
console = Console(theme=_theme, color_system=_detect_color_system())
err_console = Console(theme=_theme, stderr=True, color_system=_detect_color_system())


def format_package_line(
    status: PackageStatus,
    name_width: int = 20,
    version_width: int = 30,
) -> str:
    """Format a one-line package status with Rich markup.

    Installed packages show the name left-aligned in a fixed column and
    the version right-aligned in a fixed column; missing packages show
    the name and a not-installed marker.

    Args:
        status: Classified package.
        name_width: Width of the name column.
        version_width: Width of the version column.

    Returns:
        Rich markup string for the package line.
    """
    name = status.name
    if not status.is_installed:
        return f" * [package.missing]{escape(name)}[/] [muted]{escape(NOT_INSTALLED_MARKER)}[/]"

    padded = escape(f"{name:<{name_width}}")
    version = escape(f"{status.installed_version:>{version_width}}")
    return f" * [package.installed]{padded}[/] [package.version]{version}[/]"


def print_package_line(
    status: PackageStatus,
    name_width: int = 20,
    version_width: int = 30,
    out: Console | None = None,
) -> None:
    """Print a one-line package status."""
    (out or console).print(
        format_package_line(status, name_width, version_width),
        highlight=False,
        soft_wrap=True,
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
