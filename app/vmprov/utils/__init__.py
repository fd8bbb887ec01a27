"""Utility modules for vmprov.

This module exports commonly used utility functions.
"""

from vmprov.utils.formatting import (
    console,
    err_console,
    format_package_line,
    print_error,
    print_info,
    print_package_line,
    print_success,
    print_warning,
)
from vmprov.utils.shell import CommandResult, as_root, as_user, command_exists, run_command

__all__ = [
    "CommandResult",
    "as_root",
    "as_user",
    "command_exists",
    "console",
    "err_console",
    "format_package_line",
    "print_error",
    "print_info",
    "print_package_line",
    "print_success",
    "print_warning",
    "run_command",
]
