"""Logging configuration for the vmprov CLI.

Log records go to stderr through Rich and, when the state directory is
writable, to a plain-text log file as well.
"""

import logging
from pathlib import Path

from rich.logging import RichHandler

from vmprov.core.paths import ensure_state_dir, get_log_path
from vmprov.utils.formatting import err_console

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: bool = True,
) -> Path | None:
    """Configure the root logger once for a CLI invocation.

    Args:
        verbose: Show DEBUG records on the console.
        quiet: Only show ERROR records on the console.
        log_file: Also write INFO and above to the state log file.

    Returns:
        Path of the log file, or None if no file handler was installed.
    """
    console_level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING

    console_handler = RichHandler(console=err_console, show_path=verbose, rich_tracebacks=True)
    console_handler.setLevel(console_level)
    handlers: list[logging.Handler] = [console_handler]

    log_path: Path | None = None
    if log_file:
        try:
            ensure_state_dir()
            file_handler = logging.FileHandler(get_log_path(), encoding="utf-8")
        except (OSError, RuntimeError) as e:
            err_console.print(f"[warning]Warning:[/] Could not open log file: {e}")
        else:
            file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
            file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
            handlers.append(file_handler)
            log_path = get_log_path()

    logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=handlers, force=True)
    return log_path
