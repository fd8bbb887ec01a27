"""Subprocess helpers.

Commands run without a shell and return a CommandResult instead of
raising on a non-zero exit. as_root and as_user build the sudo prefixes
used for apt-get and for per-user installer scripts.
"""

import os
import shutil
import subprocess
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured output and exit code of a finished command."""

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def error_text(self) -> str:
        """Best available error description for a failed command."""
        return self.stderr.strip() or self.stdout.strip() or f"exit code {self.returncode}"


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = 60.0,
    cwd: str | None = None,
    input_text: str | None = None,
    env: dict[str, str] | None = None,
) -> CommandResult:
    """Run a command and capture its text output.

    Args:
        args: Argument vector; no shell is involved.
        check: Raise CalledProcessError on a non-zero exit.
        timeout: Seconds before the command is killed.
        cwd: Working directory, defaults to the current one.
        input_text: Text written to the command's stdin.
        env: Variables layered over the current environment.

    Raises:
        subprocess.CalledProcessError: If check is set and the command fails.
        subprocess.TimeoutExpired: If the command runs past the timeout.
        FileNotFoundError: If the executable does not exist.
    """
    full_env = {**os.environ, **env} if env else None
    completed = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=check,
        timeout=timeout,
        cwd=cwd,
        input=input_text,
        env=full_env,
    )
    return CommandResult(
        stdout=completed.stdout,
        stderr=completed.stderr,
        returncode=completed.returncode,
    )


def command_exists(name: str) -> bool:
    """Check whether an executable is on PATH."""
    return shutil.which(name) is not None


def is_root() -> bool:
    """Check if the current process runs with root privileges."""
    return os.geteuid() == 0


def as_root(args: list[str]) -> list[str]:
    """Prefix a command with non-interactive sudo unless already root.

    Args:
        args: Command and arguments to execute.

    Returns:
        Command list that runs with root privileges.
    """
    if is_root():
        return list(args)
    return ["sudo", "-n", *args]


def as_user(user: str, args: list[str]) -> list[str]:
    """Wrap a command so it runs as the given user with its own HOME.

    When the process already runs as that user, the command is returned
    unchanged.

    Args:
        user: Target login name.
        args: Command and arguments to execute.

    Returns:
        Command list that runs as the target user.
    """
    current = os.environ.get("USER") or os.environ.get("LOGNAME")
    if not is_root() and current == user:
        return list(args)
    return ["sudo", "-EH", "-u", user, *args]
