"""APT package operator implementation.

Executes index refresh, batched installation, orphan cleanup, and cache
cleanup using apt-get.
"""

import logging
import subprocess

from vmprov.models.result import StepResult, StepType
from vmprov.operators.base import Operator
from vmprov.utils.shell import as_root, command_exists, run_command

logger = logging.getLogger(__name__)


class AptOperator(Operator):
    """Operator for APT/dpkg packages.

    Uses apt-get non-interactively. Commands run through sudo unless the
    process is already root.

    Attributes:
        dry_run: If True, uses apt-get --dry-run to simulate mutations.
    """

    # Timeout for apt operations (30 minutes; first-boot installs are large)
    _APT_TIMEOUT: float = 1800.0

    _APT_ENV: dict[str, str] = {"DEBIAN_FRONTEND": "noninteractive"}

    def is_available(self) -> bool:
        """Check if apt-get is available."""
        return command_exists("apt-get")

    def refresh_index(self) -> StepResult:
        """Refresh package lists using apt-get update.

        The index lives in /var/lib/apt/lists, so dry-run skips it and
        simulates against the current lists.

        Returns:
            StepResult for the refresh.

        Raises:
            RuntimeError: If apt-get is not available.
        """
        self._require_available()

        if self.dry_run:
            return StepResult(step=StepType.REFRESH, success=True, message="Skipped (dry-run)")

        return self._execute(StepType.REFRESH, ["update"])

    def install(self, packages: list[str]) -> StepResult:
        """Install packages using a single apt-get install call.

        apt-get treats the batch as one transaction, so the result covers
        all packages at once.

        Args:
            packages: Package names to install.

        Returns:
            StepResult covering the whole batch.

        Raises:
            RuntimeError: If apt-get is not available.
        """
        self._require_available()

        if not packages:
            return StepResult(step=StepType.INSTALL, success=True, message="Nothing to install")

        return self._execute(StepType.INSTALL, ["install"], packages)

    def autoremove(self) -> StepResult:
        """Remove unneeded dependencies using apt-get autoremove.

        Returns:
            StepResult for the orphan cleanup.

        Raises:
            RuntimeError: If apt-get is not available.
        """
        self._require_available()
        return self._execute(StepType.AUTOREMOVE, ["autoremove"])

    def clean_cache(self) -> StepResult:
        """Clear downloaded archives using apt-get clean.

        apt-get clean has no simulation mode, so dry-run skips it.

        Returns:
            StepResult for the cache cleanup.

        Raises:
            RuntimeError: If apt-get is not available.
        """
        self._require_available()

        if self.dry_run:
            return StepResult(step=StepType.CLEAN, success=True, message="Skipped (dry-run)")

        return self._execute(StepType.CLEAN, ["clean"])

    def _require_available(self) -> None:
        if not self.is_available():
            msg = "APT package manager is not available on this system"
            raise RuntimeError(msg)

    def _execute(
        self,
        step: StepType,
        command: list[str],
        packages: list[str] | None = None,
    ) -> StepResult:
        """Execute an apt-get command and wrap the outcome.

        Args:
            step: Step being executed.
            command: apt-get subcommand and its arguments.
            packages: Package names appended to the command.

        Returns:
            StepResult for the command.
        """
        args = ["apt-get", *command, "-y"]

        # Simulation needs no root
        if self.dry_run:
            args.append("--dry-run")
        else:
            args = as_root(args)

        batch = list(packages or [])
        args.extend(batch)

        logger.info(
            "Executing apt-get %s%s (dry_run=%s)",
            " ".join(command),
            f" for packages: {', '.join(batch)}" if batch else "",
            self.dry_run,
        )

        try:
            result = run_command(args, timeout=self._APT_TIMEOUT, env=self._APT_ENV)
        except subprocess.TimeoutExpired:
            return StepResult(
                step=step,
                success=False,
                packages=tuple(batch),
                error=f"apt-get {command[0]} timed out after {self._APT_TIMEOUT:.0f}s",
            )
        except OSError as e:
            return StepResult(
                step=step,
                success=False,
                packages=tuple(batch),
                error=f"apt-get {command[0]} could not be run: {e}",
            )

        if result.success:
            message = "Dry-run completed" if self.dry_run else "Operation completed"
            return StepResult(step=step, success=True, packages=tuple(batch), message=message)

        logger.debug("apt-get %s output: %s", command[0], result.stdout[-2000:])
        return StepResult(
            step=step,
            success=False,
            packages=tuple(batch),
            error=result.stderr.strip() or f"apt-get {command[0]} failed",
        )
