"""APT package query implementation.

Looks up packages with dpkg -s (status database record and version) and
apt-cache policy (installed candidate).
"""

import logging
import subprocess

from vmprov.models.package import PackageRecord
from vmprov.queries.base import PackageQuery, QueryError
from vmprov.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)


class AptQuery(PackageQuery):
    """Query for APT/dpkg packages.

    A package is "known" when dpkg -s prints a Version field for it. For
    known packages the "Installed:" line of apt-cache policy is reported
    as the installed policy, which reads "(none)" for packages that were
    removed but left configuration behind.
    """

    _QUERY_TIMEOUT: float = 30.0
    # Field labels like "Installed:" are translated in other locales
    _QUERY_ENV: dict[str, str] = {"LC_ALL": "C"}

    def is_available(self) -> bool:
        """Check if dpkg and apt-cache are available."""
        return command_exists("dpkg") and command_exists("apt-cache")

    def query(self, name: str) -> PackageRecord:
        """Look up a package in the dpkg and apt databases.

        Args:
            name: Package name to look up.

        Returns:
            PackageRecord for the package.

        Raises:
            RuntimeError: If dpkg or apt-cache are not available.
            QueryError: If a query command cannot be run or fails.
        """
        if not self.is_available():
            msg = "APT package manager is not available on this system"
            raise RuntimeError(msg)

        status = self._run(name, ["dpkg", "-s", name])
        version = _field(status.stdout, "Version") if status.success else None
        if version is None:
            logger.debug("No dpkg record for %s", name)
            return PackageRecord(name=name, known=False)

        policy = self._run(name, ["apt-cache", "policy", name])
        if not policy.success:
            raise QueryError(name, f"apt-cache policy failed: {policy.error_text}")

        installed = _field(policy.stdout, "Installed")
        logger.debug("Package %s: version=%s installed=%s", name, version, installed)
        return PackageRecord(
            name=name,
            known=True,
            installed_policy=installed,
            version=version,
        )

    def _run(self, name: str, args: list[str]) -> CommandResult:
        """Run a query command, converting execution errors to QueryError."""
        try:
            return run_command(args, timeout=self._QUERY_TIMEOUT, env=self._QUERY_ENV)
        except subprocess.TimeoutExpired as e:
            raise QueryError(name, f"{args[0]} timed out") from e
        except OSError as e:
            raise QueryError(name, f"{args[0]} could not be run: {e}") from e


def _field(output: str, key: str) -> str | None:
    """Extract the first "Key: value" field from command output.

    Args:
        output: Command output, one field per line.
        key: Field name without the colon.

    Returns:
        Stripped value, or None if the field is missing or empty.
    """
    prefix = f"{key}:"
    for line in output.splitlines():
        stripped = line.strip()
        if stripped.startswith(prefix):
            value = stripped[len(prefix) :].strip()
            return value or None
    return None
