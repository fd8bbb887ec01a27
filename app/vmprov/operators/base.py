"""Abstract base class for package operators.

This module defines the Operator interface the reconciler uses to change
the system's package set.
"""

from abc import ABC, abstractmethod

from vmprov.models.result import StepResult


class Operator(ABC):
    """Abstract base class for all package operators.

    Operators execute the four installer steps of a reconciliation run
    for a specific package manager. Each step reports its outcome as a
    StepResult instead of raising on a non-zero exit.

    Attributes:
        dry_run: If True, only simulate steps without executing them.
    """

    def __init__(self, dry_run: bool = False) -> None:
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Whether mutating steps are only simulated."""
        return self._dry_run

    @abstractmethod
    def refresh_index(self) -> StepResult:
        """Refresh the package index.

        Returns:
            StepResult for the refresh.

        Raises:
            RuntimeError: If the package manager is not available.
        """

    @abstractmethod
    def install(self, packages: list[str]) -> StepResult:
        """Install a batch of packages in a single invocation.

        Args:
            packages: Package names to install.

        Returns:
            StepResult covering the whole batch.

        Raises:
            RuntimeError: If the package manager is not available.
        """

    @abstractmethod
    def autoremove(self) -> StepResult:
        """Remove packages that are no longer required.

        Returns:
            StepResult for the orphan cleanup.

        Raises:
            RuntimeError: If the package manager is not available.
        """

    @abstractmethod
    def clean_cache(self) -> StepResult:
        """Clear the local package cache.

        Returns:
            StepResult for the cache cleanup.

        Raises:
            RuntimeError: If the package manager is not available.
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this package manager is available on the system.

        Returns:
            True if the package manager can be used, False otherwise.
        """
