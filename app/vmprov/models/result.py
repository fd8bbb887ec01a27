"""Result models for installer steps and reconciliation runs.

This module defines the outcome records produced by operators and
collected by the reconciler and provisioner.
"""

from dataclasses import dataclass, field
from enum import Enum

from vmprov.models.package import PackageStatus


class StepType(Enum):
    """Installer step performed against the package manager.

    Attributes:
        REFRESH: Refresh the package index.
        INSTALL: Install a batch of packages.
        AUTOREMOVE: Remove packages no longer required by anything.
        CLEAN: Clear the local package cache.
    """

    REFRESH = "refresh"
    INSTALL = "install"
    AUTOREMOVE = "autoremove"
    CLEAN = "clean"

    @property
    def is_cleanup(self) -> bool:
        """Check if failures of this step are non-fatal."""
        return self in (StepType.AUTOREMOVE, StepType.CLEAN)


@dataclass(frozen=True, slots=True)
class StepResult:
    """Result of a single installer step.

    Attributes:
        step: The step that was executed.
        success: Whether the step completed successfully.
        packages: Packages the step operated on (install only).
        message: Optional success message or additional information.
        error: Optional error message if the step failed.
    """

    step: StepType
    success: bool
    packages: tuple[str, ...] = ()
    message: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the step failed."""
        return not self.success


@dataclass(slots=True)
class ReconcileReport:
    """Outcome of one reconciliation run.

    Attributes:
        statuses: Classification of every desired package, in order.
        steps: Installer steps executed, in order.
    """

    statuses: list[PackageStatus] = field(default_factory=list)
    steps: list[StepResult] = field(default_factory=list)

    @property
    def missing(self) -> list[str]:
        """Names of packages classified as not installed, in desired order."""
        return [s.name for s in self.statuses if not s.is_installed]

    @property
    def installed(self) -> list[PackageStatus]:
        """Statuses of packages already installed."""
        return [s for s in self.statuses if s.is_installed]

    @property
    def changed(self) -> bool:
        """Check if the package manager was asked to change anything."""
        return bool(self.steps)

    @property
    def cleanup_failures(self) -> list[StepResult]:
        """Failed cleanup steps (autoremove/clean)."""
        return [s for s in self.steps if s.failed and s.step.is_cleanup]


@dataclass(frozen=True, slots=True)
class ExtraResult:
    """Result of an auxiliary provisioning task (dotfile copy or installer).

    Attributes:
        name: Human-readable task name.
        success: Whether the task completed.
        detail: Additional information or error text.
    """

    name: str
    success: bool
    detail: str | None = None


@dataclass(slots=True)
class ProvisionReport:
    """Outcome of a complete first-boot provisioning run.

    Attributes:
        network_available: False if the run stopped at the network gate.
        packages: Reconciliation report, if reconciliation ran.
        extras: Results of dotfile copies and installer scripts.
        duration_seconds: Wall-clock duration of the run.
    """

    network_available: bool = True
    packages: ReconcileReport | None = None
    extras: list[ExtraResult] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def skipped(self) -> bool:
        """Check if provisioning was skipped for lack of network."""
        return not self.network_available

    @property
    def extra_failures(self) -> list[ExtraResult]:
        """Auxiliary tasks that failed."""
        return [e for e in self.extras if not e.success]
