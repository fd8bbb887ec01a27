"""Idempotent package-set reconciliation.

Classifies each desired package, then installs exactly the missing subset
in one batched call followed by orphan and cache cleanup. A run where
every package is already installed touches nothing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vmprov.models.package import PackageStatus, unique_names
from vmprov.models.result import ReconcileReport, StepResult
from vmprov.queries.base import QueryError
from vmprov.utils.formatting import console as default_console
from vmprov.utils.formatting import print_package_line

if TYPE_CHECKING:
    from rich.console import Console

    from vmprov.models.package import DesiredPackageSet
    from vmprov.operators.base import Operator
    from vmprov.queries.base import PackageQuery

logger = logging.getLogger(__name__)


class ReconcileError(Exception):
    """Base exception for fatal reconciliation failures.

    Attributes:
        result: The failed step.
        report: Report of the run up to the failure.
    """

    def __init__(self, message: str, result: StepResult, report: ReconcileReport) -> None:
        self.result = result
        self.report = report
        super().__init__(message)


class IndexRefreshError(ReconcileError):
    """Raised when the package index could not be refreshed."""


class InstallBatchError(ReconcileError):
    """Raised when the batched install failed.

    Which packages of the batch made it onto the system is not tracked.
    """

    @property
    def packages(self) -> tuple[str, ...]:
        """Packages of the failed batch."""
        return self.result.packages


class Reconciler:
    """Brings the installed package set up to a desired set.

    The reconciler only talks to the PackageQuery and Operator
    abstractions, so any package manager (or a fake) can be plugged in.

    Attributes:
        query: Package query used to classify packages.
        operator: Operator used to change the package set.
    """

    def __init__(
        self,
        query: PackageQuery,
        operator: Operator,
        *,
        name_width: int = 20,
        version_width: int = 30,
        console: Console | None = None,
    ) -> None:
        """Initialize the reconciler.

        Args:
            query: Package query used to classify packages.
            operator: Operator used to change the package set.
            name_width: Width of the name column in status lines.
            version_width: Width of the version column in status lines.
            console: Console receiving status lines. Defaults to stdout.
        """
        self.query = query
        self.operator = operator
        self._name_width = name_width
        self._version_width = version_width
        self._console = console or default_console

    def classify(self, name: str) -> PackageStatus:
        """Classify a single package.

        A failed query classifies the package as not installed, so it is
        re-installed rather than silently skipped.

        Args:
            name: Package name.

        Returns:
            PackageStatus for the package.
        """
        try:
            record = self.query.query(name)
        except QueryError as e:
            logger.warning("%s; assuming it is not installed", e)
            return PackageStatus.unknown(name)
        return PackageStatus.from_record(record)

    def check(self, desired: DesiredPackageSet) -> ReconcileReport:
        """Classify every desired package and print one line per package.

        Args:
            desired: Package names in display order.

        Returns:
            ReconcileReport with statuses and no executed steps.
        """
        report = ReconcileReport()
        for name in unique_names(desired):
            status = self.classify(name)
            report.statuses.append(status)
            print_package_line(status, self._name_width, self._version_width, self._console)
        return report

    def reconcile(self, desired: DesiredPackageSet) -> ReconcileReport:
        """Install the packages of the desired set that are missing.

        Steps run in a fixed order: refresh index, batched install,
        autoremove, clean cache. Nothing runs when no package is missing.

        Args:
            desired: Package names in display order.

        Returns:
            ReconcileReport describing the run.

        Raises:
            IndexRefreshError: If refreshing the package index failed.
            InstallBatchError: If the batched install failed.
        """
        report = self.check(desired)
        missing = report.missing

        if not missing:
            self._console.print("No apt packages to install.\n")
            logger.info("All %d desired package(s) already installed", len(report.statuses))
            return report

        self._console.print("Running apt-get update...")
        refresh = self._record(report, self.operator.refresh_index())
        if refresh.failed:
            msg = f"Package index refresh failed: {refresh.error}"
            raise IndexRefreshError(msg, refresh, report)

        self._console.print("Installing apt-get packages...")
        install = self._record(report, self.operator.install(missing))
        if install.failed:
            msg = f"Installing {len(missing)} package(s) failed: {install.error}"
            raise InstallBatchError(msg, install, report)

        self._console.print("Removing unnecessary packages...")
        self._record(report, self.operator.autoremove())
        self._record(report, self.operator.clean_cache())

        return report

    def _record(self, report: ReconcileReport, result: StepResult) -> StepResult:
        report.steps.append(result)
        if result.failed and result.step.is_cleanup:
            logger.warning("Cleanup step %s failed: %s", result.step.value, result.error)
        return result
