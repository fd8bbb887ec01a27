"""First-boot provisioning run.

Orchestrates the network gate, package reconciliation, and the auxiliary
profile tasks, then prints how long the run took.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from vmprov.core.network import ConnectivityProbe
from vmprov.core.profile import copy_dotfiles, run_installer
from vmprov.core.reconciler import Reconciler
from vmprov.models.result import ProvisionReport
from vmprov.utils.formatting import console as default_console

if TYPE_CHECKING:
    from rich.console import Console

    from vmprov.models.config import ProvisionConfig
    from vmprov.operators.base import Operator
    from vmprov.queries.base import PackageQuery

logger = logging.getLogger(__name__)


class Provisioner:
    """Runs a complete provisioning pass for one configuration.

    Lack of network is not a failure: the run stops early and reports
    itself as skipped.
    """

    def __init__(
        self,
        config: ProvisionConfig,
        query: PackageQuery,
        operator: Operator,
        *,
        probe: ConnectivityProbe | None = None,
        console: Console | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config
        self.probe = probe or ConnectivityProbe()
        self._console = console or default_console
        self._clock = clock
        self.reconciler = Reconciler(
            query,
            operator,
            name_width=config.display.name_width,
            version_width=config.display.version_width,
            console=self._console,
        )

    def network_available(self) -> bool:
        """Run the network gate and print its outcome."""
        network = self.config.network
        host = urlsplit(network.url).hostname or network.url

        if self.probe.probe(network.url, network.attempts, network.timeout_seconds):
            self._console.print("Network connection detected...")
            return True

        self._console.print(f"Network connection not detected. Unable to reach {host}...")
        return False

    def run(self, *, check_network: bool = True, extras: bool = True) -> ProvisionReport:
        """Provision the machine.

        Args:
            check_network: If False, skip the network gate.
            extras: If False, skip dotfile copies and installer scripts.

        Returns:
            ProvisionReport describing the run.

        Raises:
            ReconcileError: If refreshing the index or the batched install failed.
        """
        start = self._clock()
        report = ProvisionReport()

        if check_network and not self.network_available():
            self._console.print("\nNo network connection available, skipping package installation")
            report.network_available = False
            report.duration_seconds = self._clock() - start
            return report

        self._console.print(" ")
        self._console.print("Main packages check and install.")
        report.packages = self.reconciler.reconcile(self.config.packages.install)

        if extras:
            profile = self.config.profile
            report.extras.extend(copy_dotfiles(profile, self._console))
            for installer in self.config.installers:
                report.extras.append(run_installer(installer, profile.user, self._console))

        report.duration_seconds = self._clock() - start
        self._console.print("-----------------------------")
        self._console.print(
            f"Provisioning complete in {int(report.duration_seconds)} seconds",
            highlight=False,
        )
        return report
