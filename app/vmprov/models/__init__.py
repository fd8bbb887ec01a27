"""Data models for vmprov.

This module exports the core data structures used throughout the application.
"""

from vmprov.models.config import (
    DisplayConfig,
    DotfileEntry,
    InstallerEntry,
    NetworkConfig,
    PackagesConfig,
    ProfileConfig,
    ProvisionConfig,
)
from vmprov.models.package import DesiredPackageSet, PackageRecord, PackageStatus
from vmprov.models.result import (
    ExtraResult,
    ProvisionReport,
    ReconcileReport,
    StepResult,
    StepType,
)

__all__ = [
    "DesiredPackageSet",
    "DisplayConfig",
    "DotfileEntry",
    "ExtraResult",
    "InstallerEntry",
    "NetworkConfig",
    "PackageRecord",
    "PackageStatus",
    "PackagesConfig",
    "ProfileConfig",
    "ProvisionConfig",
    "ProvisionReport",
    "ReconcileReport",
    "StepResult",
    "StepType",
]
