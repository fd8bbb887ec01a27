"""Package models for package-set reconciliation.

This module defines the data structures exchanged between the package
query adapters and the reconciler.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

# Ordered package names that should end up installed
DesiredPackageSet = Sequence[str]

# Policy values meaning "known to the database but not installed"
_NONE_POLICIES = frozenset({"none", "(none)"})


@dataclass(frozen=True, slots=True)
class PackageRecord:
    """What the package database reports about a single package name.

    Attributes:
        name: Package name as queried.
        known: Whether the package database has any record for the name.
        installed_policy: Raw "Installed:" value from the policy query
            (e.g. '2.3.1-1' or '(none)'); None when not reported.
        version: Installed version from the status database, if available.
    """

    name: str
    known: bool
    installed_policy: str | None = field(default=None)
    version: str | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    @property
    def policy_is_none(self) -> bool:
        """Check if the installed policy is missing or reads as 'none'.

        A missing or blank policy counts as 'none' on purpose, so a package
        whose status can't be read gets installed instead of skipped.
        """
        if self.installed_policy is None:
            return True
        policy = self.installed_policy.strip().lower()
        return not policy or policy in _NONE_POLICIES


@dataclass(frozen=True, slots=True)
class PackageStatus:
    """Classification result for a single package.

    Attributes:
        name: Package name.
        known: Whether the package database has a record for it.
        installed_version: Installed version; None means not installed.
        query_failed: True if the status could not be queried and the
            package was assumed to be missing.
    """

    name: str
    known: bool
    installed_version: str | None = field(default=None)
    query_failed: bool = field(default=False)

    @property
    def is_installed(self) -> bool:
        """Check if the package counts as installed."""
        return bool(self.installed_version)

    @classmethod
    def from_record(cls, record: PackageRecord) -> "PackageStatus":
        """Classify a query record.

        A package is installed only when the database knows it and its
        installed policy names something other than 'none'.

        Args:
            record: Record returned by a package query.

        Returns:
            PackageStatus for the record.
        """
        if not record.known or record.policy_is_none:
            return cls(name=record.name, known=record.known)

        version = (record.version or record.installed_policy or "").strip()
        return cls(name=record.name, known=True, installed_version=version)

    @classmethod
    def unknown(cls, name: str) -> "PackageStatus":
        """Status used when the query for a package failed."""
        return cls(name=name, known=False, query_failed=True)


def unique_names(names: Iterable[str]) -> list[str]:
    """Drop blank names and repeated names, keeping first occurrences.

    Args:
        names: Package names in desired order.

    Returns:
        List of stripped, non-empty, unique names in input order.
    """
    seen: set[str] = set()
    result: list[str] = []
    for raw in names:
        name = raw.strip()
        if not name or name in seen:
            continue
        seen.add(name)
        result.append(name)
    return result
