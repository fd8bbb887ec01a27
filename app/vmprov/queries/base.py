"""Abstract base class for package queries.

This module defines the PackageQuery interface that the reconciler uses
to look up the installation state of individual packages.
"""

from abc import ABC, abstractmethod

from vmprov.models.package import PackageRecord


class QueryError(Exception):
    """Raised when the package database cannot answer for a package."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Could not query package '{name}': {reason}")


class PackageQuery(ABC):
    """Abstract base class for all package queries.

    A query answers, for a single package name, whether the package
    database knows it and what its installed policy reads. Parsing of
    package-manager output stays inside the concrete query.

    Example:
        >>> query = AptQuery()
        >>> if query.is_available():
        ...     record = query.query("git")
        ...     print(record.known, record.installed_policy)
    """

    @abstractmethod
    def query(self, name: str) -> PackageRecord:
        """Look up a single package.

        Args:
            name: Package name to look up.

        Returns:
            PackageRecord describing what the database knows.

        Raises:
            QueryError: If the database could not be queried.
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the package database tools are available.

        Returns:
            True if the query can be used, False otherwise.
        """
