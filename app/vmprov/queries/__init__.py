"""Package queries for different package managers.

This module exports the query classes used to classify packages.
"""

from vmprov.queries.apt import AptQuery
from vmprov.queries.base import PackageQuery, QueryError

__all__ = ["AptQuery", "PackageQuery", "QueryError"]
