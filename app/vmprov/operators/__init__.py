"""Package operators for executing installer steps.

This module provides the abstract operator interface and its APT
implementation.
"""

from vmprov.operators.apt import AptOperator
from vmprov.operators.base import Operator

__all__ = ["AptOperator", "Operator"]
