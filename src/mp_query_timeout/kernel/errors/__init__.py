"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    └── ApplicationError     (application.py)
        └── HookChainError
"""

from mp_query_timeout.kernel.errors.application import ApplicationError, HookChainError
from mp_query_timeout.kernel.errors.base import BaseError
from mp_query_timeout.kernel.errors.domain import DomainError, ValidationError, Violation

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "HookChainError",
    "ValidationError",
    "Violation",
]
