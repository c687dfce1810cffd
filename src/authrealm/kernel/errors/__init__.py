"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   ├── CapacityError
    │   └── NotFoundError
    │       ├── RoleNotFoundError
    │       └── UnknownApplicationError
    └── ApplicationError     (application.py)
        ├── UnauthorizedError
        ├── ForbiddenError
        ├── SecurityContextError
        └── PolicyLoadError
"""

from authrealm.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    PolicyLoadError,
    SecurityContextError,
    UnauthorizedError,
)
from authrealm.kernel.errors.base import BaseError
from authrealm.kernel.errors.domain import (
    CapacityError,
    DomainError,
    NotFoundError,
    RoleNotFoundError,
    UnknownApplicationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CapacityError",
    "DomainError",
    "ForbiddenError",
    "NotFoundError",
    "PolicyLoadError",
    "RoleNotFoundError",
    "SecurityContextError",
    "UnauthorizedError",
    "UnknownApplicationError",
    "ValidationError",
]
