"""Kernel – framework-agnostic building blocks of the policy engine."""

from authrealm.kernel.errors import (
    ApplicationError,
    BaseError,
    CapacityError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    PolicyLoadError,
    RoleNotFoundError,
    SecurityContextError,
    UnauthorizedError,
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
