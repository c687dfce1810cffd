"""Domain errors — registry contents, capacities and lookups."""

from __future__ import annotations

from typing import Any

from authrealm.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a registry rule or invariant is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """The requested entry does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class RoleNotFoundError(NotFoundError):
    """A role name or role id was never created in the registry."""

    default_code = "role_not_found"

    def __init__(self, role: str | int, **kwargs: Any) -> None:
        super().__init__("Role", role, **kwargs)
        self.role = role


class UnknownApplicationError(NotFoundError):
    """An OAuth ``client_id`` is not registered.

    Unlike a failed login this is a fault: either the host is misconfigured
    or the client identifier was forged.
    """

    default_code = "unknown_application"

    def __init__(self, client_id: str, **kwargs: Any) -> None:
        super().__init__("Application", client_id, **kwargs)
        self.client_id = client_id


class CapacityError(DomainError):
    """A fixed-capacity registry is full."""

    default_code = "capacity_exceeded"

    def __init__(self, resource: str, capacity: int, **kwargs: Any) -> None:
        super().__init__(
            f"{resource} capacity of {capacity} exceeded",
            detail={"resource": resource, "capacity": capacity},
            **kwargs,
        )
        self.resource = resource
        self.capacity = capacity


__all__ = [
    "CapacityError",
    "DomainError",
    "NotFoundError",
    "RoleNotFoundError",
    "UnknownApplicationError",
    "ValidationError",
]
