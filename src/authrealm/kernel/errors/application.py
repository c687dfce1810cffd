"""Application-layer errors — permission checks and policy loading."""

from __future__ import annotations

from typing import Any

from authrealm.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """Missing or invalid credentials."""

    default_code = "unauthorized"


class ForbiddenError(ApplicationError):
    """Authenticated principal lacks required permission."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        permission: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.permission = permission


class SecurityContextError(ApplicationError):
    """A permission check ran outside of any security context scope."""

    default_code = "no_security_context"

    def __init__(self, message: str = "No active security context", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class PolicyLoadError(ApplicationError):
    """The policy source could not populate the policy manager.

    Hosts should treat this as a fatal startup failure.
    """

    default_code = "policy_load_error"

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.source = source


__all__ = [
    "ApplicationError",
    "ForbiddenError",
    "PolicyLoadError",
    "SecurityContextError",
    "UnauthorizedError",
]
