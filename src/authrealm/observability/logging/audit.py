"""Observability – AuditLogger.

A dedicated structured-log sink for authentication events (logins, token
revocations).
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import Any

from authrealm.observability.logging.processors import get_logger


class AuditOutcome(str, Enum):
    """Standardised audit outcomes."""

    SUCCESS = "success"
    FAILURE = "failure"
    DENIED = "denied"
    ERROR = "error"


class AuditLogger:
    """Structured-log sink for security-sensitive actions.

    All audit entries are emitted at ``WARNING`` level so they pass through
    even restrictive log-level filters.

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        Underlying structlog logger. Defaults to one named ``audit``.
    """

    def __init__(self, service: str = "unknown", logger: Any = None) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("audit")

    def log_access(
        self,
        principal: Any,
        resource: str,
        action: str,
        outcome: AuditOutcome | str = AuditOutcome.SUCCESS,
        **extra: Any,
    ) -> None:
        """Record a permission decision on *resource*."""
        entry: dict[str, Any] = {
            "service": self._service,
            "principal": _principal_name(principal),
            "resource": resource,
            "action": action,
            "outcome": outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            "timestamp": _now(),
            **extra,
        }
        self._log.warning("audit.access", **entry)

    def log_security_event(
        self,
        event_type: str,
        principal: Any = None,
        description: str = "",
        **extra: Any,
    ) -> None:
        """Record a generic security event (``"login"``, ``"logout"``, …).

        *principal* may be a :class:`~authrealm.kernel.security.Principal` or
        a bare username.
        """
        entry: dict[str, Any] = {
            "service": self._service,
            "event_type": event_type,
            "description": description,
            "timestamp": _now(),
            **extra,
        }
        if principal is not None:
            entry["principal"] = _principal_name(principal)
        self._log.warning(f"audit.{event_type}", **entry)


def _principal_name(principal: Any) -> str:
    return getattr(principal, "name", None) or str(principal)


def _now() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


__all__ = ["AuditLogger", "AuditOutcome"]
