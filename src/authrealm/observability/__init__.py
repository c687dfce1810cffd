"""Observability – structured logging and audit trail."""

from authrealm.observability.logging import (
    AuditLogger,
    AuditOutcome,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
