"""Observability – structured logging helpers."""
from authrealm.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from authrealm.observability.logging.factory import JsonLoggerFactory
from authrealm.observability.logging.processors import get_logger
from authrealm.observability.logging.audit import AuditLogger, AuditOutcome

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
