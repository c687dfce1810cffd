"""Unit tests for observability logging."""

from __future__ import annotations

import logging
from typing import Any, Iterator
from unittest.mock import MagicMock

import pytest
import structlog
from structlog.testing import capture_logs

from authrealm.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    AuditLogger,
    AuditOutcome,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)
from authrealm.security.oauth import FileRealm
from authrealm.security.random import SecureRandomGenerator


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"password": "s3cr3t", "username": "alice"})
        assert result["password"] == SensitiveFieldsFilter.REDACTED
        assert result["username"] == "alice"

    def test_redacts_all_default_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({field: "value" for field in DEFAULT_SENSITIVE_FIELDS})
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_case_insensitive_key_matching(self) -> None:
        result = SensitiveFieldsFilter().redact({"PASSWORD": "p", "Token": "t", "normal": "ok"})
        assert result["PASSWORD"] == SensitiveFieldsFilter.REDACTED
        assert result["Token"] == SensitiveFieldsFilter.REDACTED
        assert result["normal"] == "ok"

    def test_custom_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter(sensitive_fields=frozenset({"otp"}))
        result = f.redact({"otp": "123456", "password": "keep"})
        assert result["otp"] == SensitiveFieldsFilter.REDACTED
        assert result["password"] == "keep"

    def test_redact_deep_nested(self) -> None:
        data: dict[str, Any] = {"user": "alice", "client": {"client_secret": "x", "token": "abc"}}
        result = SensitiveFieldsFilter().redact_deep(data)
        assert result["user"] == "alice"
        assert result["client"]["client_secret"] == SensitiveFieldsFilter.REDACTED
        assert result["client"]["token"] == SensitiveFieldsFilter.REDACTED

    def test_redact_does_not_modify_original(self) -> None:
        original = {"password": "secret"}
        SensitiveFieldsFilter().redact(original)
        assert original["password"] == "secret"

    def test_usable_as_structlog_processor(self) -> None:
        event = SensitiveFieldsFilter()(None, "info", {"event": "login", "token": "abc"})
        assert event == {"event": "login", "token": SensitiveFieldsFilter.REDACTED}


# ---------------------------------------------------------------------------
# JsonLoggerFactory / get_logger
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_configure_installs_json_handler(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_configure_with_sensitive_fields(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG, sensitive_fields=frozenset({"my_secret"}))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[0], SensitiveFieldsFilter)

    def test_get_logger_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("test", realm="users").info("hello")
        assert logs == [{"event": "hello", "realm": "users", "log_level": "info"}]


# ---------------------------------------------------------------------------
# AuditLogger
# ---------------------------------------------------------------------------


class TestAuditLogger:
    def test_log_access(self) -> None:
        log = MagicMock()
        AuditLogger(service="api", logger=log).log_access(
            "alice", "/manager/x", "read", AuditOutcome.DENIED
        )
        event, kwargs = log.warning.call_args.args[0], log.warning.call_args.kwargs
        assert event == "audit.access"
        assert kwargs["principal"] == "alice"
        assert kwargs["outcome"] == "denied"
        assert kwargs["service"] == "api"

    def test_security_event_without_principal(self) -> None:
        log = MagicMock()
        AuditLogger(logger=log).log_security_event("policy_reload", description="startup")
        kwargs = log.warning.call_args.kwargs
        assert "principal" not in kwargs
        assert kwargs["description"] == "startup"

    def test_default_logger_is_structlog(self) -> None:
        with capture_logs() as logs:
            AuditLogger(service="svc").log_security_event("login", "alice")
        assert logs[0]["event"] == "audit.login"
        assert logs[0]["log_level"] == "warning"


# ---------------------------------------------------------------------------
# Realm log hygiene
# ---------------------------------------------------------------------------


class TestRealmLogging:
    def test_rejected_login_logged_at_debug_without_secrets(self) -> None:
        realm = FileRealm(SecureRandomGenerator())
        realm.add_user("alice", "hunter2")
        with capture_logs() as logs:
            assert realm.verify("alice", "wrong") is None
        assert [e["event"] for e in logs] == ["login_rejected"]
        assert logs[0]["log_level"] == "debug"
        assert "wrong" not in repr(logs)

    def test_issued_token_never_logged(self) -> None:
        realm = FileRealm(SecureRandomGenerator())
        realm.add_user("alice", "hunter2")
        with capture_logs() as logs:
            principal = realm.verify("alice", "hunter2")
            assert principal is not None
            realm.authenticate(principal.token)
            realm.revoke(principal)
        assert principal.token not in repr(logs)
        assert {e["log_level"] for e in logs} == {"debug"}
