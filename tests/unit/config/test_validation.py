"""Unit tests for config validation errors."""

from __future__ import annotations

import pytest

from authrealm.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from authrealm.kernel.errors import ApplicationError


class TestConfigError:
    def test_is_application_error(self) -> None:
        assert isinstance(ConfigError("something went wrong"), ApplicationError)

    def test_default_code(self) -> None:
        assert ConfigError("bad").code == "config_error"

    def test_custom_code_override(self) -> None:
        assert ConfigError("msg", code="custom_cfg").code == "custom_cfg"

    def test_without_setting(self) -> None:
        err = ConfigError("bad")
        assert err.setting_name is None
        assert err.detail == {}

    def test_with_setting(self) -> None:
        err = ConfigError("bad", setting="AUTHREALM_SALT_BITS")
        assert err.setting_name == "AUTHREALM_SALT_BITS"
        assert err.detail == {"setting": "AUTHREALM_SALT_BITS"}


class TestMissingRequiredSettingError:
    def test_is_config_error(self) -> None:
        assert isinstance(MissingRequiredSettingError("FOO"), ConfigError)

    def test_setting_name_stored(self) -> None:
        err = MissingRequiredSettingError("AUTHREALM_TOKEN_BITS")
        assert err.setting_name == "AUTHREALM_TOKEN_BITS"
        assert "AUTHREALM_TOKEN_BITS" in str(err)

    def test_default_code(self) -> None:
        assert MissingRequiredSettingError("X").code == "missing_required_setting"

    def test_setting_in_detail(self) -> None:
        assert MissingRequiredSettingError("STRICT_POLICY_FILE").detail == {"setting": "STRICT_POLICY_FILE"}


class TestInvalidSettingValueError:
    def test_fields(self) -> None:
        err = InvalidSettingValueError("token_bits", 8, "too small")
        assert err.setting_name == "token_bits"
        assert err.value == 8
        assert err.reason == "too small"
        assert err.detail == {"setting": "token_bits", "reason": "too small"}

    def test_caught_as_config_error(self) -> None:
        with pytest.raises(ConfigError):
            raise InvalidSettingValueError("max_roles", 0, "must be positive")
