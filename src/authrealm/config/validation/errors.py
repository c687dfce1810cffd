"""Config validation errors."""
from __future__ import annotations

from typing import Any

from authrealm.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Realm configuration is invalid or could not be loaded.

    Configuration faults are fatal: hosts should refuse to start rather than
    serve with a partially configured engine. When the fault concerns one
    setting, its name is kept on ``setting_name`` and in ``detail``.
    """

    default_code = "config_error"

    def __init__(self, message: str, *, setting: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.setting_name = setting
        if setting is not None:
            self.detail.setdefault("setting", setting)


class MissingRequiredSettingError(ConfigError):
    """A required environment variable has no value."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing", setting=setting_name)


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable (e.g. a token width below the floor)."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            setting=setting_name,
            detail={"reason": reason},
        )
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
