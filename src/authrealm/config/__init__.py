"""Config – 12-factor settings for the policy engine and token realm."""

from authrealm.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RealmSettings,
    Settings,
    SettingsLoader,
)
from authrealm.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RealmSettings",
    "Settings",
    "SettingsLoader",
]
