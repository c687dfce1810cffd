"""Config settings – env-based configuration."""
from authrealm.config.settings.base import RealmSettings, Settings
from authrealm.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "RealmSettings", "Settings", "SettingsLoader"]
