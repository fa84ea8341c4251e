"""Config settings – 12-factor env-based configuration."""
from flaggable.config.settings.base import Settings
from flaggable.config.settings.factory import SettingsFactory
from flaggable.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
