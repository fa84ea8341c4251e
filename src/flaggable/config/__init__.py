"""Config – 12-factor settings and the build channel."""

from flaggable.config.build import (
    BuildChannel,
    FlagSettings,
    current_build_channel,
    current_locale,
    get_flag_settings,
    load_flag_settings,
)
from flaggable.config.settings import EnvSettingsLoader, Settings, SettingsFactory, SettingsLoader
from flaggable.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "BuildChannel",
    "ConfigError",
    "EnvSettingsLoader",
    "FlagSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "current_build_channel",
    "current_locale",
    "get_flag_settings",
    "load_flag_settings",
]
