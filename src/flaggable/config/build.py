"""Config – build channel and process-wide flag settings.

The build channel is fixed for the life of the process: it is read once from
``FLAGS_BUILD_CHANNEL`` (or a ``.env`` file) and cached.
"""
from __future__ import annotations

import dataclasses
import enum
import functools
import logging
from typing import Any, ClassVar

from flaggable.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsFactory
from flaggable.config.validation import InvalidSettingValueError


class BuildChannel(str, enum.Enum):
    """Distribution channel the running build belongs to."""

    RELEASE = "release"
    BETA = "beta"
    DEVELOPER = "developer"
    OTHER = "other"


@dataclasses.dataclass
class FlagSettings(Settings):
    """Environment-driven settings for flag resolution.

    ``locale`` is the identifier handed to locale-support predicates
    (``en_US`` style, underscore separated).
    """

    _prefix: ClassVar[str] = "FLAGS"

    build_channel: str = BuildChannel.OTHER.value
    locale: str = "en_US"
    log_level: str = "INFO"

    def _validate(self) -> None:
        channels = {c.value for c in BuildChannel}
        if self.build_channel.lower() not in channels:
            raise InvalidSettingValueError(
                "build_channel", self.build_channel, f"expected one of {sorted(channels)}"
            )
        self.build_channel = self.build_channel.lower()
        if not self.locale:
            raise InvalidSettingValueError("locale", self.locale, "must not be empty")
        if logging.getLevelName(self.log_level.upper()) == f"Level {self.log_level.upper()}":
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    @property
    def channel(self) -> BuildChannel:
        return BuildChannel(self.build_channel)

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def load_flag_settings(env_file: str | None = None, **overrides: Any) -> FlagSettings:
    """Build :class:`FlagSettings` from the environment, an optional ``.env``
    file and explicit *overrides* (highest priority)."""
    loaders = [EnvSettingsLoader()]
    if env_file is not None:
        loaders.append(DotenvSettingsLoader(env_file))
    return SettingsFactory.create(FlagSettings, loaders, overrides or None)


@functools.lru_cache(maxsize=1)
def get_flag_settings() -> FlagSettings:
    return load_flag_settings()


def current_build_channel() -> BuildChannel:
    """The channel this build was shipped on. Not re-evaluated once read."""
    return get_flag_settings().channel


def current_locale() -> str:
    return get_flag_settings().locale


__all__ = [
    "BuildChannel",
    "FlagSettings",
    "current_build_channel",
    "current_locale",
    "get_flag_settings",
    "load_flag_settings",
]
