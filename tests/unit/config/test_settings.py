"""Unit tests for config settings loaders and errors."""

import pathlib
from dataclasses import dataclass
from typing import ClassVar

import pytest

from flaggable.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
)
from flaggable.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError


# ---------------------------------------------------------------------------
# Concrete settings class used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    channel: str = "other"
    locale: str = "en_US"

    def _validate(self) -> None:
        self.channel = self.channel.lower()
        if self.channel not in {"release", "beta", "other"}:
            raise InvalidSettingValueError("channel", self.channel, "unknown channel")


# ---------------------------------------------------------------------------
# Settings.env_key
# ---------------------------------------------------------------------------


class TestEnvKey:
    def test_prefixed(self) -> None:
        assert AppSettings.env_key("locale") == "APP_LOCALE"

    def test_without_prefix(self) -> None:
        @dataclass
        class Bare(Settings):
            locale: str = "en_US"

        assert Bare.env_key("locale") == "LOCALE"


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_LOCALE", "de_DE")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.locale == "de_DE"

    def test_value_normalised_by_validate(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_CHANNEL", "BETA")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.channel == "beta"

    def test_defaults_preserved_when_env_absent(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        for key in ("APP_CHANNEL", "APP_LOCALE"):
            monkeypatch.delenv(key, raising=False)
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.channel == "other"
        assert settings.locale == "en_US"

    def test_missing_required_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        @dataclass
        class StrictSettings(Settings):
            _prefix: ClassVar[str] = "STRICT"
            required_field: str

        monkeypatch.delenv("STRICT_REQUIRED_FIELD", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(StrictSettings)
        assert exc_info.value.setting_name == "STRICT_REQUIRED_FIELD"

    def test_validation_error_propagates_unwrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_CHANNEL", "nightly")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(AppSettings)
        assert exc_info.value.value == "nightly"

    def test_construction_failure_wrapped(self) -> None:
        @dataclass
        class BrokenSettings(Settings):
            _prefix: ClassVar[str] = "BROKEN"
            name: str = "x"

            def _validate(self) -> None:
                raise RuntimeError("boom")

        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader().load(BrokenSettings)
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert exc_info.value.__cause__ is exc_info.value.cause


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> None:
        # Register both keys so monkeypatch removes what load_dotenv sets.
        for key in ("APP_CHANNEL", "APP_LOCALE"):
            monkeypatch.setenv(key, "placeholder")
            monkeypatch.delenv(key)
        env_file = tmp_path / ".env"
        env_file.write_text("APP_CHANNEL=release\nAPP_LOCALE=en_GB\n")
        settings = DotenvSettingsLoader(str(env_file)).load(AppSettings)
        assert settings.channel == "release"
        assert settings.locale == "en_GB"

    def test_environment_wins_without_override(
        self, tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("APP_LOCALE", "fr_FR")
        env_file = tmp_path / ".env"
        env_file.write_text("APP_LOCALE=en_GB\n")
        settings = DotenvSettingsLoader(str(env_file)).load(AppSettings)
        assert settings.locale == "fr_FR"


# ---------------------------------------------------------------------------
# Config errors
# ---------------------------------------------------------------------------


class TestConfigErrors:
    def test_missing_required_setting_stores_name(self) -> None:
        err = MissingRequiredSettingError("FLAGS_LOCALE")
        assert err.setting_name == "FLAGS_LOCALE"
        assert str(err) == "Required setting 'FLAGS_LOCALE' is missing"

    def test_is_config_error(self) -> None:
        assert isinstance(MissingRequiredSettingError("X"), ConfigError)
        assert isinstance(InvalidSettingValueError("X", 1, "r"), ConfigError)

    def test_codes(self) -> None:
        assert ConfigError("bad config").code == "config_error"
        assert MissingRequiredSettingError("FOO").code == "missing_required_setting"
        assert InvalidSettingValueError("FOO", 1, "r").code == "invalid_setting_value"

    def test_invalid_value_attributes(self) -> None:
        err = InvalidSettingValueError("build_channel", "nightly", "unknown channel")
        assert err.setting_name == "build_channel"
        assert err.value == "nightly"
        assert err.reason == "unknown channel"
        assert "nightly" in err.message
        assert err.detail == {"setting": "build_channel"}

    def test_repr(self) -> None:
        assert repr(ConfigError("bad")) == "ConfigError(code='config_error', message='bad')"
