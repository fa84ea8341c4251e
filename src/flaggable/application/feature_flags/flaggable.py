"""Feature flags – FlaggableFeature resolver."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Iterable, Mapping

from flaggable.application.feature_flags.keys import derive_key, derive_options_key
from flaggable.application.feature_flags.names import (
    BuildChannel,
    FeatureFlagName,
    StartAtHomeSetting,
    UserFeaturePreference,
)
from flaggable.application.feature_flags.ports import PreferenceStore
from flaggable.application.feature_flags.remote_sections import (
    HOMEPAGE_SECTIONS,
    TAB_TRAY_SECTIONS,
    RemoteSectionAdapter,
)
from flaggable.config.build import current_build_channel
from flaggable.observability.logging import get_logger

_log = get_logger(__name__)

# Option defaults that do not depend on remote configuration.
DEFAULT_OPTIONS: Mapping[FeatureFlagName, str] = MappingProxyType({
    FeatureFlagName.START_AT_HOME: StartAtHomeSetting.AFTER_FOUR_HOURS.value,
    # Tapping the banner cycles through wallpapers unless turned off.
    FeatureFlagName.WALLPAPERS: UserFeaturePreference.ENABLED.value,
})


@dataclasses.dataclass(frozen=True)
class FeatureState:
    """Point-in-time view of one feature, for debug menus and inspection."""

    feature: FeatureFlagName
    key: str | None
    options_key: str | None
    is_active: bool
    user_preference: str | None

    @property
    def is_user_togglable(self) -> bool:
        return self.key is not None


class FlaggableFeature:
    """Resolve whether one feature is active and what its option value is.

    Both facets follow the same precedence: a value persisted in *store*
    wins; otherwise the default is computed (build channel membership for
    the active state, a per-feature default for the option).

    Reads never write to *store*. The store is shared and not owned.

    Parameters
    ----------
    feature:
        The identifier this resolver answers for.
    store:
        Local preference store holding manual overrides.
    enabled_for:
        Build channels on which the feature is active by default.
    remote:
        Adapter for features whose option default comes from remote
        configuration. Without one those defaults resolve to ``disabled``.
    build_channel:
        Channel of the running build; defaults to
        :func:`~flaggable.config.current_build_channel`.
    """

    def __init__(
        self,
        feature: FeatureFlagName,
        store: PreferenceStore,
        enabled_for: Iterable[BuildChannel] = (),
        *,
        remote: RemoteSectionAdapter | None = None,
        build_channel: BuildChannel | None = None,
    ) -> None:
        self._feature = feature
        self._store = store
        self._channels: tuple[BuildChannel, ...] = tuple(dict.fromkeys(enabled_for))
        self._remote = remote
        self._build_channel = build_channel if build_channel is not None else current_build_channel()

    def __repr__(self) -> str:
        return (
            f"FlaggableFeature(feature={self._feature!r}, "
            f"enabled_for={self._channels!r}, build_channel={self._build_channel!r})"
        )

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    @property
    def feature(self) -> FeatureFlagName:
        return self._feature

    @property
    def enabled_for(self) -> tuple[BuildChannel, ...]:
        return self._channels

    @property
    def key(self) -> str | None:
        return derive_key(self._feature)

    @property
    def options_key(self) -> str | None:
        return derive_options_key(self.key)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def is_active_for_build(self) -> bool:
        """Return whether the feature is active for this build.

        1. A boolean written under the feature's key (usually set by hand
           from a debug menu) is returned as is.
        2. Otherwise the feature is active iff the running build channel is
           one of ``enabled_for``.
        """
        key = self.key
        if key is not None:
            existing = self._store.bool_for_key(key)
            if existing is not None:
                return existing
        return self._build_channel in self._channels

    def get_user_preference(self) -> str | None:
        """Return the feature's option value as a raw string.

        A persisted option wins. Otherwise ``start_at_home`` and
        ``wallpapers`` have fixed defaults, homepage and tab tray features
        ask remote configuration, and everything else is ``"disabled"``.
        """
        options_key = self.options_key
        if options_key is not None:
            existing = self._store.string_for_key(options_key)
            if existing is not None:
                return existing

        if self._feature in DEFAULT_OPTIONS:
            return DEFAULT_OPTIONS[self._feature]
        if self._feature in HOMEPAGE_SECTIONS:
            if self._remote is None:
                return UserFeaturePreference.DISABLED.value
            return self._remote.resolve_homepage_section(self._feature).value
        if self._feature in TAB_TRAY_SECTIONS:
            if self._remote is None:
                return UserFeaturePreference.DISABLED.value
            return self._remote.resolve_tab_tray_section(self._feature).value
        return UserFeaturePreference.DISABLED.value

    def describe(self) -> FeatureState:
        return FeatureState(
            feature=self._feature,
            key=self.key,
            options_key=self.options_key,
            is_active=self.is_active_for_build(),
            user_preference=self.get_user_preference(),
        )

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set_user_preference_for(self, option: str) -> None:
        """Persist *option* under the feature's options key.

        Does nothing for an empty *option* or a feature without a key. The
        value is not checked against the feature's option type.
        """
        options_key = self.options_key
        if not option or options_key is None:
            return
        self._store.set_string(options_key, option)
        _log.debug("feature_option_set", feature=self._feature.value, key=options_key, value=option)

    def toggle_build_feature(self) -> None:
        """Flip the feature on or off and persist the result.

        Features without a key are build-channel only and are left alone.
        The read and the write are two separate store calls; a concurrent
        writer in between is not guarded against.
        """
        key = self.key
        if key is None:
            return
        value = not self.is_active_for_build()
        self._store.set_bool(key, value)
        _log.debug("feature_toggled", feature=self._feature.value, key=key, value=value)


__all__ = ["DEFAULT_OPTIONS", "FeatureState", "FlaggableFeature"]
