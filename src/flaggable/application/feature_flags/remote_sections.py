"""Feature flags – RemoteSectionAdapter.

Translates a remote bundle's section-enablement map into a
:class:`UserFeaturePreference` for the features that are backed by one.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from flaggable.application.feature_flags.locales import is_pocket_locale_supported
from flaggable.application.feature_flags.names import (
    FeatureFlagName,
    HomeScreenSection,
    TabTraySection,
    UserFeaturePreference,
)
from flaggable.application.feature_flags.ports import (
    LocaleSupport,
    RemoteConfigProvider,
)
from flaggable.config.build import current_locale as process_locale
from flaggable.observability.logging import get_logger

HOMESCREEN_FEATURE_ID = "homescreen"
TAB_TRAY_FEATURE_ID = "tab-tray-feature"

HOMEPAGE_SECTIONS: Mapping[FeatureFlagName, HomeScreenSection] = MappingProxyType({
    FeatureFlagName.JUMP_BACK_IN: HomeScreenSection.JUMP_BACK_IN,
    FeatureFlagName.RECENTLY_SAVED: HomeScreenSection.RECENTLY_SAVED,
    FeatureFlagName.POCKET: HomeScreenSection.POCKET,
})

TAB_TRAY_SECTIONS: Mapping[FeatureFlagName, TabTraySection] = MappingProxyType({
    FeatureFlagName.INACTIVE_TABS: TabTraySection.INACTIVE_TABS,
})

_log = get_logger(__name__)


class RemoteSectionAdapter:
    """Resolve remote-backed feature defaults.

    Any feature outside the section tables, a missing snapshot, or a
    provider that raises all resolve to ``disabled``.

    Parameters
    ----------
    provider:
        Source of remote bundle snapshots. Never asked to refresh.
    is_locale_supported:
        Predicate for Pocket content availability.
    current_locale:
        Returns the locale identifier of the running process.
    """

    def __init__(
        self,
        provider: RemoteConfigProvider,
        *,
        is_locale_supported: LocaleSupport = is_pocket_locale_supported,
        current_locale: Callable[[], str] = process_locale,
    ) -> None:
        self._provider = provider
        self._is_locale_supported = is_locale_supported
        self._current_locale = current_locale

    def resolve_homepage_section(self, feature: FeatureFlagName) -> UserFeaturePreference:
        section = HOMEPAGE_SECTIONS.get(feature)
        if section is None:
            return UserFeaturePreference.DISABLED

        if not self._section_enabled(HOMESCREEN_FEATURE_ID, section.value):
            return UserFeaturePreference.DISABLED

        # Pocket is the only locale-gated section; checked after the section
        # map so a disabled section never costs a locale lookup.
        if section is HomeScreenSection.POCKET:
            locale = self._current_locale()
            if not self._is_locale_supported(locale):
                _log.debug("pocket_locale_unsupported", locale=locale)
                return UserFeaturePreference.DISABLED

        return UserFeaturePreference.ENABLED

    def resolve_tab_tray_section(self, feature: FeatureFlagName) -> UserFeaturePreference:
        section = TAB_TRAY_SECTIONS.get(feature)
        if section is None:
            return UserFeaturePreference.DISABLED

        if not self._section_enabled(TAB_TRAY_FEATURE_ID, section.value):
            return UserFeaturePreference.DISABLED
        return UserFeaturePreference.ENABLED

    def _sections(self, feature_id: str) -> Mapping[str, bool] | None:
        try:
            snapshot = self._provider.feature(feature_id).value()
        except Exception as exc:  # noqa: BLE001 – remote state must never fail resolution
            _log.warning("remote_config_unavailable", feature_id=feature_id, error=repr(exc))
            return None
        sections = getattr(snapshot, "sections_enabled", None)
        if not isinstance(sections, Mapping):
            _log.warning("remote_config_missing_snapshot", feature_id=feature_id)
            return None
        return sections

    def _section_enabled(self, feature_id: str, section: str) -> bool:
        sections = self._sections(feature_id)
        return sections is not None and sections.get(section) is True


__all__ = [
    "HOMEPAGE_SECTIONS",
    "HOMESCREEN_FEATURE_ID",
    "RemoteSectionAdapter",
    "TAB_TRAY_FEATURE_ID",
    "TAB_TRAY_SECTIONS",
]
