"""Feature flags – preference key derivation.

``FEATURE_KEYS`` is the single place that ties a :class:`FeatureFlagName` to
its storage identity. The strings are persisted by existing stores and must
not change. Every identifier is listed; ``None`` marks a feature that is
controlled by build channel only and cannot be toggled or given an option.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from flaggable.application.feature_flags.names import FeatureFlagName

OPTIONS_KEY_SUFFIX = "UserPreferences"

FEATURE_KEYS: Mapping[FeatureFlagName, str | None] = MappingProxyType({
    FeatureFlagName.BOTTOM_SEARCH_BAR: None,
    FeatureFlagName.CHRONOLOGICAL_TABS: "ChronologicalTabsUserPrefsKey",
    FeatureFlagName.HISTORY_GROUPS: "HistoryGroupsUserPrefsKey",
    FeatureFlagName.HISTORY_HIGHLIGHTS: "HistoryHighlightsSectionUserPrefsKey",
    FeatureFlagName.INACTIVE_TABS: "InactiveTabsUserPrefsKey",
    FeatureFlagName.JUMP_BACK_IN: "JumpBackInSectionUserPrefsKey",
    FeatureFlagName.POCKET: "ASPocketStoriesVisible",
    FeatureFlagName.PULL_TO_REFRESH: "PullToRefreshUserPrefsKey",
    FeatureFlagName.RECENTLY_SAVED: "RecentlySavedSectionUserPrefsKey",
    FeatureFlagName.REPORT_SITE_ISSUE: None,
    FeatureFlagName.SHAKE_TO_RESTORE: None,
    FeatureFlagName.START_AT_HOME: "StartAtHomeUserPrefsKey",
    FeatureFlagName.TAB_TRAY_GROUPS: "TabTrayGroupsUserPrefsKey",
    FeatureFlagName.WALLPAPERS: "CustomWallpaperUserPrefsKey",
})

_missing = set(FeatureFlagName) - set(FEATURE_KEYS)
if _missing:
    raise RuntimeError(
        f"FEATURE_KEYS has no entry for {sorted(m.name for m in _missing)}; "
        "add a key or map it to None"
    )
del _missing

_FEATURES_BY_KEY: Mapping[str, FeatureFlagName] = MappingProxyType(
    {key: feature for feature, key in FEATURE_KEYS.items() if key is not None}
)


def derive_key(feature: object) -> str | None:
    """Persisted-preference key for *feature*, or ``None`` if it has none.

    Values outside :class:`FeatureFlagName` also resolve to ``None``.
    """
    return FEATURE_KEYS.get(feature)  # type: ignore[call-overload]


def derive_options_key(key: str | None) -> str | None:
    """Options key for a base *key*: the key plus ``"UserPreferences"``."""
    if key is None:
        return None
    return key + OPTIONS_KEY_SUFFIX


def base_key(options_key: str) -> str | None:
    """Inverse of :func:`derive_options_key`; ``None`` if the suffix is absent."""
    if not options_key.endswith(OPTIONS_KEY_SUFFIX) or options_key == OPTIONS_KEY_SUFFIX:
        return None
    return options_key[: -len(OPTIONS_KEY_SUFFIX)]


def feature_for_key(key: str) -> FeatureFlagName | None:
    """Which feature a persisted key (base or options key) belongs to."""
    feature = _FEATURES_BY_KEY.get(key)
    if feature is None:
        stripped = base_key(key)
        if stripped is not None:
            feature = _FEATURES_BY_KEY.get(stripped)
    return feature


__all__ = [
    "FEATURE_KEYS",
    "OPTIONS_KEY_SUFFIX",
    "base_key",
    "derive_key",
    "derive_options_key",
    "feature_for_key",
]
