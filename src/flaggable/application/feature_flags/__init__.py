"""Application feature flags – resolver, key derivation, and ports."""
from flaggable.application.feature_flags.flaggable import DEFAULT_OPTIONS, FeatureState, FlaggableFeature
from flaggable.application.feature_flags.in_memory import InMemoryPreferenceStore, InMemoryRemoteConfigProvider
from flaggable.application.feature_flags.keys import (
    FEATURE_KEYS,
    OPTIONS_KEY_SUFFIX,
    base_key,
    derive_key,
    derive_options_key,
    feature_for_key,
)
from flaggable.application.feature_flags.locales import POCKET_SUPPORTED_LOCALES, is_pocket_locale_supported
from flaggable.application.feature_flags.names import (
    BuildChannel,
    FeatureFlagName,
    HomeScreenSection,
    StartAtHomeSetting,
    TabTraySection,
    UserFeaturePreference,
)
from flaggable.application.feature_flags.ports import (
    LocaleSupport,
    PreferenceStore,
    RemoteConfigProvider,
    RemoteFeature,
    SectionsSnapshot,
)
from flaggable.application.feature_flags.remote_sections import (
    HOMEPAGE_SECTIONS,
    HOMESCREEN_FEATURE_ID,
    TAB_TRAY_FEATURE_ID,
    TAB_TRAY_SECTIONS,
    RemoteSectionAdapter,
)

__all__ = [
    "BuildChannel",
    "DEFAULT_OPTIONS",
    "FEATURE_KEYS",
    "FeatureFlagName",
    "FeatureState",
    "FlaggableFeature",
    "HOMEPAGE_SECTIONS",
    "HOMESCREEN_FEATURE_ID",
    "HomeScreenSection",
    "InMemoryPreferenceStore",
    "InMemoryRemoteConfigProvider",
    "LocaleSupport",
    "OPTIONS_KEY_SUFFIX",
    "POCKET_SUPPORTED_LOCALES",
    "PreferenceStore",
    "RemoteConfigProvider",
    "RemoteFeature",
    "RemoteSectionAdapter",
    "SectionsSnapshot",
    "StartAtHomeSetting",
    "TAB_TRAY_FEATURE_ID",
    "TAB_TRAY_SECTIONS",
    "TabTraySection",
    "UserFeaturePreference",
    "base_key",
    "derive_key",
    "derive_options_key",
    "feature_for_key",
    "is_pocket_locale_supported",
]
