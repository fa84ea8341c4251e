"""Application – feature flag resolution."""

from flaggable.application.feature_flags import FeatureFlagName, FlaggableFeature, PreferenceStore, RemoteConfigProvider

__all__ = ["FeatureFlagName", "FlaggableFeature", "PreferenceStore", "RemoteConfigProvider"]
