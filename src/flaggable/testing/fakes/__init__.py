"""Testing fakes – in-memory doubles for feature flag ports."""
from flaggable.testing.fakes.feature_flags import FakeLocaleSupport, FakeRemoteConfigProvider, RecordingPreferenceStore

__all__ = ["FakeLocaleSupport", "FakeRemoteConfigProvider", "RecordingPreferenceStore"]
