"""Testing support – fakes for the feature flag ports.

Use in your tests::

    from flaggable.testing import FakeLocaleSupport, FakeRemoteConfigProvider
"""

from flaggable.testing.fakes import FakeLocaleSupport, FakeRemoteConfigProvider, RecordingPreferenceStore

__all__ = ["FakeLocaleSupport", "FakeRemoteConfigProvider", "RecordingPreferenceStore"]
