"""Testing fakes – remote configuration, locale support and a recording store."""
from __future__ import annotations

from typing import Iterable

from flaggable.application.feature_flags.in_memory import InMemoryPreferenceStore
from flaggable.application.feature_flags.ports import RemoteConfigProvider, RemoteFeature, SectionsSnapshot


class _FakeRemoteFeature:
    def __init__(self, owner: "FakeRemoteConfigProvider", feature_id: str) -> None:
        self._owner = owner
        self._feature_id = feature_id

    def value(self) -> SectionsSnapshot | None:
        self._owner.value_calls.append(self._feature_id)
        if self._owner.error is not None:
            raise self._owner.error
        sections = self._owner._sections.get(self._feature_id)
        if sections is None:
            return None
        return SectionsSnapshot(sections)


class FakeRemoteConfigProvider(RemoteConfigProvider):
    """Configurable :class:`RemoteConfigProvider` for tests.

    Usage::

        remote = FakeRemoteConfigProvider().enable_section("homescreen", "pocket")
        adapter = RemoteSectionAdapter(remote, is_locale_supported=lambda _: True)

    ``value_calls`` lists the feature ids whose snapshot was read, in order.
    """

    def __init__(self) -> None:
        self._sections: dict[str, dict[str, bool]] = {}
        self.error: Exception | None = None
        self.value_calls: list[str] = []

    def feature(self, feature_id: str) -> RemoteFeature:
        return _FakeRemoteFeature(self, feature_id)

    # ------------------------------------------------------------------
    # Test-setup helpers
    # ------------------------------------------------------------------

    def enable_section(self, feature_id: str, section: str) -> "FakeRemoteConfigProvider":
        self._sections.setdefault(feature_id, {})[section] = True
        return self

    def disable_section(self, feature_id: str, section: str) -> "FakeRemoteConfigProvider":
        self._sections.setdefault(feature_id, {})[section] = False
        return self

    def go_offline(self, error: Exception | None = None) -> "FakeRemoteConfigProvider":
        """Make every ``value()`` call raise *error* (a ``ConnectionError`` by default)."""
        self.error = error or ConnectionError("remote configuration unreachable")
        return self

    def reset(self) -> None:
        self._sections.clear()
        self.error = None
        self.value_calls.clear()


class FakeLocaleSupport:
    """Locale predicate that supports a fixed set and records every query."""

    def __init__(self, supported: Iterable[str] = ()) -> None:
        self.supported = frozenset(supported)
        self.calls: list[str] = []

    def __call__(self, locale_identifier: str) -> bool:
        self.calls.append(locale_identifier)
        return locale_identifier in self.supported


class RecordingPreferenceStore(InMemoryPreferenceStore):
    """:class:`InMemoryPreferenceStore` that records every write."""

    def __init__(self, values: dict[str, bool | str] | None = None) -> None:
        super().__init__(values)
        self.writes: list[tuple[str, bool | str]] = []

    def set_bool(self, key: str, value: bool) -> None:
        self.writes.append((key, value))
        super().set_bool(key, value)

    def set_string(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        super().set_string(key, value)


__all__ = ["FakeLocaleSupport", "FakeRemoteConfigProvider", "RecordingPreferenceStore"]
