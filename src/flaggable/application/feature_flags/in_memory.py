"""Feature flags – in-memory PreferenceStore and RemoteConfigProvider."""

from __future__ import annotations

from typing import Mapping

from flaggable.application.feature_flags.ports import (
    PreferenceStore,
    RemoteConfigProvider,
    RemoteFeature,
    SectionsSnapshot,
)


class InMemoryPreferenceStore(PreferenceStore):
    """Preference store backed by a plain ``{key: value}`` dict.

    Booleans and strings share one key space, as in a platform defaults
    store; reading a key with the wrong type yields ``None``.
    """

    def __init__(self, values: Mapping[str, bool | str] | None = None) -> None:
        self._values: dict[str, bool | str] = dict(values or {})

    def bool_for_key(self, key: str) -> bool | None:
        value = self._values.get(key)
        return value if isinstance(value, bool) else None

    def string_for_key(self, key: str) -> str | None:
        value = self._values.get(key)
        return value if isinstance(value, str) else None

    def set_bool(self, key: str, value: bool) -> None:
        self._values[key] = bool(value)

    def set_string(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def snapshot(self) -> dict[str, bool | str]:
        """Copy of every stored value."""
        return dict(self._values)


class _StaticRemoteFeature:
    def __init__(self, snapshot: SectionsSnapshot | None) -> None:
        self._snapshot = snapshot

    def value(self) -> SectionsSnapshot | None:
        return self._snapshot


class InMemoryRemoteConfigProvider(RemoteConfigProvider):
    """Remote configuration served from a ``{feature_id: {section: bool}}`` dict.

    Unknown feature ids have no snapshot.
    """

    def __init__(self, features: Mapping[str, Mapping[str, bool]] | None = None) -> None:
        self._features: dict[str, SectionsSnapshot] = {
            feature_id: SectionsSnapshot(sections) for feature_id, sections in (features or {}).items()
        }

    def publish(self, feature_id: str, sections: Mapping[str, bool]) -> None:
        """Replace the snapshot held for *feature_id*."""
        self._features[feature_id] = SectionsSnapshot(sections)

    def feature(self, feature_id: str) -> RemoteFeature:
        return _StaticRemoteFeature(self._features.get(feature_id))


__all__ = ["InMemoryPreferenceStore", "InMemoryRemoteConfigProvider"]
