"""Feature flags – ports consumed by the resolver.

The resolver does not own any of these collaborators; they are injected and
their lifecycle (persistence, caching, network refresh) is theirs.
"""
from __future__ import annotations

import abc
import dataclasses
from types import MappingProxyType
from typing import Callable, Mapping, Protocol

LocaleSupport = Callable[[str], bool]
"""Predicate answering whether content is available for a locale identifier."""


class PreferenceStore(abc.ABC):
    """Port: flat string-keyed preference storage.

    Implementations own their own concurrency discipline; callers never
    assume atomicity across two calls.
    """

    @abc.abstractmethod
    def bool_for_key(self, key: str) -> bool | None: ...

    @abc.abstractmethod
    def string_for_key(self, key: str) -> str | None: ...

    @abc.abstractmethod
    def set_bool(self, key: str, value: bool) -> None: ...

    @abc.abstractmethod
    def set_string(self, key: str, value: str) -> None: ...


@dataclasses.dataclass(frozen=True)
class SectionsSnapshot:
    """Read-only view of a remote bundle's ``sectionsEnabled`` map."""

    sections_enabled: Mapping[str, bool] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sections_enabled", MappingProxyType(dict(self.sections_enabled)))


class RemoteFeature(Protocol):
    """A single remote feature bundle (e.g. ``homescreen``).

    ``value()`` may return any object exposing a ``sections_enabled``
    mapping; :class:`SectionsSnapshot` is the one this package builds.
    """

    def value(self) -> SectionsSnapshot | None: ...


class RemoteConfigProvider(abc.ABC):
    """Port: remote experiment configuration.

    ``feature`` must not perform network I/O on behalf of the caller; it
    hands out whatever snapshot the provider currently holds.
    """

    @abc.abstractmethod
    def feature(self, feature_id: str) -> RemoteFeature: ...


__all__ = [
    "LocaleSupport",
    "PreferenceStore",
    "RemoteConfigProvider",
    "RemoteFeature",
    "SectionsSnapshot",
]
