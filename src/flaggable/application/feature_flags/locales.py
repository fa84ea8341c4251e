"""Feature flags – default locale predicate for Pocket content."""
from __future__ import annotations

POCKET_SUPPORTED_LOCALES: frozenset[str] = frozenset({
    "de_AT",
    "de_CH",
    "de_DE",
    "en_CA",
    "en_GB",
    "en_US",
    "en_ZA",
})


def is_pocket_locale_supported(locale_identifier: str) -> bool:
    """``True`` when Pocket stories are served for *locale_identifier*.

    Accepts ``en-US`` as well as ``en_US``.
    """
    return locale_identifier.replace("-", "_") in POCKET_SUPPORTED_LOCALES


__all__ = ["POCKET_SUPPORTED_LOCALES", "is_pocket_locale_supported"]
