"""Feature flags – identifiers and option value types."""
from __future__ import annotations

import enum

from flaggable.config.build import BuildChannel


class FeatureFlagName(enum.Enum):
    """Closed set of feature identifiers known to this build."""

    BOTTOM_SEARCH_BAR = "bottomSearchBar"
    CHRONOLOGICAL_TABS = "chronologicalTabs"
    HISTORY_GROUPS = "historyGroups"
    HISTORY_HIGHLIGHTS = "historyHighlights"
    INACTIVE_TABS = "inactiveTabs"
    JUMP_BACK_IN = "jumpBackIn"
    POCKET = "pocket"
    PULL_TO_REFRESH = "pullToRefresh"
    RECENTLY_SAVED = "recentlySaved"
    REPORT_SITE_ISSUE = "reportSiteIssue"
    SHAKE_TO_RESTORE = "shakeToRestore"
    START_AT_HOME = "startAtHome"
    TAB_TRAY_GROUPS = "tabTrayGroups"
    WALLPAPERS = "wallpapers"


class UserFeaturePreference(str, enum.Enum):
    """Canonical option value when a feature has no richer option type."""

    ENABLED = "enabled"
    DISABLED = "disabled"


class StartAtHomeSetting(str, enum.Enum):
    AFTER_FOUR_HOURS = "afterFourHours"
    ALWAYS = "always"
    DISABLED = "disabled"


class HomeScreenSection(str, enum.Enum):
    """Section ids of the remote ``homescreen`` feature bundle."""

    TOP_SITES = "top-sites"
    JUMP_BACK_IN = "jump-back-in"
    RECENTLY_SAVED = "recently-saved"
    POCKET = "pocket"
    LIBRARY_SHORTCUTS = "library-shortcuts"


class TabTraySection(str, enum.Enum):
    """Section ids of the remote ``tab-tray-feature`` bundle."""

    INACTIVE_TABS = "inactive-tabs"


__all__ = [
    "BuildChannel",
    "FeatureFlagName",
    "HomeScreenSection",
    "StartAtHomeSetting",
    "TabTraySection",
    "UserFeaturePreference",
]
