"""
flaggable – feature toggle resolution.

Import path convention::

    from flaggable.application.feature_flags import FlaggableFeature, FeatureFlagName
    from flaggable.config import FlagSettings, current_build_channel
    from flaggable.observability.logging import get_logger
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
