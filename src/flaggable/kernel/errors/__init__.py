"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError     (application.py)
        └── ConfigError      (flaggable.config.validation)
"""

from flaggable.kernel.errors.application import ApplicationError
from flaggable.kernel.errors.base import BaseError

__all__ = ["ApplicationError", "BaseError"]
