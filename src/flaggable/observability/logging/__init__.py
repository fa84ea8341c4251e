"""Observability – structured logging helpers."""
from flaggable.observability.logging.factory import JsonLoggerFactory
from flaggable.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
