"""Observability – structured logging helpers."""
from tagcache.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
