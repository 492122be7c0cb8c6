"""Observability – structlog configuration and logger helpers."""
from tagcache.observability.logging.factory import JsonLoggerFactory
from tagcache.observability.logging.processors import RedactProcessor, get_logger

__all__ = ["JsonLoggerFactory", "RedactProcessor", "get_logger"]
