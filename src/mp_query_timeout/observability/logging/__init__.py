"""Observability – structured logging helpers."""
from mp_query_timeout.observability.logging.factory import JsonLoggerFactory
from mp_query_timeout.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
