"""Observability – structlog logging."""

from mp_query_timeout.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
