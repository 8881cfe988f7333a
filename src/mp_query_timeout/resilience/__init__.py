"""Resilience – bounded-time query execution."""

from mp_query_timeout.resilience.timeouts import (
    DEFAULT_TIMEOUT,
    METHODS,
    HookRegistry,
    QueryTimeout,
    QueryTimeoutOptions,
    QueryTimeoutSettings,
    classify,
    is_timeout_error,
    query_timeout,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "METHODS",
    "HookRegistry",
    "QueryTimeout",
    "QueryTimeoutOptions",
    "QueryTimeoutSettings",
    "classify",
    "is_timeout_error",
    "query_timeout",
]
