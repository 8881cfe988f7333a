"""Resilience – query timeout plugin, error classification and host port."""
from mp_query_timeout.resilience.timeouts.classifier import (
    ErrorClass,
    classify,
    error_code,
    is_timeout_error,
)
from mp_query_timeout.resilience.timeouts.constants import (
    DEFAULT_TIMEOUT,
    METHODS,
    TIMEOUT_ERROR_CODE,
    TIMEOUT_ERROR_CODE_NAME,
)
from mp_query_timeout.resilience.timeouts.hooks import (
    AfterHook,
    BeforeHook,
    HookRegistry,
    Proceed,
    QueryContext,
)
from mp_query_timeout.resilience.timeouts.plugin import (
    ErrorHandler,
    QueryTimeout,
    QueryTimeoutOptions,
    query_timeout,
)
from mp_query_timeout.resilience.timeouts.settings import QueryTimeoutSettings

__all__ = [
    "DEFAULT_TIMEOUT",
    "METHODS",
    "TIMEOUT_ERROR_CODE",
    "TIMEOUT_ERROR_CODE_NAME",
    "AfterHook",
    "BeforeHook",
    "ErrorClass",
    "ErrorHandler",
    "HookRegistry",
    "Proceed",
    "QueryContext",
    "QueryTimeout",
    "QueryTimeoutOptions",
    "QueryTimeoutSettings",
    "classify",
    "error_code",
    "is_timeout_error",
    "query_timeout",
]
