"""
mp_query_timeout – bounded-time query hooks for data-access layers.

Import path convention::

    from mp_query_timeout import QueryTimeout
    from mp_query_timeout.application.hooks import HookSchema
    from mp_query_timeout.adapters.mongodb import TimedCollection
    from mp_query_timeout.kernel.errors import ValidationError
"""

from mp_query_timeout.resilience.timeouts import (
    DEFAULT_TIMEOUT,
    METHODS,
    HookRegistry,
    QueryTimeout,
    QueryTimeoutOptions,
    is_timeout_error,
    query_timeout,
)

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_TIMEOUT",
    "METHODS",
    "HookRegistry",
    "QueryTimeout",
    "QueryTimeoutOptions",
    "__version__",
    "is_timeout_error",
    "query_timeout",
]
