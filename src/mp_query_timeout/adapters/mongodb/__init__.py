"""MongoDB adapter — run governed operations on a motor collection.

Requires the ``mongodb`` extra::

    pip install "mp-query-timeout[mongodb]"
"""

from mp_query_timeout.adapters.mongodb.collection import (
    DRIVER_METHODS,
    SERVER_BUDGET_OPTIONS,
    MongoQuery,
    TimedCollection,
)

__all__ = ["DRIVER_METHODS", "SERVER_BUDGET_OPTIONS", "MongoQuery", "TimedCollection"]
