"""MongoDB adapter — TimedCollection."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Final, Mapping

from mp_query_timeout.application.hooks import HookSchema
from mp_query_timeout.observability.logging import get_logger

_log = get_logger(__name__)

#: Governed operation name -> motor collection method.
DRIVER_METHODS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "count": "count_documents",
        "find": "find",
        "findOne": "find_one",
        "findOneAndRemove": "find_one_and_delete",
        "findOneAndUpdate": "find_one_and_update",
        "update": "update_one",
    }
)

#: Driver method -> keyword that sends the budget to the server as ``maxTimeMS``.
#: ``update_one`` takes no such keyword and runs under ``pymongo.timeout()``.
SERVER_BUDGET_OPTIONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "count_documents": "maxTimeMS",
        "find": "max_time_ms",
        "find_one": "max_time_ms",
        "find_one_and_delete": "maxTimeMS",
        "find_one_and_update": "maxTimeMS",
    }
)


def _require_pymongo() -> Any:
    try:
        import pymongo
        return pymongo
    except ImportError as exc:
        raise ImportError("Install 'mp-query-timeout[mongodb]' to use the MongoDB adapter") from exc


class MongoQuery:
    """Query context handed to before-hooks for one driver call."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        self.budget_ms: int | None = None

    def max_time_ms(self, ms: int) -> "MongoQuery":
        self.budget_ms = ms
        return self

    def __repr__(self) -> str:
        return f"MongoQuery(operation={self.operation!r}, budget_ms={self.budget_ms!r})"


class TimedCollection:
    """Run governed operations on a **motor** collection through a hook schema.

    Before-hooks see a :class:`MongoQuery`. When one of them sets a budget,
    reads and find-and-modify calls pass it to the server as ``maxTimeMS``
    (see :data:`SERVER_BUDGET_OPTIONS`) and the server aborts them with
    ``ExecutionTimeout`` (code 50). ``update`` has no such option and runs
    inside ``pymongo.timeout()`` instead; if that client-side deadline fires
    before the server answers, the driver raises ``NetworkTimeout``, which
    carries no code 50 and is not reported to timeout observers.
    After-hooks always run with ``(error, result)``; the original error is
    then re-raised unchanged.

    Usage::

        schema = HookSchema().plugin(QueryTimeout(timeout=2000))
        orders = TimedCollection(db.orders, schema)
        doc = await orders.find_one({"_id": order_id})
    """

    def __init__(self, collection: Any, schema: HookSchema) -> None:
        self._col = collection
        self._schema = schema

    @property
    def schema(self) -> HookSchema:
        return self._schema

    async def execute(self, operation: str, *args: Any, **kwargs: Any) -> Any:
        """Run *operation* with hooks; ``find`` returns a list of documents."""
        try:
            method_name = DRIVER_METHODS[operation]
        except KeyError:
            raise ValueError(f"Unsupported operation {operation!r}") from None

        query = MongoQuery(operation)
        self._schema.run_before(operation, query)
        try:
            result = await self._call(method_name, query, args, kwargs)
        except Exception as exc:
            _log.debug("mongodb.operation_failed", operation=operation, error=repr(exc))
            self._schema.run_after(operation, exc, None)
            raise
        self._schema.run_after(operation, None, result)
        return result

    async def _call(
        self,
        method_name: str,
        query: MongoQuery,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        if query.budget_ms is None:
            return await self._invoke(method_name, args, kwargs)
        budget_option = SERVER_BUDGET_OPTIONS.get(method_name)
        if budget_option is not None:
            return await self._invoke(method_name, args, {**kwargs, budget_option: query.budget_ms})
        pymongo = _require_pymongo()
        with pymongo.timeout(query.budget_ms / 1000):
            return await self._invoke(method_name, args, kwargs)

    async def _invoke(self, method_name: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        if method_name == "find":
            # The cursor only talks to the server once it is iterated
            cursor = self._col.find(*args, **kwargs)
            return await cursor.to_list(length=None)
        return await getattr(self._col, method_name)(*args, **kwargs)

    # ------------------------------------------------------------------
    # Named operations
    # ------------------------------------------------------------------

    async def count(self, filter: dict[str, Any], **kwargs: Any) -> int:  # noqa: A002
        return await self.execute("count", filter, **kwargs)

    async def find(self, filter: dict[str, Any] | None = None, **kwargs: Any) -> list[dict[str, Any]]:  # noqa: A002
        return await self.execute("find", filter or {}, **kwargs)

    async def find_one(self, filter: dict[str, Any] | None = None, **kwargs: Any) -> dict[str, Any] | None:  # noqa: A002
        return await self.execute("findOne", filter or {}, **kwargs)

    async def find_one_and_remove(self, filter: dict[str, Any], **kwargs: Any) -> dict[str, Any] | None:  # noqa: A002
        return await self.execute("findOneAndRemove", filter, **kwargs)

    async def find_one_and_update(
        self, filter: dict[str, Any], update: dict[str, Any], **kwargs: Any  # noqa: A002
    ) -> dict[str, Any] | None:
        return await self.execute("findOneAndUpdate", filter, update, **kwargs)

    async def update(self, filter: dict[str, Any], update: dict[str, Any], **kwargs: Any) -> Any:  # noqa: A002
        return await self.execute("update", filter, update, **kwargs)


__all__ = ["DRIVER_METHODS", "SERVER_BUDGET_OPTIONS", "MongoQuery", "TimedCollection"]
