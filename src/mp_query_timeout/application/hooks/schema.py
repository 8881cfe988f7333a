"""Application hooks – HookSchema, an in-memory hook host."""
from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable

from mp_query_timeout.kernel.errors import HookChainError
from mp_query_timeout.resilience.timeouts.hooks import (
    AfterHook,
    BeforeHook,
    HookRegistry,
    QueryContext,
)


class _Proceed:
    """Continuation handed to one after-hook; must be called exactly once."""

    def __init__(self, operation: str) -> None:
        self._operation = operation
        self.calls = 0

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        if args or kwargs:
            raise HookChainError(self._operation, "received arguments in proceed()")
        self.calls += 1
        if self.calls > 1:
            raise HookChainError(self._operation, "called proceed() more than once")


class HookSchema(HookRegistry):
    """Ordered before/after hooks per operation name.

    Hooks run in registration order. An after-hook continues the chain by
    calling ``proceed()``; a hook that returns without doing so stalls the
    chain and :meth:`run_after` raises :class:`HookChainError`.

    Usage::

        schema = HookSchema().plugin(QueryTimeout(timeout=5000))
        schema.run_before("find", query)
        ...
        schema.run_after("find", error, result)
    """

    def __init__(self) -> None:
        self._before: defaultdict[str, list[BeforeHook]] = defaultdict(list)
        self._after: defaultdict[str, list[AfterHook]] = defaultdict(list)

    def register_before(self, operation: str, hook: BeforeHook) -> None:
        self._before[operation].append(hook)

    def register_after(self, operation: str, hook: AfterHook) -> None:
        self._after[operation].append(hook)

    def plugin(self, fn: Callable[[HookRegistry], Any]) -> "HookSchema":
        """Apply *fn* to this schema (fluent API)."""
        fn(self)
        return self

    def before_hooks(self, operation: str) -> tuple[BeforeHook, ...]:
        return tuple(self._before.get(operation, ()))

    def after_hooks(self, operation: str) -> tuple[AfterHook, ...]:
        return tuple(self._after.get(operation, ()))

    @property
    def operations(self) -> tuple[str, ...]:
        """Operation names with at least one hook, in first-registration order."""
        names = list(self._before)
        names.extend(name for name in self._after if name not in self._before)
        return tuple(names)

    def run_before(self, operation: str, query: QueryContext) -> None:
        for hook in self.before_hooks(operation):
            hook(query)

    def run_after(self, operation: str, error: BaseException | None, result: Any) -> None:
        for hook in self.after_hooks(operation):
            proceed = _Proceed(operation)
            hook(error, result, proceed)
            if proceed.calls == 0:
                raise HookChainError(operation, "stalled: hook returned without calling proceed()")


__all__ = ["HookSchema"]
