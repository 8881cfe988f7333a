"""Resilience – host hook-registration port.

Any data-access layer can host the query-timeout hooks by adapting its own
pre/post extension points to :class:`HookRegistry`.
"""
from __future__ import annotations

import abc
from typing import Any, Callable, Protocol


class QueryContext(Protocol):
    """The in-flight query a before-hook configures."""

    def max_time_ms(self, ms: int) -> Any: ...


Proceed = Callable[[], None]
BeforeHook = Callable[[QueryContext], None]
AfterHook = Callable[[Any, Any, Proceed], None]


class HookRegistry(abc.ABC):
    """Port: register before/after hooks for a named operation.

    The host runs before-hooks immediately prior to an operation, and
    after-hooks with ``(error, result, proceed)`` immediately after it.
    Every after-hook must call ``proceed()`` for the chain to continue.
    """

    @abc.abstractmethod
    def register_before(self, operation: str, hook: BeforeHook) -> None: ...

    @abc.abstractmethod
    def register_after(self, operation: str, hook: AfterHook) -> None: ...


__all__ = ["AfterHook", "BeforeHook", "HookRegistry", "Proceed", "QueryContext"]
