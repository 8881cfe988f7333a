"""Resilience – QueryTimeout plugin.

Builds before/after hook pairs that give every governed query operation a
server-side time budget and report timeout failures to an observer::

    schema = HookSchema()
    schema.plugin(QueryTimeout(timeout=5000, error_handler=alert))

The plugin never cancels anything itself. The before-hook hands the budget
to the query (``max_time_ms``) and the host aborts the operation; the
after-hook recognises the resulting error by its status code.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, ClassVar

from mp_query_timeout.config.validation import parse_timeout, validate_options
from mp_query_timeout.kernel.errors import ValidationError
from mp_query_timeout.observability.logging import get_logger
from mp_query_timeout.resilience.timeouts.classifier import error_code, is_timeout_error
from mp_query_timeout.resilience.timeouts.constants import DEFAULT_TIMEOUT, METHODS
from mp_query_timeout.resilience.timeouts.hooks import (
    AfterHook,
    BeforeHook,
    HookRegistry,
    Proceed,
    QueryContext,
)

ErrorHandler = Callable[[Any], None]

_OPTION_KEYS = frozenset({"timeout", "methods", "error_handler"})
_ERROR_HANDLER_ALIAS = "errorHandler"

_log = get_logger(__name__)


def _noop(error: Any) -> None:  # noqa: ARG001
    return None


@dataclasses.dataclass(frozen=True)
class QueryTimeoutOptions:
    """Validated, immutable plugin configuration.

    ``timeout`` accepts anything whose integer rendering round-trips
    (``5000`` or ``"5000"``) and is stored as ``int``. ``methods`` maps an
    operation name to ``False`` to exclude it; any other value is ignored.
    """

    timeout: Any = DEFAULT_TIMEOUT
    methods: Mapping[str, Any] | None = None
    error_handler: ErrorHandler = _noop

    def __post_init__(self) -> None:
        try:
            validate_options(self.timeout, self.error_handler, self.methods)
        except ValidationError as exc:
            _log.info(
                "query_timeout.options_invalid",
                violations=[v.to_dict() for v in exc.details],
            )
            raise
        object.__setattr__(self, "timeout", parse_timeout(self.timeout))
        object.__setattr__(self, "methods", MappingProxyType(dict(self.methods or {})))

    @classmethod
    def from_mapping(
        cls, options: Mapping[str, Any] | None = None, /, **overrides: Any
    ) -> "QueryTimeoutOptions":
        """Build options from a mapping, with keyword *overrides* on top.

        Absent keys take their defaults; keys present with ``None`` do not.
        ``errorHandler`` is accepted as an alias of ``error_handler``, the
        name violation records report.
        """
        merged = dict(options or {})
        merged.update(overrides)
        if _ERROR_HANDLER_ALIAS in merged:
            if "error_handler" in merged:
                raise TypeError("Pass either 'error_handler' or 'errorHandler', not both")
            merged["error_handler"] = merged.pop(_ERROR_HANDLER_ALIAS)
        unknown = set(merged) - _OPTION_KEYS
        if unknown:
            raise TypeError(
                f"Unknown query timeout option(s): {', '.join(sorted(map(str, unknown)))}"
            )
        return cls(**merged)

    def is_excluded(self, operation: str) -> bool:
        return (self.methods or {}).get(operation) is False

    def governed_methods(self) -> tuple[str, ...]:
        return tuple(name for name in METHODS if not self.is_excluded(name))


def _before_hook(timeout: int) -> BeforeHook:
    def before(query: QueryContext) -> None:
        query.max_time_ms(timeout)

    return before


def _after_hook(operation: str, timeout: int, error_handler: ErrorHandler) -> AfterHook:
    def after(error: Any, result: Any, proceed: Proceed) -> None:  # noqa: ARG001
        try:
            if error is not None and is_timeout_error(error):
                _log.warning(
                    "query_timeout.exceeded",
                    operation=operation,
                    timeout_ms=timeout,
                    code=error_code(error),
                )
                error_handler(error)
        finally:
            proceed()

    return after


class QueryTimeout:
    """Plugin that installs timeout hook pairs on a :class:`HookRegistry`.

    Options are validated on construction; an invalid configuration raises
    :class:`~mp_query_timeout.kernel.errors.ValidationError` listing every
    violation and no plugin is produced. The instance is then applied to any
    number of registries, each decorated identically.
    """

    DEFAULT_TIMEOUT: ClassVar[int] = DEFAULT_TIMEOUT
    METHODS: ClassVar[tuple[str, ...]] = METHODS

    def __init__(self, options: Mapping[str, Any] | None = None, /, **overrides: Any) -> None:
        self.options = QueryTimeoutOptions.from_mapping(options, **overrides)
        _log.debug(
            "query_timeout.configured",
            timeout_ms=self.options.timeout,
            methods=list(self.options.governed_methods()),
        )

    def __call__(self, registry: HookRegistry) -> None:
        options = self.options
        for name in options.methods or {}:
            if name not in METHODS:
                _log.debug("query_timeout.unknown_method_ignored", operation=name)

        for name in METHODS:
            if options.is_excluded(name):
                _log.debug("query_timeout.method_excluded", operation=name)
                continue
            registry.register_before(name, _before_hook(options.timeout))
            registry.register_after(
                name, _after_hook(name, options.timeout, options.error_handler)
            )

    def __repr__(self) -> str:
        return (
            f"QueryTimeout(timeout={self.options.timeout!r}, "
            f"methods={list(self.options.governed_methods())!r})"
        )


def query_timeout(options: Mapping[str, Any] | None = None, /, **overrides: Any) -> QueryTimeout:
    """Validate *options* and return the transform to apply to a registry."""
    return QueryTimeout(options, **overrides)


__all__ = ["ErrorHandler", "QueryTimeout", "QueryTimeoutOptions", "query_timeout"]
