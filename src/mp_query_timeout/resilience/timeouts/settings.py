"""Resilience – QueryTimeoutSettings (env-driven plugin configuration)."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

from mp_query_timeout.config.settings import Settings
from mp_query_timeout.config.validation import InvalidSettingValueError
from mp_query_timeout.resilience.timeouts.constants import DEFAULT_TIMEOUT, METHODS


@dataclasses.dataclass
class QueryTimeoutSettings(Settings):
    """Settings read from ``QUERY_TIMEOUT_TIMEOUT_MS`` and
    ``QUERY_TIMEOUT_DISABLED_METHODS`` (comma separated)."""

    _prefix: ClassVar[str] = "QUERY_TIMEOUT"

    timeout_ms: int = DEFAULT_TIMEOUT
    disabled_methods: list[str] = dataclasses.field(default_factory=list)

    def _validate(self) -> None:
        unknown = [name for name in self.disabled_methods if name not in METHODS]
        if unknown:
            raise InvalidSettingValueError(
                "disabled_methods",
                unknown,
                f"not a governed operation (expected one of {', '.join(METHODS)})",
            )

    def to_options(self) -> dict[str, Any]:
        """Return keyword options for :class:`QueryTimeout`."""
        return {
            "timeout": self.timeout_ms,
            "methods": {name: False for name in self.disabled_methods},
        }


__all__ = ["QueryTimeoutSettings"]
