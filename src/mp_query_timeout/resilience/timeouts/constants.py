"""Resilience – query-timeout constants."""
from __future__ import annotations

from typing import Final

#: Default per-operation budget, in milliseconds.
DEFAULT_TIMEOUT: Final[int] = 15000

#: Governed operation names, in registration order.
METHODS: Final[tuple[str, ...]] = (
    "count",
    "find",
    "findOne",
    "findOneAndRemove",
    "findOneAndUpdate",
    "update",
)

#: Server status code for an exceeded ``maxTimeMS`` budget.
TIMEOUT_ERROR_CODE: Final[int] = 50
TIMEOUT_ERROR_CODE_NAME: Final[str] = "ExceededTimeLimit"


__all__ = ["DEFAULT_TIMEOUT", "METHODS", "TIMEOUT_ERROR_CODE", "TIMEOUT_ERROR_CODE_NAME"]
