"""Resilience – classify operation errors as timeouts.

Classification is a pure predicate over the error's status code. Errors are
never wrapped or copied: driver exceptions such as
``pymongo.errors.ExecutionTimeout`` expose ``code``; plain mappings
(``{"code": 50}``) are accepted too.
"""
from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any

from mp_query_timeout.resilience.timeouts.constants import TIMEOUT_ERROR_CODE


class ErrorClass(str, enum.Enum):
    TIMEOUT = "timeout"
    OTHER = "other"


def error_code(error: Any) -> int | None:
    """Return the integer status code carried by *error*, if any."""
    if error is None:
        return None
    if isinstance(error, Mapping):
        code = error.get("code")
    else:
        code = getattr(error, "code", None)
    if isinstance(code, bool) or not isinstance(code, int):
        return None
    return code


def is_timeout_error(error: Any) -> bool:
    return error_code(error) == TIMEOUT_ERROR_CODE


def classify(error: Any) -> ErrorClass:
    return ErrorClass.TIMEOUT if is_timeout_error(error) else ErrorClass.OTHER


__all__ = ["ErrorClass", "classify", "error_code", "is_timeout_error"]
