"""Config validation – query-timeout option checks.

All rules run on every call; violations are collected and raised together as
one :class:`~mp_query_timeout.kernel.errors.ValidationError` so callers can
report every problem at once.
"""
from __future__ import annotations

import inspect
import re
from collections.abc import Mapping
from typing import Any

from mp_query_timeout.kernel.errors import ValidationError, Violation

INVALID_NUMBER = "Invalid number provided"
NOT_A_FUNCTION = "Parameter provided is not a function"
NOT_A_MAPPING = "Parameter provided is not a mapping"

# Leading whitespace, optional sign, then the longest run of ASCII digits.
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def parse_timeout(value: Any) -> int | None:
    """Parse *value* as a base-10 integer and require an exact round trip.

    Returns ``None`` when no integer prefix exists or when the canonical
    rendering of the parsed integer differs from ``str(value)``::

        parse_timeout(5000)     # 5000
        parse_timeout("5000")   # 5000
        parse_timeout("12.5")   # None
        parse_timeout("007")    # None
        parse_timeout(True)     # None
    """
    try:
        text = str(value)
        match = _INT_PREFIX.match(text)
        if match is None:
            return None
        number = int(match.group(1))
        rendered = str(number)
    except ValueError:
        # Past the interpreter's integer string-conversion limit
        return None
    if rendered != text:
        return None
    return number


def _accepts_one_argument(candidate: Any) -> bool:
    if not callable(candidate):
        return False
    try:
        signature = inspect.signature(candidate)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures
        return True
    try:
        signature.bind(None)
    except TypeError:
        return False
    return True


def validate_options(
    timeout: Any,
    error_handler: Any,
    methods: Any = None,
) -> None:
    """Raise :class:`ValidationError` listing every invalid option.

    Violations are ordered: ``errorHandler``, ``timeout``, ``methods``.
    """
    details: list[Violation] = []

    if not _accepts_one_argument(error_handler):
        details.append(Violation(field="errorHandler", message=NOT_A_FUNCTION))

    parsed = parse_timeout(timeout)
    if parsed is None or parsed <= 0:
        details.append(Violation(field="timeout", message=INVALID_NUMBER))

    if methods is not None and not isinstance(methods, Mapping):
        details.append(Violation(field="methods", message=NOT_A_MAPPING))

    if details:
        raise ValidationError("Invalid parameters provided", details=details)


__all__ = [
    "INVALID_NUMBER",
    "NOT_A_FUNCTION",
    "NOT_A_MAPPING",
    "parse_timeout",
    "validate_options",
]
