"""Domain errors — rule violations in caller-supplied input."""

from __future__ import annotations

import dataclasses
from typing import Any, Sequence

from mp_query_timeout.kernel.errors.base import BaseError


@dataclasses.dataclass(frozen=True)
class Violation:
    """A single field-level validation failure."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class DomainError(BaseError):
    """Raised when a rule on caller input is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``details`` holds every field-level :class:`Violation`, in the order
    the rules were checked.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        details: Sequence[Violation] | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message, code=code)
        self.details: list[Violation] = list(details or [])

    @property
    def fields(self) -> list[str]:
        return [v.field for v in self.details]

    def context(self) -> dict[str, Any]:
        return {"details": [v.to_dict() for v in self.details]}


__all__ = ["DomainError", "ValidationError", "Violation"]
