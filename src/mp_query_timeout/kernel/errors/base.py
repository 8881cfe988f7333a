"""Root error class for the mp-query-timeout error hierarchy."""

from __future__ import annotations

from typing import Any, ClassVar


class BaseError(Exception):
    """Root of the error hierarchy.

    ``code`` is a stable slug that log processors and error observers can
    branch on. Subclasses publish their structured fields through
    :meth:`context`, which :meth:`to_dict` merges into the payload.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
    """

    default_code: ClassVar[str] = "base_error"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def context(self) -> dict[str, Any]:
        return {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict, suitable as structlog event fields."""
        return {"code": self.code, "message": self.message, **self.context()}


__all__ = ["BaseError"]
