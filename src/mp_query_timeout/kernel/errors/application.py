"""Application-layer errors — cross-cutting concerns at integration level."""

from __future__ import annotations

from typing import Any

from mp_query_timeout.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class HookChainError(ApplicationError):
    """A hook broke the host's continuation protocol."""

    default_code = "hook_chain_error"

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"After-hook chain for '{operation}' {reason}")
        self.operation = operation
        self.reason = reason

    def context(self) -> dict[str, Any]:
        return {"operation": self.operation, "reason": self.reason}


__all__ = ["ApplicationError", "HookChainError"]
