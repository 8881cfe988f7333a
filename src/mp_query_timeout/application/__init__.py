"""Application – hook hosts."""

from mp_query_timeout.application.hooks import HookSchema

__all__ = ["HookSchema"]
