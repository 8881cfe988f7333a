"""Application hooks – in-memory host for before/after hook chains."""
from mp_query_timeout.application.hooks.schema import HookSchema

__all__ = ["HookSchema"]
