"""Testing fakes – in-memory doubles for the hook host port."""
from mp_query_timeout.testing.fakes.hooks import FakeQuery, RecordingHookRegistry

__all__ = ["FakeQuery", "RecordingHookRegistry"]
