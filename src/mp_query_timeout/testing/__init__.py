"""Testing – fakes for exercising hook hosts without a database."""

from mp_query_timeout.testing.fakes import FakeQuery, RecordingHookRegistry

__all__ = ["FakeQuery", "RecordingHookRegistry"]
