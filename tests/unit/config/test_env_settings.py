"""Unit tests for env-based settings and QueryTimeoutSettings."""

from __future__ import annotations

import dataclasses
from typing import ClassVar

import pytest
from structlog.testing import capture_logs

from mp_query_timeout import QueryTimeout
from mp_query_timeout.config.settings import EnvSettingsLoader, Settings
from mp_query_timeout.config.validation import ConfigError, InvalidSettingValueError
from mp_query_timeout.resilience.timeouts import QueryTimeoutSettings
from mp_query_timeout.testing.fakes import FakeQuery, RecordingHookRegistry


@dataclasses.dataclass
class PoolSettings(Settings):
    _prefix: ClassVar[str] = "POOL"

    host: str = "localhost"
    size: int = 4
    ratio: float = 0.5
    debug: bool = False
    tags: list[str] = dataclasses.field(default_factory=list)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "POOL_HOST",
        "POOL_SIZE",
        "POOL_RATIO",
        "POOL_DEBUG",
        "POOL_TAGS",
        "QUERY_TIMEOUT_TIMEOUT_MS",
        "QUERY_TIMEOUT_DISABLED_METHODS",
    ):
        monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_preserved_when_env_absent(self) -> None:
        settings = EnvSettingsLoader().load(PoolSettings)
        assert settings == PoolSettings()

    def test_coerces_types(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("POOL_HOST", "db.internal")
        monkeypatch.setenv("POOL_SIZE", "16")
        monkeypatch.setenv("POOL_RATIO", "0.75")
        monkeypatch.setenv("POOL_DEBUG", "yes")
        monkeypatch.setenv("POOL_TAGS", "a, b,,c")
        settings = EnvSettingsLoader().load(PoolSettings)
        assert settings.host == "db.internal"
        assert settings.size == 16
        assert settings.ratio == 0.75
        assert settings.debug is True
        assert settings.tags == ["a", "b", "c"]

    @pytest.mark.parametrize("falsy", ["false", "0", "no", "off"])
    def test_bool_false(self, monkeypatch: pytest.MonkeyPatch, falsy: str) -> None:
        monkeypatch.setenv("POOL_DEBUG", falsy)
        assert EnvSettingsLoader().load(PoolSettings).debug is False

    def test_bad_int_raises_invalid_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("POOL_SIZE", "many")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(PoolSettings)
        assert exc_info.value.setting_name == "POOL_SIZE"
        assert exc_info.value.value == "many"

    def test_invalid_setting_logged_with_context(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("POOL_RATIO", "half")
        with capture_logs() as logs, pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(PoolSettings)
        events = [e for e in logs if e["event"] == "config.setting_invalid"]
        assert len(events) == 1
        assert events[0]["setting"] == "POOL_RATIO"
        assert events[0]["value"] == "'half'"
        assert events[0]["log_level"] == "warning"

    def test_construction_failure_wrapped_in_config_error(self) -> None:
        @dataclasses.dataclass
        class Broken(Settings):
            def _validate(self) -> None:
                raise ValueError("nope")

        with pytest.raises(ConfigError, match="nope"):
            EnvSettingsLoader().load(Broken)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestSettings:
    def test_env_key_uses_prefix(self) -> None:
        assert PoolSettings.env_key("size") == "POOL_SIZE"

    def test_env_key_without_prefix(self) -> None:
        @dataclasses.dataclass
        class Bare(Settings):
            region: str = "eu"

        assert Bare.env_key("region") == "REGION"

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("POOL_SIZE", "8")
        assert PoolSettings.from_env() == PoolSettings(size=8)

    def test_validate_runs_on_direct_construction(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            QueryTimeoutSettings(disabled_methods=["aggregate"])


# ---------------------------------------------------------------------------
# QueryTimeoutSettings
# ---------------------------------------------------------------------------


class TestQueryTimeoutSettings:
    def test_defaults(self) -> None:
        settings = EnvSettingsLoader().load(QueryTimeoutSettings)
        assert settings.timeout_ms == 15000
        assert settings.disabled_methods == []

    def test_loaded_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUERY_TIMEOUT_TIMEOUT_MS", "2500")
        monkeypatch.setenv("QUERY_TIMEOUT_DISABLED_METHODS", "find,update")
        settings = QueryTimeoutSettings.from_env()
        assert settings.timeout_ms == 2500
        assert settings.disabled_methods == ["find", "update"]

    def test_unknown_disabled_method_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUERY_TIMEOUT_DISABLED_METHODS", "find,aggregate")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(QueryTimeoutSettings)
        assert exc_info.value.setting_name == "disabled_methods"
        assert exc_info.value.value == ["aggregate"]

    def test_to_options(self) -> None:
        settings = QueryTimeoutSettings(timeout_ms=900, disabled_methods=["count"])
        assert settings.to_options() == {"timeout": 900, "methods": {"count": False}}

    def test_options_feed_plugin(self) -> None:
        settings = QueryTimeoutSettings(timeout_ms=900, disabled_methods=["count"])
        registry = RecordingHookRegistry()
        QueryTimeout(settings.to_options())(registry)
        assert "count" not in registry.operations("before")
        query = FakeQuery()
        registry.before("find")(query)
        assert query.budgets == [900]
