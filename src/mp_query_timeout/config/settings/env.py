"""Config settings – environment-backed settings dataclasses.

A settings class is a dataclass deriving from :class:`Settings` with a
``_prefix``; each field ``name`` is read from ``<PREFIX>_<NAME>``::

    @dataclasses.dataclass
    class QueryTimeoutSettings(Settings):
        _prefix: ClassVar[str] = "QUERY_TIMEOUT"
        timeout_ms: int = 15000

    settings = QueryTimeoutSettings.from_env()   # reads QUERY_TIMEOUT_TIMEOUT_MS
"""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any, ClassVar, TypeVar

from mp_query_timeout.config.validation import ConfigError, InvalidSettingValueError
from mp_query_timeout.observability.logging import get_logger

_log = get_logger(__name__)

T = TypeVar("T", bound="Settings")

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclasses.dataclass
class Settings:
    """Base class for env-backed settings; override :meth:`_validate`."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Cross-field checks; raise :class:`InvalidSettingValueError`."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def from_env(cls: type[T]) -> T:
        return EnvSettingsLoader().load(cls)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Absent variables keep the field default. ``bool``, ``int``, ``float``
    and ``list[str]`` (comma separated) fields are coerced; anything else
    is passed through as a string.
    """

    def load(self, settings_class: type[T]) -> T:
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            key = settings_class.env_key(field.name)
            raw = os.environ.get(key)
            if raw is None:
                continue
            try:
                kwargs[field.name] = self._coerce(raw, hints.get(field.name, str))
            except ValueError as exc:
                error = InvalidSettingValueError(key, raw, str(exc))
                _log.warning("config.setting_invalid", **error.context())
                raise error from exc

        try:
            return settings_class(**kwargs)
        except InvalidSettingValueError as exc:
            _log.warning("config.setting_invalid", **exc.context())
            raise
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}") from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:
        if type_hint is bool:
            return value.lower() in _TRUTHY
        if type_hint is int:
            return int(value)
        if type_hint is float:
            return float(value)
        if typing.get_origin(type_hint) is list:
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
