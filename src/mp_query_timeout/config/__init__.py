"""Config – option validation and env-based settings."""

from mp_query_timeout.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from mp_query_timeout.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    parse_timeout,
    validate_options,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
    "parse_timeout",
    "validate_options",
]
