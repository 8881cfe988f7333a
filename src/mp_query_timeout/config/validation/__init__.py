"""Config validation – option rules and errors."""
from mp_query_timeout.config.validation.errors import ConfigError, InvalidSettingValueError
from mp_query_timeout.config.validation.validator import (
    INVALID_NUMBER,
    NOT_A_FUNCTION,
    NOT_A_MAPPING,
    parse_timeout,
    validate_options,
)

__all__ = [
    "INVALID_NUMBER",
    "NOT_A_FUNCTION",
    "NOT_A_MAPPING",
    "ConfigError",
    "InvalidSettingValueError",
    "parse_timeout",
    "validate_options",
]
