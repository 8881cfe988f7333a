"""Config validation errors."""
from typing import Any

from mp_query_timeout.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason

    def context(self) -> dict[str, Any]:
        return {"setting": self.setting_name, "value": repr(self.value), "reason": self.reason}


__all__ = ["ConfigError", "InvalidSettingValueError"]
