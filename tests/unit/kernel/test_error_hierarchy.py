"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import pytest

from mp_query_timeout.config.validation import ConfigError, InvalidSettingValueError
from mp_query_timeout.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    HookChainError,
    ValidationError,
    Violation,
)


class TestBaseError:
    def test_message_and_default_code(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert err.code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        assert BaseError("m", code="my_code").to_dict() == {"code": "my_code", "message": "m"}

    def test_str_is_message(self) -> None:
        assert str(BaseError("something went wrong")) == "something went wrong"

    def test_subclass_context_merged_into_payload(self) -> None:
        class QuotaError(BaseError):
            def context(self) -> dict[str, int]:
                return {"limit": 3}

        assert QuotaError("over quota").to_dict() == {
            "code": "base_error",
            "message": "over quota",
            "limit": 3,
        }

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestValidationError:
    def test_is_domain_error(self) -> None:
        assert isinstance(ValidationError("bad"), DomainError)

    def test_default_code(self) -> None:
        assert ValidationError("bad").code == "validation_error"

    def test_details_default_empty(self) -> None:
        assert ValidationError("bad").details == []

    def test_details_and_fields(self) -> None:
        err = ValidationError(
            "bad",
            details=[Violation("errorHandler", "x"), Violation("timeout", "y")],
        )
        assert err.fields == ["errorHandler", "timeout"]

    def test_to_dict_includes_details(self) -> None:
        err = ValidationError("bad", details=[Violation("timeout", "Invalid number provided")])
        assert err.to_dict()["details"] == [
            {"field": "timeout", "message": "Invalid number provided"}
        ]

    def test_custom_code(self) -> None:
        assert ValidationError("bad", code="options_invalid").code == "options_invalid"

    def test_violation_is_frozen(self) -> None:
        v = Violation("timeout", "x")
        with pytest.raises((AttributeError, TypeError)):
            v.field = "other"  # type: ignore[misc]


class TestApplicationErrors:
    def test_config_error_is_application_error(self) -> None:
        assert isinstance(ConfigError("x"), ApplicationError)

    def test_invalid_setting_value(self) -> None:
        err = InvalidSettingValueError("timeout_ms", "abc", "not an int")
        assert err.code == "invalid_setting_value"
        assert "timeout_ms" in err.message
        assert err.reason == "not an int"
        assert err.to_dict() == {
            "code": "invalid_setting_value",
            "message": err.message,
            "setting": "timeout_ms",
            "value": "'abc'",
            "reason": "not an int",
        }

    def test_hook_chain_error(self) -> None:
        err = HookChainError("find", "called proceed() more than once")
        assert isinstance(err, ApplicationError)
        assert err.operation == "find"
        assert err.message == "After-hook chain for 'find' called proceed() more than once"
        assert err.code == "hook_chain_error"
        assert err.to_dict()["operation"] == "find"
        assert err.to_dict()["reason"] == "called proceed() more than once"
