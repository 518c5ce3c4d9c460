"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_exceptions.py
@DateTime: 2026-10-18
@Docs: Tests for exceptions.py module.
exceptions.py 模块测试。
"""

from fastapi_form_validate.exceptions import (
    FilterNotFoundError,
    FormValidateError,
    FormValidationError,
    RuleConfigError,
    UndefinedFieldError,
)


class TestFormValidateError:
    """Tests for FormValidateError.
    FormValidateError 测试。
    """

    def test_attributes(self) -> None:
        """All attributes assigned correctly / 所有属性正确赋值。"""
        exc = FormValidateError(message="test error", status_code=418, details={"key": "val"}, error_code="custom")
        assert exc.message == "test error"
        assert exc.status_code == 418
        assert exc.details == {"key": "val"}
        assert exc.error_code == "custom"

    def test_defaults(self) -> None:
        exc = FormValidateError(message="msg")
        assert exc.status_code == 400
        assert exc.error_code == "form_validate_error"
        assert exc.details is None

    def test_str_returns_message(self) -> None:
        assert str(FormValidateError(message="hello world")) == "hello world"


class TestSubclasses:
    """Tests for exception subclasses.
    异常子类测试。
    """

    def test_rule_config_error_defaults(self) -> None:
        exc = RuleConfigError(message="bad rules")
        assert isinstance(exc, FormValidateError)
        assert exc.status_code == 500
        assert exc.error_code == "rule_config_error"

    def test_filter_not_found_is_config_error(self) -> None:
        exc = FilterNotFoundError("rot13")
        assert isinstance(exc, RuleConfigError)
        assert exc.error_code == "filter_not_found"
        assert exc.details == {"name": "rot13"}
        assert "rot13" in exc.message

    def test_undefined_field(self) -> None:
        exc = UndefinedFieldError("data", "zip")
        assert not isinstance(exc, RuleConfigError)
        assert exc.field == "zip"
        assert exc.message.startswith("Undefined field data(zip)")

    def test_form_validation_error_defaults(self) -> None:
        exc = FormValidationError(details={"a": "Required"})
        assert exc.status_code == 422
        assert exc.error_code == "validation_failed"
        assert exc.details == {"a": "Required"}

    def test_config_error_catchable_as_base(self) -> None:
        try:
            raise RuleConfigError(message="odd pairs")
        except FormValidateError as exc:
            assert exc.message == "odd pairs"
