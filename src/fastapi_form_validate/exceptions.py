"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-10-18
@Docs: Form validation error hierarchy.
表单校验异常体系。

Two disjoint classes of failure exist:
存在两类互不相交的失败：
- Configuration errors (malformed rules): raised, never recovered.
    配置错误（规则不合法）：直接抛出，不做恢复。
- Validation outcomes (bad user input): returned as data, never raised by the engine.
    校验结果（用户输入不合法）：作为数据返回，引擎不抛出。
"""

from typing import Any


class FormValidateError(Exception):
    """
    Form validate errors.
    表单校验异常。

    Attributes:
        message: Error message.
        message: 错误消息。
        status_code: HTTP status code.
        status_code: HTTP 状态码。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
        error_code: str = "form_validate_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.error_code = error_code


class RuleConfigError(FormValidateError):
    """
    Rule configuration error (programmer bug, not bad input).
    规则配置错误（属于编程错误，而非输入错误）。
    """

    def __init__(
        self,
        *,
        message: str,
        status_code: int = 500,
        details: Any | None = None,
        error_code: str = "rule_config_error",
    ) -> None:
        super().__init__(message=message, status_code=status_code, details=details, error_code=error_code)


class FilterNotFoundError(RuleConfigError):
    """
    Named filter lookup failure.
    命名过滤器查找失败。
    """

    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"Invalid filter: {name} / 无效的过滤器：{name}",
            details={"name": name},
            error_code="filter_not_found",
        )
        self.name = name


class UndefinedFieldError(FormValidateError):
    """
    Field-scoped accessor used with a field outside the declared fields.
    字段访问器使用了未声明的字段。
    """

    def __init__(self, accessor: str, field: str) -> None:
        super().__init__(
            message=f"Undefined field {accessor}({field}) / 未定义字段 {accessor}({field})",
            details={"accessor": accessor, "field": field},
            error_code="undefined_field",
        )
        self.field = field


class FormValidationError(FormValidateError):
    """
    Submitted input failed validation (raised by the FastAPI dependency only).
    提交的输入未通过校验（仅由 FastAPI 依赖抛出）。
    """

    def __init__(
        self,
        *,
        message: str = "Validation failed / 校验失败",
        status_code: int = 422,
        details: Any | None = None,
        error_code: str = "validation_failed",
    ) -> None:
        super().__init__(message=message, status_code=status_code, details=details, error_code=error_code)
