"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: schemas.py
@DateTime: 2026-10-18
@Docs: Response models for validation results.
校验结果的响应模型。
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from fastapi_form_validate.result import ValidationResult


class FieldErrorItem(BaseModel):
    """
    One field error.
    单个字段错误。

    Attributes:
        field: Field name.
        field: 字段名。
        message: Message returned by the failing check (any JSON-able value).
        message: 失败校验返回的消息（任意可 JSON 化的值）。
    """

    field: str
    message: Any


class ValidationResponse(BaseModel):
    """
    Validation response body.
    校验响应体。

    Attributes:
        success: Whether every check passed.
        success: 是否全部校验通过。
        data: Sanitized data.
        data: 清洗后的数据。
        errors: Field errors in field order.
        errors: 按字段顺序排列的错误。
    """

    success: bool
    data: dict[str, Any] = Field(default_factory=dict)
    errors: list[FieldErrorItem] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ValidationResult | Mapping[str, Any]) -> "ValidationResponse":
        """
        Build a response from a ValidationResult or a validate() outcome.
        由 ValidationResult 或 validate() 结果构建响应。
        """
        outcome = result.to_hash() if isinstance(result, ValidationResult) else result
        return cls(
            success=bool(outcome["success"]),
            data=dict(outcome["data"]),
            errors=[FieldErrorItem(field=name, message=msg) for name, msg in outcome["error"].items()],
        )
