"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: dependencies.py
@DateTime: 2026-10-18
@Docs: FastAPI integration: validated request payload dependency.
FastAPI 集成：请求数据校验依赖。

Examples:
    >>> from fastapi import Depends, FastAPI
    >>> from fastapi_form_validate import filter, is_equal, is_required
    >>> from fastapi_form_validate.dependencies import FormRules, install_exception_handler
    >>> signup = FormRules({
    ...     "fields": ["email", "pass", "pass2"],
    ...     "filters": [["email", "pass", "pass2"], filter("trim"), "email", filter("lc")],
    ...     "checks": [["email", "pass", "pass2"], is_required(), "pass2", is_equal("pass")],
    ... })
    >>> app = FastAPI()
    >>> install_exception_handler(app)
    >>> @app.post("/signup")
    ... async def create(result=Depends(signup)) -> dict:
    ...     return result.data()
"""

from collections.abc import Mapping
from typing import Any, Literal

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fastapi_form_validate.exceptions import FormValidateError, FormValidationError
from fastapi_form_validate.result import ValidationResult, Validator
from fastapi_form_validate.rules import RuleSet

type PayloadSource = Literal["form", "query", "json"]


def _flatten(items: list[tuple[str, Any]]) -> dict[str, Any]:
    """Collapse multi-items; repeated keys become lists.
    合并多值项；重复的键变为列表。
    """
    payload: dict[str, Any] = {}
    for key, value in items:
        if key not in payload:
            payload[key] = value
        elif isinstance(payload[key], list):
            payload[key].append(value)
        else:
            payload[key] = [payload[key], value]
    return payload


class FormRules:
    """
    FastAPI dependency that validates the request payload.
    校验请求数据的 FastAPI 依赖。
    """

    def __init__(
        self,
        rules: Mapping[str, Any] | RuleSet,
        *,
        source: PayloadSource = "form",
        validator: Validator | None = None,
        raise_on_error: bool = True,
    ) -> None:
        """
        Initialize the dependency.
        初始化依赖。

        Args:
            rules: Raw rule mapping or RuleSet.
                原始规则映射或 RuleSet。
            source: Where to read the payload: form, query or json.
                数据来源：form、query 或 json。
            validator: Validator to use (fresh default Validator when omitted).
                使用的校验器（缺省时新建默认校验器）。
            raise_on_error: Raise FormValidationError (422) when validation fails.
                校验失败时抛出 FormValidationError（422）。
        """
        self.rules = rules
        self.source = source
        self.validator = validator or Validator()
        self.raise_on_error = raise_on_error

    async def __call__(self, request: Request) -> ValidationResult:
        payload = await self._read_payload(request)
        result = self.validator.check(payload, self.rules)
        if self.raise_on_error and not result.success():
            raise FormValidationError(details=result.error())
        return result

    async def _read_payload(self, request: Request) -> Mapping[str, Any]:
        if self.source == "query":
            return _flatten(request.query_params.multi_items())
        if self.source == "json":
            try:
                body = await request.json()
            except ValueError as exc:
                raise FormValidationError(
                    message="Request body is not valid JSON / 请求体不是合法的 JSON",
                    details={"error": str(exc)},
                    error_code="invalid_payload",
                ) from exc
            if not isinstance(body, dict):
                raise FormValidationError(
                    message="JSON body must be an object / JSON 请求体必须是对象",
                    error_code="invalid_payload",
                )
            return body
        form = await request.form()
        return _flatten(form.multi_items())


def install_exception_handler(app: FastAPI) -> None:
    """
    Render FormValidateError as JSON ``{message, error_code, details}``.
    将 FormValidateError 渲染为 JSON ``{message, error_code, details}``。
    """

    @app.exception_handler(FormValidateError)
    async def _form_validate_error_handler(request: Request, exc: FormValidateError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message, "error_code": exc.error_code, "details": exc.details},
        )
