"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: app.py
@DateTime: 2026-10-18
@Docs: FastAPI app with validated signup and contact import endpoints.
带注册校验与联系人批量导入端点的 FastAPI 示例应用。
"""

from typing import Any

from fastapi import Body, Depends, FastAPI

from fastapi_form_validate import ValidationResponse, ValidationResult, validate_rows
from fastapi_form_validate.dependencies import FormRules, install_exception_handler

from examples.signup_app.handlers import CONTACT_RULES, SIGNUP_RULES, validator


def create_app() -> FastAPI:
    """Create the signup example app.
    创建注册示例应用。

    Returns:
        FastAPI app instance / FastAPI 应用实例。
    """
    app = FastAPI(title="Signup Example")
    install_exception_handler(app)

    @app.post("/signup")
    async def signup(result: ValidationResult = Depends(FormRules(SIGNUP_RULES, validator=validator))) -> dict[str, Any]:
        """Create an account from a form post / 通过表单提交创建账号。"""
        data = result.data()
        data.pop("pass2", None)
        return {"created": True, "user": {k: v for k, v in data.items() if k != "pass"}}

    @app.post("/signup/check")
    async def check(
        result: ValidationResult = Depends(
            FormRules(SIGNUP_RULES, source="json", validator=validator, raise_on_error=False)
        ),
    ) -> dict[str, Any]:
        """Report every field error without creating anything / 仅报告字段错误。"""
        return ValidationResponse.from_result(result).model_dump(mode="json")

    @app.post("/contacts/import")
    async def import_contacts(rows: list[dict[str, Any]] = Body(...)) -> dict[str, Any]:
        """Validate a batch of contacts / 批量校验联系人。"""
        result = validate_rows(rows, CONTACT_RULES)
        return {
            "total_rows": result.total_rows,
            "valid_rows": len(result.valid_rows),
            "error_rows": result.error_rows,
            "errors": result.errors,
        }

    return app
