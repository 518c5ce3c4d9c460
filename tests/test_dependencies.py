"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_dependencies.py
@DateTime: 2026-10-18
@Docs: Tests for dependencies.py module (FastAPI integration).
dependencies.py 模块测试（FastAPI 集成）。
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient

from fastapi_form_validate.checks import is_equal, is_in, is_required
from fastapi_form_validate.dependencies import FormRules, _flatten, install_exception_handler
from fastapi_form_validate.filters import filter
from fastapi_form_validate.result import ValidationResult, Validator
from fastapi_form_validate.schemas import ValidationResponse

_SIGNUP = {
    "fields": ["email", "pass", "pass2"],
    "filters": [["email", "pass", "pass2"], filter("trim"), "email", filter("lc")],
    "checks": [["email", "pass", "pass2"], is_required(), "pass2", is_equal("pass", "Passwords don't match")],
}


def _only_digits(value: Any) -> Any:
    return value if value is None else "".join(c for c in str(value) if c.isdigit())


def _create_app() -> FastAPI:
    app = FastAPI(title="Form validate test app")
    install_exception_handler(app)

    @app.post("/signup")
    async def signup(result: ValidationResult = Depends(FormRules(_SIGNUP))) -> dict[str, Any]:
        return result.data()

    @app.get("/search")
    async def search(
        result: ValidationResult = Depends(
            FormRules(
                {"fields": ["tag", "sort"], "checks": ["sort", is_in(["asc", "desc"])]},
                source="query",
            )
        ),
    ) -> dict[str, Any]:
        return result.data()

    @app.post("/api/signup")
    async def api_signup(result: ValidationResult = Depends(FormRules(_SIGNUP, source="json"))) -> dict[str, Any]:
        return result.data()

    @app.post("/preview")
    async def preview(
        result: ValidationResult = Depends(FormRules(_SIGNUP, source="json", raise_on_error=False)),
    ) -> dict[str, Any]:
        return ValidationResponse.from_result(result).model_dump(mode="json")

    @app.post("/phone")
    async def phone(
        result: ValidationResult = Depends(
            FormRules(
                {"fields": ["tel"], "filters": ["tel", "only_digits"]},
                validator=Validator(filters={"only_digits": _only_digits}),
            )
        ),
    ) -> dict[str, Any]:
        return result.data()

    return app


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient for the test app.
    提供测试应用的 httpx AsyncClient。
    """
    transport = ASGITransport(app=_create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def test_flatten_repeated_keys() -> None:
    assert _flatten([("a", "1"), ("b", "2"), ("a", "3"), ("a", "4")]) == {"a": ["1", "3", "4"], "b": "2"}


@pytest.mark.asyncio
class TestFormRules:
    """FormRules dependency tests.
    FormRules 依赖测试。
    """

    async def test_form_success(self, client: AsyncClient) -> None:
        """Valid form -> 200 with sanitized data / 合法表单 -> 200 并返回清洗后的数据。"""
        resp = await client.post("/signup", data={"email": " Ann@X.COM ", "pass": "secret", "pass2": "secret "})
        assert resp.status_code == 200
        assert resp.json() == {"email": "ann@x.com", "pass": "secret", "pass2": "secret"}

    async def test_form_failure_422(self, client: AsyncClient) -> None:
        resp = await client.post("/signup", data={"email": "a@b.c", "pass": "one", "pass2": "two"})
        assert resp.status_code == 422
        body = resp.json()
        assert body["error_code"] == "validation_failed"
        assert body["details"] == {"pass2": "Passwords don't match"}

    async def test_form_missing_fields(self, client: AsyncClient) -> None:
        resp = await client.post("/signup", data={"email": "a@b.c"})
        assert resp.status_code == 422
        assert resp.json()["details"] == {"pass": "Required", "pass2": "Required"}

    async def test_query_source(self, client: AsyncClient) -> None:
        resp = await client.get("/search", params=[("tag", "a"), ("tag", "b"), ("sort", "asc"), ("page", "2")])
        assert resp.status_code == 200
        assert resp.json() == {"tag": ["a", "b"], "sort": "asc"}

    async def test_query_source_failure(self, client: AsyncClient) -> None:
        resp = await client.get("/search", params={"sort": "sideways"})
        assert resp.status_code == 422
        assert resp.json()["details"] == {"sort": "Invalid value"}

    async def test_json_source(self, client: AsyncClient) -> None:
        resp = await client.post("/api/signup", json={"email": "X@Y.Z", "pass": "p", "pass2": "p"})
        assert resp.status_code == 200
        assert resp.json()["email"] == "x@y.z"

    async def test_json_invalid_body(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/signup", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert resp.status_code == 422
        assert resp.json()["error_code"] == "invalid_payload"

    async def test_json_body_not_utf8(self, client: AsyncClient) -> None:
        """Undecodable bytes -> 422 invalid_payload, not 500 / 无法解码的字节 -> 422 invalid_payload。"""
        resp = await client.post(
            "/api/signup", content=b'{"a": "\xff"}', headers={"Content-Type": "application/json"}
        )
        assert resp.status_code == 422
        assert resp.json()["error_code"] == "invalid_payload"

    async def test_json_non_object(self, client: AsyncClient) -> None:
        resp = await client.post("/api/signup", json=["email"])
        assert resp.status_code == 422
        assert resp.json()["error_code"] == "invalid_payload"

    async def test_no_raise_returns_result(self, client: AsyncClient) -> None:
        """raise_on_error=False hands the failed result to the endpoint / 不抛出时将失败结果交给端点。"""
        resp = await client.post("/preview", json={"email": "a@b.c"})
        assert resp.status_code == 200
        assert resp.json() == {
            "success": False,
            "data": {"email": "a@b.c"},
            "errors": [{"field": "pass", "message": "Required"}, {"field": "pass2", "message": "Required"}],
        }

    async def test_custom_validator(self, client: AsyncClient) -> None:
        resp = await client.post("/phone", data={"tel": "+1 (555) 010"})
        assert resp.status_code == 200
        assert resp.json() == {"tel": "1555010"}
