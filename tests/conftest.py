"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-10-18
@Docs: Shared test fixtures for the fastapi-form-validate test suite.
测试套件的公共 fixtures。
"""

import re
from collections.abc import Callable
from typing import Any

import pytest

from fastapi_form_validate import filter, is_equal, is_like, is_required


class Recorder:
    """Callable that records every call and returns a fixed value.
    记录每次调用并返回固定值的可调用对象。
    """

    def __init__(self, result: Any = None, *, transform: Callable[[Any], Any] | None = None) -> None:
        self.result = result
        self.transform = transform
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.transform is not None:
            return self.transform(args[0])
        return self.result


@pytest.fixture
def recorder() -> type[Recorder]:
    """The Recorder class / Recorder 类。"""
    return Recorder


@pytest.fixture
def signup_rules() -> dict[str, Any]:
    """A typical signup form rule set.
    典型的注册表单规则集。
    """
    return {
        "fields": ["name", "email", "pass", "pass2", "gender"],
        "filters": [
            re.compile(r".+"), filter("trim", "strip"),
            "email", filter("lc"),
        ],
        "checks": [
            ["name", "email", "pass", "pass2"], is_required(),
            "pass2", is_equal("pass", "Passwords don't match"),
            "email", is_like(re.compile(r"^[^@\s]+@[^@\s]+$"), "Invalid email"),
            "gender", lambda value, data, field: None if value in (None, "M", "F") else "Invalid gender",
        ],
    }


@pytest.fixture
def signup_input() -> dict[str, Any]:
    """Valid (but untidy) signup input / 合法但未清洗的注册输入。"""
    return {
        "name": "  Ann   Lee ",
        "email": " ANN@Example.COM ",
        "pass": "secret",
        "pass2": "secret",
        "gender": "F",
        "extra": "ignored",
    }
