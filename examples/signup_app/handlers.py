"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: handlers.py
@DateTime: 2026-10-18
@Docs: Rule sets and custom filters for the signup example.
注册示例的规则集与自定义过滤器。
"""

import re
from typing import Any

from fastapi_form_validate import RuleSet, Validator, filter, is_equal, is_in, is_like, is_long_between, is_required


def only_digits(value: Any) -> Any:
    """Keep digits only / 仅保留数字。"""
    if not isinstance(value, str):
        return value
    return re.sub(r"\D", "", value)


validator = Validator(filters={"only_digits": only_digits})

SIGNUP_RULES = RuleSet.from_mapping(
    {
        "fields": ["name", "email", "phone", "pass", "pass2", "plan"],
        "filters": [
            re.compile(r".+"), filter("trim", "strip"),
            "email", filter("lc"),
            "name", filter("ucfirst"),
            "phone", "only_digits",
        ],
        "checks": [
            ["name", "email", "pass", "pass2"], is_required(),
            "email", is_like(re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$"), "Invalid email / 邮箱格式无效"),
            "phone", is_long_between(7, 15),
            "pass", is_long_between(6, 40),
            "pass2", is_equal("pass", "Passwords don't match / 两次密码不一致"),
            "plan", is_in(["free", "pro"]),
        ],
    },
    registry=validator.registry,
)

CONTACT_RULES = RuleSet.from_mapping(
    {
        "fields": ["name", "email"],
        "filters": [["name", "email"], filter("trim"), "email", filter("lc")],
        "checks": [["name", "email"], is_required(), "email", is_like(re.compile(r"@"), "Invalid email / 邮箱格式无效")],
    }
)
