"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: checks.py
@DateTime: 2026-10-18
@Docs: Built-in check builders.
内置校验构造器。

Every builder returns a check routine ``(value, data, field) -> message | None``.
每个构造器返回校验函数 ``(value, data, field) -> message | None``。

Apart from is_required / is_required_if / is_existing, checks skip empty
values (None or ""), so presence is declared separately:
除 is_required / is_required_if / is_existing 外，校验会跳过空值（None 或 ""），
必填需单独声明：

    checks = ["password", [is_required(), is_long_at_least(6)]]
"""

import re
from collections.abc import Callable, Mapping
from typing import Any

from fastapi_form_validate.exceptions import RuleConfigError

type CheckFn = Callable[[Any, Mapping[str, Any], str], Any]

_COLLECTIONS = (list, tuple, set, frozenset)


def _empty(value: Any) -> bool:
    return value is None or value == ""


def is_required(message: Any = None) -> CheckFn:
    """
    Fail when the value is None or an empty string.
    值为 None 或空字符串时失败。
    """
    err = message or "Required"

    def check(value: Any, data: Mapping[str, Any] | None = None, field: str | None = None) -> Any:
        if _empty(value):
            return err
        return None

    return check


def is_required_if(condition: bool | Callable[[Mapping[str, Any]], Any], message: Any = None) -> CheckFn:
    """
    Require the field only when a condition holds.
    仅在条件成立时要求字段必填。

    Args:
        condition: A flag, or a callable receiving the filtered data.
            布尔值，或接收过滤后数据的可调用对象。
        message: Error message (default "Required").
            错误消息（默认 "Required"）。

    Raises:
        RuleConfigError: When the condition is neither a flag nor callable.
            条件既不是布尔值也不可调用时抛出。
    """
    if condition is None:
        condition = False
    if not callable(condition) and not isinstance(condition, (bool, int, str)):
        raise RuleConfigError(
            message="is_required_if condition must be callable or a scalar / is_required_if 条件必须可调用或为标量",
            details={"condition": repr(condition)},
            error_code="invalid_check_argument",
        )
    err = message or "Required"

    def check(value: Any, data: Mapping[str, Any], field: str | None = None) -> Any:
        required = condition(data) if callable(condition) else condition
        if not required or not _empty(value):
            return None
        return err

    return check


def is_existing(message: Any = None) -> CheckFn:
    """
    Fail when the field key is absent from the filtered data (None and "" pass).
    字段键不在过滤后数据中时失败（None 与 "" 视为存在）。
    """
    err = message or "Must be defined"

    def check(value: Any, data: Mapping[str, Any], field: str) -> Any:
        if field in data:
            return None
        return err

    return check


def is_equal(other: str, message: Any = None) -> CheckFn:
    """
    Require the value to equal the filtered value of another field.
    要求值等于另一字段过滤后的值。

    Example:
        checks = ["password2", is_equal("password", "Passwords don't match")]
    """
    err = message or "Invalid value"

    def check(value: Any, data: Mapping[str, Any], field: str | None = None) -> Any:
        if _empty(value):
            return None
        expected = data.get(other)
        if expected is not None and value == expected:
            return None
        return err

    return check


def is_long_between(min: int, max: int, message: Any = None) -> CheckFn:  # noqa: A002
    """
    Require ``min <= len(value) <= max``.
    要求 ``min <= len(value) <= max``。
    """
    err = message or f"Must be between {min} and {max} symbols"

    def check(value: Any, data: Mapping[str, Any] | None = None, field: str | None = None) -> Any:
        if _empty(value):
            return None
        if min <= len(str(value)) <= max:
            return None
        return err

    return check


def is_long_at_least(length: int, message: Any = None) -> CheckFn:
    err = message or f"Must be at least {length} symbols"

    def check(value: Any, data: Mapping[str, Any] | None = None, field: str | None = None) -> Any:
        if _empty(value) or len(str(value)) >= length:
            return None
        return err

    return check


def is_long_at_most(length: int, message: Any = None) -> CheckFn:
    err = message or f"Must be at the most {length} symbols"

    def check(value: Any, data: Mapping[str, Any] | None = None, field: str | None = None) -> Any:
        if _empty(value) or len(str(value)) <= length:
            return None
        return err

    return check


def is_a(cls: type | tuple[type, ...], message: Any = None) -> CheckFn:
    """
    Require the value to be an instance of ``cls`` (None passes).
    要求值为 ``cls`` 的实例（None 通过）。

    Useful after a filter converted the raw string into an object:
    适用于过滤器已将原始字符串转换为对象之后：

        from datetime import date
        rules = {"fields": ["day"], "filters": ["day", parse_day], "checks": ["day", is_a(date, "Invalid date")]}

    Raises:
        RuleConfigError: When ``cls`` is not a type or a tuple of types.
            ``cls`` 不是类型或类型元组时抛出。
    """
    classes = cls if isinstance(cls, tuple) else (cls,)
    if not classes or not all(isinstance(c, type) for c in classes):
        raise RuleConfigError(
            message="is_a expects a type or a tuple of types / is_a 需要类型或类型元组",
            details={"cls": repr(cls)},
            error_code="invalid_check_argument",
        )
    err = message or "Invalid value"

    def check(value: Any, data: Mapping[str, Any] | None = None, field: str | None = None) -> Any:
        if value is None or isinstance(value, classes):
            return None
        return err

    return check


def is_like(regexp: re.Pattern[str], message: Any = None) -> CheckFn:
    """
    Require the value to match a compiled regular expression (search semantics).
    要求值匹配已编译的正则表达式（search 语义）。

    Raises:
        RuleConfigError: When ``regexp`` is not a compiled pattern.
            ``regexp`` 不是已编译的正则时抛出。
    """
    if not isinstance(regexp, re.Pattern):
        raise RuleConfigError(
            message="Regexp expected / 需要已编译的正则表达式",
            details={"regexp": repr(regexp)},
            error_code="invalid_check_argument",
        )
    err = message or "Invalid value"

    def check(value: Any, data: Mapping[str, Any] | None = None, field: str | None = None) -> Any:
        if _empty(value) or regexp.search(str(value)) is not None:
            return None
        return err

    return check


def is_in(values: list[Any] | tuple[Any, ...] | set[Any] | frozenset[Any], message: Any = None) -> CheckFn:
    """
    Require the value to be one of ``values``.
    要求值属于 ``values``。

    Raises:
        RuleConfigError: When ``values`` is not a list, tuple or set.
            ``values`` 不是列表、元组或集合时抛出。
    """
    if not isinstance(values, _COLLECTIONS):
        raise RuleConfigError(
            message="Sequence of values expected / 需要列表、元组或集合",
            details={"values": repr(values)},
            error_code="invalid_check_argument",
        )
    allowed = tuple(values)
    err = message or "Invalid value"

    def check(value: Any, data: Mapping[str, Any] | None = None, field: str | None = None) -> Any:
        if _empty(value) or value in allowed:
            return None
        return err

    return check
