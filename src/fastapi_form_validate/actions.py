"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: actions.py
@DateTime: 2026-10-18
@Docs: Filter/check actions and their execution.
过滤/校验动作及其执行。

An action is a single routine or an ordered chain of actions (arbitrarily nested).
动作是单个函数，或由动作组成的有序链（可任意嵌套）。

Chains behave differently per pass / 链在不同阶段语义不同:
- filters: every routine runs, each output feeds the next.
    过滤：所有函数依次执行，前一个的输出作为后一个的输入。
- checks: every routine sees the same value; the first truthy result wins.
    校验：所有函数接收同一值；第一个真值结果即返回。
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal

from fastapi_form_validate.exceptions import RuleConfigError
from fastapi_form_validate.filters import FilterRegistry, default_registry

type Slot = Literal["filters", "checks"]


@dataclass(frozen=True, slots=True)
class Single:
    """A single filter or check routine.
    单个过滤或校验函数。
    """

    routine: Callable[..., Any]


@dataclass(frozen=True, slots=True)
class Chain:
    """An ordered sequence of actions.
    有序的动作序列。
    """

    actions: tuple["Action", ...]


type Action = Single | Chain


def as_action(raw: Any, *, slot: Slot, registry: FilterRegistry | None = None) -> Action:
    """
    Convert a raw rule action into an Action variant.
    将原始规则动作转换为 Action 变体。

    Args:
        raw: Callable, list/tuple of actions, or (filters only) a filter name.
            可调用对象、动作列表/元组，或（仅过滤）过滤器名称。
        slot: "filters" or "checks".
            "filters" 或 "checks"。
        registry: Registry used to resolve filter names.
            用于解析过滤器名称的注册表。

    Returns:
        Action: Single or Chain.
        Action: Single 或 Chain。

    Raises:
        RuleConfigError: When the action is neither routine nor chain.
            动作既不是函数也不是链时抛出。
    """
    if isinstance(raw, (Single, Chain)):
        return raw
    if isinstance(raw, str) and slot == "filters":
        return Single((registry if registry is not None else default_registry).get(raw))
    if callable(raw):
        return Single(raw)
    if isinstance(raw, (list, tuple)):
        return Chain(tuple(as_action(item, slot=slot, registry=registry) for item in raw))
    raise RuleConfigError(
        message=f"{slot} must be either callables or lists of them, got {raw!r} / {slot} 必须是可调用对象或其列表",
        details={"slot": slot, "action": repr(raw)},
        error_code="invalid_action",
    )


def run_filter(action: Action, value: Any) -> Any:
    """
    Run a filter action; chains thread the value through every routine.
    执行过滤动作；链会让值依次经过每个函数。

    Args:
        action: Filter action.
            过滤动作。
        value: Input value.
            输入值。

    Returns:
        Any: Transformed value.
        Any: 转换后的值。
    """
    match action:
        case Single(routine):
            return routine(value)
        case Chain(actions):
            for sub in actions:
                value = run_filter(sub, value)
            return value
    raise RuleConfigError(message=f"Invalid filter action: {action!r}", error_code="invalid_action")


def run_check(action: Action, value: Any, data: Mapping[str, Any], field: str) -> Any:
    """
    Run a check action; chains stop at the first error.
    执行校验动作；链在首个错误处停止。

    Args:
        action: Check action.
            校验动作。
        value: Filtered field value (None when the field is absent).
            过滤后的字段值（字段缺失时为 None）。
        data: Filtered data mapping.
            过滤后的数据映射。
        field: Field name.
            字段名。

    Returns:
        Any: The first truthy error message, or None when every check passes.
        Any: 第一个真值错误消息；全部通过时返回 None。
    """
    match action:
        case Single(routine):
            return routine(value, data, field)
        case Chain(actions):
            for sub in actions:
                result = run_check(sub, value, data, field)
                if result:
                    return result
            return None
    raise RuleConfigError(message=f"Invalid check action: {action!r}", error_code="invalid_action")
