"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: processor.py
@DateTime: 2026-10-18
@Docs: Per-field application of rule pairs.
按字段应用规则对。
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from fastapi_form_validate.actions import Action, Slot, as_action, run_check, run_filter
from fastapi_form_validate.filters import FilterRegistry
from fastapi_form_validate.patterns import Pattern, as_pattern


@dataclass(frozen=True, slots=True)
class RulePair:
    """
    A (pattern, action) pair.
    (模式, 动作) 规则对。

    Attributes:
        pattern: Field pattern; None for an unsupported shape that never matches.
        pattern: 字段模式；不支持的形态为 None，永不匹配。
        action: Filter or check action.
        action: 过滤或校验动作。
    """

    pattern: Pattern | None
    action: Action

    def matches(self, field: str) -> bool:
        return self.pattern is not None and self.pattern.matches(field)


def pairs_from_sequence(
    entries: Sequence[Any],
    *,
    slot: Slot,
    registry: FilterRegistry | None = None,
    strict_patterns: bool = False,
) -> tuple[RulePair, ...]:
    """
    Split a flat ``[pattern, action, pattern, action, ...]`` sequence into pairs.
    将扁平的 ``[模式, 动作, ...]`` 序列拆分为规则对。

    Declaration order is preserved.
    保持声明顺序。
    """
    return tuple(
        RulePair(
            pattern=as_pattern(entries[i], strict=strict_patterns),
            action=as_action(entries[i + 1], slot=slot, registry=registry),
        )
        for i in range(0, len(entries), 2)
    )


def process(pairs: Sequence[RulePair], data: Mapping[str, Any], field: str, *, check: bool = False) -> Any:
    """
    Apply every matching pair to one field.
    对单个字段应用所有匹配的规则对。

    Args:
        pairs: Rule pairs in declaration order.
            按声明顺序排列的规则对。
        data: Raw input (filter pass) or filtered data (check pass).
            原始输入（过滤阶段）或过滤后的数据（校验阶段）。
        field: Field name.
            字段名。
        check: Run the check pass instead of the filter pass.
            执行校验阶段而非过滤阶段。

    Returns:
        Any: Filter pass: the final value. Check pass: the first error or None.
        Any: 过滤阶段返回最终值；校验阶段返回第一个错误或 None。
    """
    value = data.get(field)
    for pair in pairs:
        if not pair.matches(field):
            continue
        if check:
            error = run_check(pair.action, value, data, field)
            if error:
                return error
        else:
            value = run_filter(pair.action, value)
    if check:
        return None
    return value
