"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: patterns.py
@DateTime: 2026-10-18
@Docs: Field-name patterns and matching.
字段名模式与匹配。

A rule pattern associates a field name with a filter or check entry. Three
shapes are supported:
规则模式将字段名与过滤器或校验项关联，支持三种形态：
- Exact: ``"email"``
- AnyOf: ``["pass", "pass2"]``
- Regex: ``re.compile(r"^addr_")`` (str patterns only, search semantics, case as written)
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from fastapi_form_validate.exceptions import RuleConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Exact:
    """Match a single field name.
    精确匹配单个字段名。
    """

    name: str

    def matches(self, field: str) -> bool:
        return field == self.name


@dataclass(frozen=True, slots=True)
class AnyOf:
    """Match any field name of a set.
    匹配集合中的任一字段名。
    """

    names: frozenset[str]

    def matches(self, field: str) -> bool:
        return field in self.names


@dataclass(frozen=True, slots=True)
class Regex:
    """Match field names against a compiled regular expression.
    使用已编译的正则表达式匹配字段名。
    """

    pattern: re.Pattern[str]

    def matches(self, field: str) -> bool:
        return self.pattern.search(field) is not None


type Pattern = Exact | AnyOf | Regex

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def _all_str(items: Iterable[Any]) -> bool:
    return all(isinstance(item, str) for item in items)


def as_pattern(raw: Any, *, strict: bool = False) -> Pattern | None:
    """
    Convert a raw rule pattern into a Pattern variant.
    将原始规则模式转换为 Pattern 变体。

    Args:
        raw: str, sequence/set of str, compiled regex, or a Pattern variant.
            字符串、字符串序列/集合、已编译正则或 Pattern 变体。
        strict: Raise on unsupported shapes instead of returning None.
            对不支持的形态抛错而不是返回 None。

    Returns:
        Pattern | None: The variant, or None for an unsupported shape (never matches).
        Pattern | None: 对应变体；不支持的形态返回 None（永不匹配）。

    Raises:
        RuleConfigError: When ``strict`` is set and the shape is unsupported.
            strict 开启且形态不受支持时抛出。
    """
    if isinstance(raw, (Exact, AnyOf, Regex)):
        return raw
    if isinstance(raw, str):
        return Exact(raw)
    if isinstance(raw, re.Pattern) and isinstance(raw.pattern, str):
        return Regex(raw)
    if isinstance(raw, _SEQUENCE_TYPES) and _all_str(raw):
        return AnyOf(frozenset(raw))
    if strict:
        raise RuleConfigError(
            message=f"Unsupported pattern: {raw!r} / 不支持的模式：{raw!r}",
            details={"pattern": repr(raw)},
            error_code="unsupported_pattern",
        )
    logger.debug("unsupported pattern %r never matches", raw)
    return None


def match(field: str, pattern: Any) -> bool:
    """
    Decide whether a field name matches a pattern.
    判断字段名是否匹配模式。

    Args:
        field: Field name.
            字段名。
        pattern: Pattern variant or raw pattern.
            Pattern 变体或原始模式。

    Returns:
        bool: True on match; unsupported shapes never match.
        bool: 匹配返回 True；不支持的形态永不匹配。
    """
    resolved = as_pattern(pattern)
    if resolved is None:
        return False
    return resolved.matches(field)
