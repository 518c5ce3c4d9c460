"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: rules.py
@DateTime: 2026-10-18
@Docs: Rule set shape checks and normalization.
规则集形态校验与规范化。

A rule set is a mapping with three slots:
规则集是包含三个槽位的映射：

    {
        "fields": ["name", "email"],          # required; empty = all input keys
        "filters": [pattern, action, ...],    # optional, even length
        "checks": [pattern, action, ...],     # optional, even length
    }

Malformed rules raise RuleConfigError before any input is touched.
不合法的规则会在处理任何输入之前抛出 RuleConfigError。
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fastapi_form_validate.exceptions import RuleConfigError
from fastapi_form_validate.filters import FilterRegistry
from fastapi_form_validate.processor import RulePair, pairs_from_sequence

RULE_KEYS = ("fields", "filters", "checks")

_FIELD_CONTAINERS = (list, tuple, set, frozenset)


@dataclass(frozen=True, slots=True)
class RuleSet:
    """
    Normalized rule set.
    规范化后的规则集。

    Attributes:
        fields: Declared field names (empty means "all input keys").
        fields: 声明的字段名（为空表示"使用全部输入键"）。
        filters: Filter rule pairs in declaration order.
        filters: 按声明顺序排列的过滤规则对。
        checks: Check rule pairs in declaration order.
        checks: 按声明顺序排列的校验规则对。
    """

    fields: tuple[str, ...]
    filters: tuple[RulePair, ...] = field(default=())
    checks: tuple[RulePair, ...] = field(default=())

    @property
    def all_fields(self) -> bool:
        return not self.fields

    def working_fields(self, data: Mapping[str, Any]) -> list[str]:
        """Return declared fields, or the live input keys when none are declared.
        返回声明的字段；未声明时返回当前输入的键。
        """
        if self.fields:
            return list(self.fields)
        return list(data.keys())

    def allows(self, name: str) -> bool:
        """Whether field-scoped lookups may use ``name``.
        字段级访问是否允许使用 ``name``。
        """
        return self.all_fields or name in self.fields

    @classmethod
    def from_mapping(
        cls,
        rules: Mapping[str, Any],
        *,
        registry: FilterRegistry | None = None,
        strict_patterns: bool = False,
    ) -> "RuleSet":
        """
        Check the rule mapping shape and build a RuleSet.
        校验规则映射形态并构建 RuleSet。

        Args:
            rules: Raw rule mapping.
                原始规则映射。
            registry: Registry for named filters.
                命名过滤器注册表。
            strict_patterns: Reject unsupported pattern shapes.
                拒绝不支持的模式形态。

        Returns:
            RuleSet: Normalized rules.
            RuleSet: 规范化后的规则。

        Raises:
            RuleConfigError: When the rules are malformed.
                规则不合法时抛出。
        """
        if not isinstance(rules, Mapping):
            raise RuleConfigError(
                message="Rules must be a mapping / 规则必须是映射",
                details={"type": type(rules).__name__},
                error_code="invalid_rules",
            )
        fields = rules.get("fields")
        if fields is None:
            raise RuleConfigError(
                message="You must define a fields array / 必须定义 fields 列表",
                error_code="missing_fields",
            )
        if not isinstance(fields, _FIELD_CONTAINERS) or not all(isinstance(f, str) for f in fields):
            raise RuleConfigError(
                message="fields must be a sequence of field names / fields 必须是字段名序列",
                details={"fields": repr(fields)},
                error_code="invalid_fields",
            )
        for slot in ("filters", "checks"):
            if slot not in rules:
                continue
            entries = rules[slot]
            if not isinstance(entries, (list, tuple)) or len(entries) % 2:
                raise RuleConfigError(
                    message=f"{slot} must be an array with an even number of elements / {slot} 必须是偶数长度的列表",
                    details={"slot": slot},
                    error_code="odd_rule_pairs",
                )
        for key in rules:
            if key not in RULE_KEYS:
                raise RuleConfigError(
                    message=f"Unknown key {key} / 未知的键 {key}",
                    details={"key": key},
                    error_code="unknown_rule_key",
                )
        # sets have no declared order; keep a stable one
        names = tuple(sorted(fields)) if isinstance(fields, (set, frozenset)) else tuple(fields)
        return cls(
            fields=names,
            filters=pairs_from_sequence(
                rules.get("filters", ()), slot="filters", registry=registry, strict_patterns=strict_patterns
            ),
            checks=pairs_from_sequence(
                rules.get("checks", ()), slot="checks", registry=registry, strict_patterns=strict_patterns
            ),
        )
