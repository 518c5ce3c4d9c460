"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: result.py
@DateTime: 2026-10-18
@Docs: Object interface: Validator and ValidationResult.
面向对象接口：Validator 与 ValidationResult。

Examples:
    >>> from fastapi_form_validate import Validator
    >>> v = Validator(filters={"digits": lambda s: "".join(c for c in s if c.isdigit())})
    >>> result = v.check({"phone": "+1 (555) 010"}, {"fields": ["phone"], "filters": ["phone", "digits"]})
    >>> result.success(), result.data("phone")
    (True, '1555010')
"""

from collections.abc import Mapping
from typing import Any

from fastapi_form_validate.config import ValidationConfig
from fastapi_form_validate.exceptions import RuleConfigError, UndefinedFieldError
from fastapi_form_validate.filters import FilterFn, FilterRegistry, default_registry
from fastapi_form_validate.rules import RuleSet
from fastapi_form_validate.validator import ValidationOutcome, build_rules, validate


class ValidationResult:
    """
    Read-only wrapper over a validation outcome.
    校验结果的只读包装。

    Field-scoped accessors reject names outside the declared fields, unless the
    rules selected every input key.
    字段级访问器拒绝未声明的字段名（规则选择全部输入键时除外）。
    """

    def __init__(self, *, outcome: ValidationOutcome, rules: RuleSet, params: Mapping[str, Any]) -> None:
        self._outcome = outcome
        self._rules = rules
        self._params = params

    @property
    def params(self) -> Mapping[str, Any]:
        return self._params

    @property
    def rules(self) -> RuleSet:
        return self._rules

    def success(self) -> bool:
        return self._outcome["success"]

    def data(self, field: str | None = None) -> Any:
        """
        All filtered data, or the filtered value of one field.
        全部过滤后数据，或单个字段的过滤后值。

        Raises:
            UndefinedFieldError: When ``field`` is not a declared field.
                ``field`` 不是声明字段时抛出。
        """
        if field is None:
            return dict(self._outcome["data"])
        return self.data_field(field)

    def error(self, field: str | None = None) -> Any:
        """
        All error messages, or the message of one field.
        全部错误消息，或单个字段的消息。

        Raises:
            UndefinedFieldError: When ``field`` is not a declared field.
                ``field`` 不是声明字段时抛出。
        """
        if field is None:
            return dict(self._outcome["error"])
        return self.error_field(field)

    def data_field(self, name: str) -> Any:
        self._ensure_field("data", name)
        return self._outcome["data"].get(name)

    def error_field(self, name: str) -> Any:
        self._ensure_field("error", name)
        return self._outcome["error"].get(name)

    def to_hash(self) -> ValidationOutcome:
        return {
            "success": self._outcome["success"],
            "data": dict(self._outcome["data"]),
            "error": dict(self._outcome["error"]),
        }

    def _ensure_field(self, accessor: str, name: str) -> None:
        if not self._rules.allows(name):
            raise UndefinedFieldError(accessor, name)

    def __repr__(self) -> str:
        return f"ValidationResult(success={self.success()!r}, error={self._outcome['error']!r})"


class Validator:
    """
    Validator with its own filter registry.
    拥有独立过滤器注册表的校验器。

    Extra filters are added to a copy of the default registry, so instances
    never affect each other or the module-level ``filter()`` helper.
    额外过滤器添加到默认注册表的副本中，实例之间以及与模块级 ``filter()`` 互不影响。
    """

    def __init__(
        self,
        filters: Mapping[str, FilterFn] | None = None,
        *,
        config: ValidationConfig | None = None,
    ) -> None:
        """
        Initialize the validator.
        初始化校验器。

        Args:
            filters: Extra named filters; entries that are not callable are ignored.
                额外的命名过滤器；不可调用的条目会被忽略。
            config: Engine configuration.
                引擎配置。
        """
        self.registry: FilterRegistry = default_registry.copy()
        self.config = config
        for name, routine in (filters or {}).items():
            if callable(routine):
                self.registry.register(name, routine)

    def filter(self, *names: str) -> FilterFn | list[FilterFn]:
        """Resolve named filters against this validator's registry.
        使用本校验器的注册表解析命名过滤器。
        """
        resolved = self.registry.resolve(*names)
        if len(resolved) == 1:
            return resolved[0]
        return resolved

    def check(self, input: Mapping[str, Any], rules: Mapping[str, Any] | RuleSet) -> ValidationResult:
        """
        Validate ``input`` against ``rules``.
        按 ``rules`` 校验 ``input``。

        Args:
            input: Field name to value mapping.
                字段名到值的映射。
            rules: Raw rule mapping or a RuleSet.
                原始规则映射或 RuleSet。

        Returns:
            ValidationResult: Wrapped outcome.
            ValidationResult: 包装后的结果。

        Raises:
            RuleConfigError: When input or rules are not mappings, or rules are malformed.
                输入或规则不是映射，或规则不合法时抛出。
        """
        if not isinstance(input, Mapping) or not isinstance(rules, (Mapping, RuleSet)):
            raise RuleConfigError(
                message="Parameters and rules mappings are needed / 需要参数与规则映射",
                error_code="invalid_arguments",
            )
        rule_set = build_rules(rules, registry=self.registry, config=self.config)
        outcome = validate(input, rule_set, config=self.config)
        return ValidationResult(outcome=outcome, rules=rule_set, params=input)
