"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: validator.py
@DateTime: 2026-10-18
@Docs: Three-stage validation pipeline.
三阶段校验流水线。

Stages / 阶段:
    1) field selection: declared fields, or every input key.
       字段选择：声明的字段，或全部输入键。
    2) filter pass: present keys only, builds the sanitized data.
       过滤阶段：仅处理存在的键，生成清洗后的数据。
    3) check pass: every selected field, against the sanitized data.
       校验阶段：针对清洗后的数据校验所有选中字段。

Examples:
    >>> from fastapi_form_validate import validate, filter, is_required
    >>> rules = {"fields": ["a"], "filters": ["a", filter("trim", "uc")], "checks": ["a", is_required()]}
    >>> validate({"a": "  hi  "}, rules)
    {'success': True, 'data': {'a': 'HI'}, 'error': {}}
"""

import logging
from collections.abc import Mapping
from typing import Any, TypedDict

from fastapi_form_validate.config import ValidationConfig, resolve_config
from fastapi_form_validate.exceptions import RuleConfigError
from fastapi_form_validate.filters import FilterRegistry
from fastapi_form_validate.processor import process
from fastapi_form_validate.rules import RuleSet

logger = logging.getLogger(__name__)


class ValidationOutcome(TypedDict):
    """
    Result of a validate call.
    validate 调用的结果。

    Attributes:
        success: True iff ``error`` is empty.
        success: 当且仅当 ``error`` 为空时为 True。
        data: Filtered values of the fields present in the input.
        data: 输入中存在字段的过滤后值。
        error: First error message per failing field.
        error: 每个失败字段的第一个错误消息。
    """

    success: bool
    data: dict[str, Any]
    error: dict[str, Any]


def build_rules(
    rules: Mapping[str, Any] | RuleSet,
    *,
    registry: FilterRegistry | None = None,
    config: ValidationConfig | None = None,
) -> RuleSet:
    """
    Return a RuleSet from a raw mapping (or pass a RuleSet through).
    由原始映射构建 RuleSet（RuleSet 原样返回）。
    """
    if isinstance(rules, RuleSet):
        return rules
    cfg = config or resolve_config()
    return RuleSet.from_mapping(rules, registry=registry, strict_patterns=cfg.strict_patterns)


def validate(
    input: Mapping[str, Any],
    rules: Mapping[str, Any] | RuleSet,
    *,
    registry: FilterRegistry | None = None,
    config: ValidationConfig | None = None,
) -> ValidationOutcome:
    """
    Filter and check a flat mapping against a rule set.
    按规则集过滤并校验扁平映射。

    Args:
        input: Field name to value mapping (never mutated).
            字段名到值的映射（不会被修改）。
        rules: Raw rule mapping or a prepared RuleSet.
            原始规则映射或已构建的 RuleSet。
        registry: Registry for filter names used in ``rules``.
            ``rules`` 中过滤器名称所用的注册表。
        config: Engine configuration (resolved from env when omitted).
            引擎配置（缺省时从环境变量解析）。

    Returns:
        ValidationOutcome: ``{"success", "data", "error"}``.

    Raises:
        RuleConfigError: When the rules or the input are malformed.
            规则或输入不合法时抛出。
    """
    cfg = config or resolve_config()
    rule_set = build_rules(rules, registry=registry, config=cfg)
    if not isinstance(input, Mapping):
        raise RuleConfigError(
            message="Input must be a mapping / 输入必须是映射",
            details={"type": type(input).__name__},
            error_code="invalid_input",
        )

    fields = rule_set.working_fields(input)

    data: dict[str, Any] = {}
    for name in fields:
        if name in input:
            data[name] = process(rule_set.filters, input, name)

    error: dict[str, Any] = {}
    for name in fields:
        message = process(rule_set.checks, data, name, check=True)
        if message and not error.get(name):
            error[name] = message
            if cfg.log_failures:
                logger.info("field %s failed: %s", name, message)

    logger.debug("validated %d fields, %d failed", len(fields), len(error))
    return {"success": not error, "data": data, "error": error}
