"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: batch.py
@DateTime: 2026-10-18
@Docs: Validate many rows against one rule set.
使用同一规则集校验多行数据。
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fastapi_form_validate.config import ValidationConfig, resolve_config
from fastapi_form_validate.filters import FilterRegistry
from fastapi_form_validate.helpers.rows import ROW_NUMBER_KEY, iter_numbered_rows
from fastapi_form_validate.rules import RuleSet
from fastapi_form_validate.validation_core import ErrorCollector
from fastapi_form_validate.validator import build_rules, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BatchResult:
    """
    Batch validation result.
    批量校验结果。

    Attributes:
        valid_rows: Filtered data of rows without errors, with ``row_number``.
        valid_rows: 无错误行的过滤后数据（含 ``row_number``）。
        errors: Row-numbered error items.
        errors: 带行号的错误项。
        total_rows: Number of rows seen.
        total_rows: 处理的总行数。
    """

    valid_rows: list[dict[str, Any]]
    errors: list[dict[str, Any]]
    total_rows: int

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def error_rows(self) -> int:
        return len({item["row_number"] for item in self.errors})


def validate_rows(
    rows: Any,
    rules: Mapping[str, Any] | RuleSet,
    *,
    registry: FilterRegistry | None = None,
    config: ValidationConfig | None = None,
    start: int = 1,
) -> BatchResult:
    """
    Validate every row and collect row-numbered errors.
    校验每一行并收集带行号的错误。

    Args:
        rows: Iterable of mappings, a single mapping, or a Polars DataFrame.
            映射可迭代对象、单个映射或 Polars DataFrame。
        rules: Raw rule mapping or a RuleSet (built once for all rows).
            原始规则映射或 RuleSet（只构建一次）。
        registry: Registry for filter names.
            过滤器名称注册表。
        config: Engine configuration.
            引擎配置。
        start: First row number for rows without a ``row_number`` key.
            无 ``row_number`` 键时的起始行号。

    Returns:
        BatchResult: Valid rows and errors.
        BatchResult: 有效行与错误。

    Raises:
        RuleConfigError: When the rules are malformed.
            规则不合法时抛出。
        TypeError: When ``rows`` does not hold mappings.
            ``rows`` 不是映射数据时抛出。
    """
    cfg = config or resolve_config()
    rule_set = build_rules(rules, registry=registry, config=cfg)
    collector = ErrorCollector()
    valid_rows: list[dict[str, Any]] = []
    total = 0
    for row_number, row in iter_numbered_rows(rows, start=start):
        total += 1
        outcome = validate(row, rule_set, config=cfg)
        if outcome["success"]:
            valid_rows.append({ROW_NUMBER_KEY: row_number, **outcome["data"]})
        else:
            collector.add_row(row_number=row_number, error=outcome["error"], data=outcome["data"])
    logger.debug("validated %d rows, %d errors", total, len(collector.errors))
    return BatchResult(valid_rows=valid_rows, errors=collector.errors, total_rows=total)
