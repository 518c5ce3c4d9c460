"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: validation_polars.py
@DateTime: 2026-10-18
@Docs: Polars-backed table validation.
基于 Polars 的表格校验。
"""

from collections.abc import Mapping
from typing import Any

import polars as pl

from fastapi_form_validate.batch import validate_rows
from fastapi_form_validate.config import ValidationConfig
from fastapi_form_validate.filters import FilterRegistry
from fastapi_form_validate.helpers.rows import ROW_NUMBER_KEY
from fastapi_form_validate.rules import RuleSet


def validate_frame(
    df: pl.DataFrame,
    rules: Mapping[str, Any] | RuleSet,
    *,
    registry: FilterRegistry | None = None,
    config: ValidationConfig | None = None,
) -> tuple[pl.DataFrame, list[dict[str, Any]]]:
    """
    Validate every row of a DataFrame.
    校验 DataFrame 的每一行。

    Args:
        df: Input DataFrame; a ``row_number`` column is added (1-based) when missing.
        df: 输入数据框；缺少 ``row_number`` 列时自动添加（从 1 开始）。
        rules: Raw rule mapping or a RuleSet.
        rules: 原始规则映射或 RuleSet。
        registry: Registry for filter names.
        registry: 过滤器名称注册表。
        config: Engine configuration.
        config: 引擎配置。

    Returns:
        tuple[pl.DataFrame, list[dict[str, Any]]]: Sanitized valid rows and error items.
        tuple[pl.DataFrame, list[dict[str, Any]]]: 清洗后的有效行与错误项。
    """
    if ROW_NUMBER_KEY not in df.columns:
        df = df.with_row_index(ROW_NUMBER_KEY, offset=1)
    result = validate_rows(df, rules, registry=registry, config=config)
    if not result.valid_rows:
        return pl.DataFrame(schema={ROW_NUMBER_KEY: pl.Int64}), result.errors
    valid_df = pl.DataFrame(result.valid_rows, infer_schema_length=None)
    return valid_df, result.errors
