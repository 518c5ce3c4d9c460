"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: validation.py
@DateTime: 2026-10-18
@Docs: Table validation facade with optional backend.
表格校验门面（可选后端）。
"""

from collections.abc import Mapping
from typing import Any

from fastapi_form_validate.config import ValidationConfig
from fastapi_form_validate.exceptions import FormValidateError
from fastapi_form_validate.filters import FilterRegistry
from fastapi_form_validate.rules import RuleSet


def _load_backend() -> Any:
    try:
        from fastapi_form_validate import validation_polars

        return validation_polars
    except ImportError as exc:  # pragma: no cover / 覆盖忽略
        raise FormValidateError(
            message="Missing optional dependencies for table validation. Install extras: polars / 缺少表格校验可选依赖，请安装: polars",
            details={"error": str(exc)},
            error_code="missing_dependency",
        ) from exc


def validate_frame(
    df: Any,
    rules: Mapping[str, Any] | RuleSet,
    *,
    registry: FilterRegistry | None = None,
    config: ValidationConfig | None = None,
) -> tuple[Any, list[dict[str, Any]]]:
    """
    Validate every row of a DataFrame.
    校验 DataFrame 的每一行。

    Args:
        df: Input DataFrame.
        df: 输入数据框。
        rules: Raw rule mapping or a RuleSet.
        rules: 原始规则映射或 RuleSet。
        registry: Registry for filter names.
        registry: 过滤器名称注册表。
        config: Engine configuration.
        config: 引擎配置。

    Returns:
        tuple[Any, list[dict[str, Any]]]: Sanitized valid rows and error items.
        tuple[Any, list[dict[str, Any]]]: 清洗后的有效行与错误项。
    """
    backend = _load_backend()
    return backend.validate_frame(df, rules, registry=registry, config=config)
