"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-18
@Docs: Package exports for fastapi_form_validate.
fastapi_form_validate 包导出定义。

The FastAPI dependency (``fastapi_form_validate.dependencies``) and the Polars
backend (``fastapi_form_validate.validation``) are imported on demand.
FastAPI 依赖与 Polars 后端按需导入。
"""

from fastapi_form_validate.actions import Chain, Single, as_action, run_check, run_filter
from fastapi_form_validate.batch import BatchResult, validate_rows
from fastapi_form_validate.checks import (
    is_a,
    is_equal,
    is_existing,
    is_in,
    is_like,
    is_long_at_least,
    is_long_at_most,
    is_long_between,
    is_required,
    is_required_if,
)
from fastapi_form_validate.config import ValidationConfig, resolve_config
from fastapi_form_validate.exceptions import (
    FilterNotFoundError,
    FormValidateError,
    FormValidationError,
    RuleConfigError,
    UndefinedFieldError,
)
from fastapi_form_validate.filters import FilterRegistry, default_registry, filter
from fastapi_form_validate.patterns import AnyOf, Exact, Regex, as_pattern, match
from fastapi_form_validate.processor import RulePair, process
from fastapi_form_validate.result import ValidationResult, Validator
from fastapi_form_validate.rules import RuleSet
from fastapi_form_validate.schemas import FieldErrorItem, ValidationResponse
from fastapi_form_validate.validation_core import ErrorCollector
from fastapi_form_validate.validator import ValidationOutcome, validate

__all__ = [
    "validate",
    "ValidationOutcome",
    "Validator",
    "ValidationResult",
    "RuleSet",
    "RulePair",
    "process",
    "Exact",
    "AnyOf",
    "Regex",
    "as_pattern",
    "match",
    "Single",
    "Chain",
    "as_action",
    "run_filter",
    "run_check",
    "FilterRegistry",
    "default_registry",
    "filter",
    "is_required",
    "is_required_if",
    "is_existing",
    "is_equal",
    "is_long_between",
    "is_long_at_least",
    "is_long_at_most",
    "is_a",
    "is_like",
    "is_in",
    "validate_rows",
    "BatchResult",
    "ErrorCollector",
    "ValidationConfig",
    "resolve_config",
    "FieldErrorItem",
    "ValidationResponse",
    "FormValidateError",
    "RuleConfigError",
    "FilterNotFoundError",
    "UndefinedFieldError",
    "FormValidationError",
]
