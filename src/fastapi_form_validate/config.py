"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-10-18
@Docs: Validation engine configuration helpers.
校验引擎配置助手。

Configuration helpers for the validation engine.
校验引擎配置助手。

The engine itself is stateless; configuration only tunes how strictly rules
are read and how much is logged.
引擎本身无状态；配置仅调整规则读取的严格程度与日志输出量。

Environment variables / 环境变量:
        - FORM_VALIDATE_STRICT_PATTERNS:
            Reject unsupported pattern shapes when rules are built.
            构建规则时拒绝不支持的模式形态。
        - FORM_VALIDATE_LOG_FAILURES:
            Log every failing field at INFO level.
            以 INFO 级别记录每个校验失败的字段。

Examples:
        Use defaults / 使用默认值:

        >>> from fastapi_form_validate.config import resolve_config
        >>> cfg = resolve_config()
        >>> cfg.strict_patterns
        False

        Explicit parameters win / 显式参数优先:

        >>> resolve_config(strict_patterns=True).strict_patterns
        True
"""

import os
from dataclasses import dataclass

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Validation engine configuration.

    校验引擎配置。

    Attributes:
        strict_patterns: Raise on unsupported pattern shapes instead of never matching.
            遇到不支持的模式形态时抛错，而不是视为永不匹配。
        log_failures: Log each failing field at INFO level.
            以 INFO 级别记录每个失败字段。
    """

    strict_patterns: bool = False
    log_failures: bool = False


DEFAULT_CONFIG = ValidationConfig()


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _parse_bool(value: str | None, default: bool) -> bool:
    """
    Parse a boolean environment value.
    解析布尔型环境变量值。

    Args:
        value: Raw value (None when unset).
            原始值（未设置时为 None）。
        default: Value used when unset.
            未设置时使用的值。

    Returns:
        bool: Parsed flag.
        bool: 解析后的开关值。
    """
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def resolve_config(
    *,
    strict_patterns: bool | None = None,
    log_failures: bool | None = None,
    env_prefix: str = "FORM_VALIDATE",
) -> ValidationConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

     Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_STRICT_PATTERNS`, `{env_prefix}_LOG_FAILURES`
           环境变量：`{env_prefix}_STRICT_PATTERNS`、`{env_prefix}_LOG_FAILURES`
        3) defaults (both off) / 默认值（均关闭）

    Args:
        strict_patterns: Reject unsupported pattern shapes.
            拒绝不支持的模式形态。
        log_failures: Log failing fields.
            记录失败字段。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 FORM_VALIDATE）。

    Returns:
        A ValidationConfig instance.
            返回 ValidationConfig 配置实例。
    """
    resolved_strict = (
        strict_patterns
        if strict_patterns is not None
        else _parse_bool(_env_get(f"{env_prefix}_STRICT_PATTERNS"), DEFAULT_CONFIG.strict_patterns)
    )
    resolved_log = (
        log_failures
        if log_failures is not None
        else _parse_bool(_env_get(f"{env_prefix}_LOG_FAILURES"), DEFAULT_CONFIG.log_failures)
    )
    return ValidationConfig(strict_patterns=resolved_strict, log_failures=resolved_log)
