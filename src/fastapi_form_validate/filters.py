"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: filters.py
@DateTime: 2026-10-18
@Docs: Named filter registry and built-in text filters.
命名过滤器注册表与内置文本过滤器。

Built-in filters / 内置过滤器:
- trim: remove leading and trailing white space. 去除首尾空白。
- strip: shrink two or more white spaces to one. 将连续空白压缩为一个。
- lc: lower case. 转小写。
- uc: upper case. 转大写。
- ucfirst: upper case first letter. 首字母大写。

``None`` and non-string values pass through every built-in filter unchanged.
``None`` 与非字符串值原样通过所有内置过滤器。
"""

import logging
import re
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from fastapi_form_validate.exceptions import FilterNotFoundError, RuleConfigError

logger = logging.getLogger(__name__)

type FilterFn = Callable[[Any], Any]

_WHITESPACE_RUN = re.compile(r"(\s){2,}")


def _trim(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    return value.strip()


def _strip(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    return _WHITESPACE_RUN.sub(r"\1", value)


def _lc(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    return value.lower()


def _uc(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    return value.upper()


def _ucfirst(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    return value[:1].upper() + value[1:]


BUILTIN_FILTERS: dict[str, FilterFn] = {
    "trim": _trim,
    "strip": _strip,
    "lc": _lc,
    "uc": _uc,
    "ucfirst": _ucfirst,
}


class FilterRegistry:
    """
    Mapping of filter names to filter routines.
    过滤器名称到过滤器函数的映射。
    """

    def __init__(self, filters: Mapping[str, FilterFn] | None = None) -> None:
        self._filters: dict[str, FilterFn] = dict(filters or {})

    def register(self, name: str, routine: FilterFn) -> None:
        """
        Register (or replace) a named filter.
        注册（或替换）一个命名过滤器。

        Args:
            name: Filter name.
                过滤器名称。
            routine: Callable taking a value and returning the new value.
                接收值并返回新值的可调用对象。

        Raises:
            RuleConfigError: When the routine is not callable.
                routine 不可调用时抛出。
        """
        if not callable(routine):
            raise RuleConfigError(
                message=f"Filter {name} must be callable / 过滤器 {name} 必须可调用",
                details={"name": name},
                error_code="invalid_filter",
            )
        self._filters[name] = routine
        logger.debug("registered filter %s", name)

    def get(self, name: str) -> FilterFn:
        """
        Look up a filter by name.
        按名称查找过滤器。

        Raises:
            FilterNotFoundError: When the name is unknown.
                名称未知时抛出。
        """
        try:
            return self._filters[name]
        except KeyError:
            raise FilterNotFoundError(name) from None

    def resolve(self, *names: str) -> list[FilterFn]:
        """Resolve several names in order.
        按顺序解析多个名称。
        """
        return [self.get(name) for name in names]

    def copy(self) -> "FilterRegistry":
        return FilterRegistry(self._filters)

    def names(self) -> list[str]:
        return sorted(self._filters)

    def __contains__(self, name: object) -> bool:
        return name in self._filters

    def __iter__(self) -> Iterator[str]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)


default_registry = FilterRegistry(BUILTIN_FILTERS)


def filter(*names: str, registry: FilterRegistry | None = None) -> FilterFn | list[FilterFn]:  # noqa: A001
    """
    Shortcut to named filters.
    命名过滤器快捷方式。

    ``filter("lc", "ucfirst")`` is equivalent to ``[str.lower, ucfirst]`` as a chain.
    ``filter("lc", "ucfirst")`` 等价于由两个函数组成的链。

    Args:
        *names: Filter names.
            过滤器名称。
        registry: Registry to resolve against (default registry when omitted).
            用于解析的注册表（缺省为默认注册表）。

    Returns:
        FilterFn | list[FilterFn]: A single routine for one name, otherwise a chain.
        FilterFn | list[FilterFn]: 单个名称返回单个函数，否则返回链。

    Raises:
        FilterNotFoundError: When any name is unknown.
            任一名称未知时抛出。
    """
    resolved = (registry if registry is not None else default_registry).resolve(*names)
    if len(resolved) == 1:
        return resolved[0]
    return resolved
