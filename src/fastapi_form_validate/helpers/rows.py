"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: rows.py
@DateTime: 2026-10-18
@Docs: Helpers to iterate input rows without exposing Polars details.
输入行迭代辅助（隐藏 Polars 细节）。
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

ROW_NUMBER_KEY = "row_number"


def iter_rows(data: Any) -> Iterator[dict[str, Any]]:
    """Iterate rows as fresh dictionaries.
    以新字典形式迭代行。

    Args:
        data: Polars DataFrame, iterable of mappings, or a single mapping.
            Polars DataFrame、映射行可迭代对象或单个映射。

    Raises:
        TypeError: When ``data`` does not hold mappings.
            ``data`` 不是映射数据时抛出。
    """
    if _is_polars_df(data):
        yield from data.to_dicts()
        return
    if isinstance(data, Mapping):
        yield dict(data)
        return
    if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
        raise TypeError("rows must be iterable mappings / 行数据必须是可迭代的映射")
    for row in data:
        if not isinstance(row, Mapping):
            raise TypeError("rows must be iterable mappings / 行数据必须是可迭代的映射")
        yield dict(row)


def iter_numbered_rows(data: Any, *, start: int = 1) -> Iterator[tuple[int, dict[str, Any]]]:
    """Iterate ``(row_number, row)`` pairs.
    迭代 ``(行号, 行)`` 对。

    A ``row_number`` key is popped from the row and used as its number when it
    converts to an int; other rows are numbered by position, counting from ``start``.
    行中的 ``row_number`` 键会被取出，可转换为整数时作为行号；其余行按位置从 ``start`` 开始编号。
    """
    for index, row in enumerate(iter_rows(data), start=start):
        yield _row_number(row.pop(ROW_NUMBER_KEY, None), index), row


def _row_number(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _is_polars_df(value: Any) -> bool:
    """Return True if the value is a Polars DataFrame.
    如果值是 Polars DataFrame 则返回 True。

    Polars is imported lazily so the core package works without it.
    按需延迟导入 polars，核心包无需安装它即可使用。
    """
    try:
        import polars as pl
    except ImportError:
        return False
    return isinstance(value, pl.DataFrame)
