"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: validation_core.py
@DateTime: 2026-10-18
@Docs: Row-level error items for batch validation.
批量校验的行级错误项。

Turns per-field error mappings into flat, row-numbered error items:
将按字段的错误映射转换为带行号的扁平错误项：

    {"row_number": 3, "field": "email", "message": "Required", "type": "check"}
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class ErrorCollector:
    """Collect errors from row validations.
    从行校验中收集错误。
    """

    errors: list[dict[str, Any]] = field(default_factory=list)

    def add(
        self,
        *,
        row_number: int,
        field: str | None,
        message: Any,
        value: Any | None = None,
        type: str | None = None,
    ) -> None:
        """Add an error item.
        添加一个错误项。

        Args:
            row_number: Row number.
                行号。
            field: Field name (optional).
                字段名（可选，默认值为 None）。
            message: Error message as returned by the check.
                校验返回的错误消息。
            value: Related value (optional).
                相关值（可选，默认值为 None）。
            type: Error type (optional).
                错误类型（可选，默认值为 None）。
        """
        item: dict[str, Any] = {"row_number": int(row_number), "field": field, "message": message}
        if value is not None:
            item["value"] = value
        if type is not None:
            item["type"] = type
        self.errors.append(item)

    def add_row(
        self,
        *,
        row_number: int,
        error: Mapping[str, Any],
        data: Mapping[str, Any],
        type: str = "check",
    ) -> None:
        """Add one item per failing field of a row.
        为一行中每个失败字段添加一个错误项。

        Args:
            row_number: Row number.
                行号。
            error: Field to message mapping from a validation outcome.
                校验结果中的字段到消息映射。
            data: Filtered data of the row, used for the ``value`` key.
                该行过滤后的数据，用于 ``value`` 键。
            type: Error type.
                错误类型。
        """
        for name, message in error.items():
            self.add(row_number=row_number, field=name, message=message, value=data.get(name), type=type)
