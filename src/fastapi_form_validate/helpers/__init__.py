"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-18
@Docs: Helper utilities.
辅助工具。
"""

from fastapi_form_validate.helpers.rows import ROW_NUMBER_KEY, iter_numbered_rows, iter_rows

__all__ = ["ROW_NUMBER_KEY", "iter_numbered_rows", "iter_rows"]
