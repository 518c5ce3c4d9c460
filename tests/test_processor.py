"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_processor.py
@DateTime: 2026-10-18
@Docs: Tests for processor.py module.
processor.py 模块测试。
"""

import re
from typing import Any

from fastapi_form_validate.actions import Single
from fastapi_form_validate.processor import RulePair, pairs_from_sequence, process


class TestPairsFromSequence:
    """Tests for pairs_from_sequence.
    pairs_from_sequence 测试。
    """

    def test_declaration_order_kept(self) -> None:
        def f1(v: Any) -> Any:
            return v

        def f2(v: Any) -> Any:
            return v

        pairs = pairs_from_sequence(["b", f1, "a", f2], slot="filters")
        assert [p.action for p in pairs] == [Single(f1), Single(f2)]
        assert [p.pattern.name for p in pairs] == ["b", "a"]  # type: ignore[union-attr]

    def test_empty(self) -> None:
        assert pairs_from_sequence([], slot="checks") == ()

    def test_unsupported_pattern_never_matches(self) -> None:
        (pair,) = pairs_from_sequence([7, lambda v: v], slot="filters")
        assert pair.pattern is None
        assert not pair.matches("7")


class TestFilterPass:
    """Tests for process() in filter mode.
    过滤模式 process() 测试。
    """

    def test_threads_through_matching_pairs(self) -> None:
        """Several independent pairs transform the same field in order / 多个规则对按顺序转换同一字段。"""
        pairs = pairs_from_sequence(
            [
                re.compile(r".+"), lambda v: v.strip(),
                "name", lambda v: v.title(),
                "other", lambda v: "never",
                ["name", "x"], lambda v: f"<{v}>",
            ],
            slot="filters",
        )
        assert process(pairs, {"name": "  ann lee "}, "name") == "<Ann Lee>"

    def test_no_match_returns_value(self) -> None:
        pairs = pairs_from_sequence(["other", lambda v: "changed"], slot="filters")
        assert process(pairs, {"name": "same"}, "name") == "same"

    def test_reads_from_given_mapping(self) -> None:
        pairs = pairs_from_sequence(["a", lambda v: v * 2], slot="filters")
        assert process(pairs, {"a": 3}, "a") == 6


class TestCheckPass:
    """Tests for process() in check mode.
    校验模式 process() 测试。
    """

    def test_first_error_in_declaration_order(self, recorder: Any) -> None:
        later = recorder(result="later")
        pairs = pairs_from_sequence(
            [
                "a", lambda v, d, f: None,
                re.compile("a"), lambda v, d, f: "first",
                "a", later,
            ],
            slot="checks",
        )
        assert process(pairs, {"a": "x"}, "a", check=True) == "first"
        assert later.calls == []

    def test_no_error_is_none(self) -> None:
        pairs = pairs_from_sequence(["a", lambda v, d, f: None], slot="checks")
        assert process(pairs, {"a": "x"}, "a", check=True) is None

    def test_absent_field_gets_none(self, recorder: Any) -> None:
        check = recorder(result=None)
        pairs = (RulePair(pattern=None, action=Single(check)),) + pairs_from_sequence(["a", check], slot="checks")
        data = {"b": 1}
        process(pairs, data, "a", check=True)
        assert check.calls == [(None, data, "a")]
