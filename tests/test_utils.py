"""工具函数和操作符单元测试."""

import pytest

from restflow.core import (
    FilterOperator,
    format_operand,
    join_values,
    render_fragment,
    render_query_string,
    resolve_operator,
    stringify,
)
from restflow.exceptions import UnsupportedOperatorError


class TestStringify:
    """stringify 测试类."""

    def test_single(self):
        """测试单个值."""
        assert stringify(18) == "18"

    def test_many(self):
        """测试批量转换."""
        assert stringify((1, "a", None), many=True) == ["1", "a", "None"]

    def test_join_values(self):
        """测试逗号连接."""
        assert join_values(["a", 1, 2.5]) == "a,1,2.5"


class TestRender:
    """渲染函数测试类."""

    def test_format_operand(self):
        """测试操作符值格式."""
        assert format_operand(FilterOperator.NOT_ILIKE, "a*") == "not.ilike.a*"
        assert format_operand("eq", 1) == "eq.1"

    def test_query_string(self):
        """测试顶层查询字符串."""
        params = [("age", "gt.18"), ("limit", "10")]
        assert render_query_string("people", params) == "people?age=gt.18&limit=10"

    def test_query_string_without_params(self):
        """测试无参数的查询字符串."""
        assert render_query_string("people", []) == "people?"

    def test_fragment(self):
        """测试片段."""
        params = [("age", "gt.18"), ("id", "in.(1,2)")]
        assert render_fragment(params) == "(age.gt.18,id.in.(1,2))"

    def test_fragment_collapses_nested_group(self):
        """测试嵌套组合在 key 与括号之间不保留点."""
        params = [("or", "(a.eq.1,b.eq.2)"), ("not.and", "(c.is.null)")]
        assert render_fragment(params) == "(or(a.eq.1,b.eq.2),not.and(c.is.null))"

    def test_empty_fragment(self):
        """测试空片段."""
        assert render_fragment([]) == "()"


class TestResolveOperator:
    """resolve_operator 测试类."""

    def test_enum_passthrough(self):
        """测试枚举成员原样返回."""
        assert resolve_operator(FilterOperator.GT) is FilterOperator.GT

    def test_opcode(self):
        """测试 opcode."""
        assert resolve_operator("not.in") is FilterOperator.NOT_IN

    def test_alias(self):
        """测试别名."""
        assert resolve_operator(" Not_Equal ") is FilterOperator.NOT_EQUAL

    def test_unsupported(self):
        """测试不支持的操作符."""
        with pytest.raises(UnsupportedOperatorError):
            resolve_operator("between")


class TestFilterOperator:
    """FilterOperator 测试类."""

    def test_negated(self):
        """测试取反."""
        assert FilterOperator.EQUAL.negated is FilterOperator.NOT_EQUAL
        assert FilterOperator.NOT_IN.negated is FilterOperator.IN

    def test_every_operator_has_negation(self):
        """测试所有操作符都有对应的取反形式."""
        for operator in FilterOperator:
            assert operator.negated.negated is operator

    def test_is_array(self):
        """测试数组操作符."""
        assert FilterOperator.IN.is_array
        assert FilterOperator.NOT_IN.is_array
        assert not FilterOperator.EQUAL.is_array
