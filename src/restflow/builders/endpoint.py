"""表达式构建器模块."""

from __future__ import annotations

import logging
from collections.abc import Callable

from restflow.builders.ordering import OrderBuilder
from restflow.core.constants import ReservedParams
from restflow.core.operators import FilterOperator, LogicalOperator
from restflow.core.utils import (
    format_operand,
    join_values,
    render_fragment,
    render_query_string,
    resolve_operator,
    stringify,
    wrap_group,
)
from restflow.exceptions import InvalidScopeError
from restflow.typing import OrderFunc, Params, ScopeFunc, StringValue

logger = logging.getLogger(__name__)


class InsensitiveOperations:
    """大小写不敏感的 like/match 操作符."""

    def __init__(self, operations: _PropertyOperators):
        self._operations = operations

    def like(self, value: StringValue) -> EndpointBuilder:
        return self._operations.apply(FilterOperator.ILIKE, value)

    def match(self, value: StringValue) -> EndpointBuilder:
        return self._operations.apply(FilterOperator.IMATCH, value)


class _PropertyOperators:
    """
    单个字段上的操作符集合.

    每个操作符向所属 EndpointBuilder 追加一个 (字段, "<opcode>.<值>") 参数，
    并返回 EndpointBuilder 以便继续链式调用。
    """

    _negated = False

    def __init__(self, builder: EndpointBuilder, prop: StringValue):
        self._builder = builder
        self._prop = stringify(prop)
        self.insensitive = InsensitiveOperations(self)

    def equals(self, value: StringValue) -> EndpointBuilder:
        return self.apply(FilterOperator.EQUAL, value)

    def greater_than(self, value: StringValue) -> EndpointBuilder:
        return self.apply(FilterOperator.GT, value)

    def greater_than_or_equal(self, value: StringValue) -> EndpointBuilder:
        return self.apply(FilterOperator.GTE, value)

    def less_than(self, value: StringValue) -> EndpointBuilder:
        return self.apply(FilterOperator.LT, value)

    def less_than_or_equal(self, value: StringValue) -> EndpointBuilder:
        return self.apply(FilterOperator.LTE, value)

    def like(self, value: StringValue) -> EndpointBuilder:
        return self.apply(FilterOperator.LIKE, value)

    def match(self, value: StringValue) -> EndpointBuilder:
        return self.apply(FilterOperator.MATCH, value)

    def is_(self, value: StringValue) -> EndpointBuilder:
        return self.apply(FilterOperator.IS, value)

    def in_(self, *values: StringValue) -> EndpointBuilder:
        """追加 (字段, "in.(v1,v2,...)")."""
        return self.apply(FilterOperator.IN, *values)

    def apply(
        self, operator: FilterOperator | str, *values: StringValue
    ) -> EndpointBuilder:
        """
        按操作符名称追加过滤条件.

        Args:
            operator: FilterOperator 成员、opcode 或 OPERATOR_LOOKUP 中的别名
            *values: 数组操作符（in）接收任意个值，其他操作符只接收一个值

        Returns:
            所属 EndpointBuilder

        Raises:
            UnsupportedOperatorError: 无法识别的操作符
            ValueError: 非数组操作符的值个数不为 1
        """
        operator = resolve_operator(operator)
        if self._negated:
            operator = operator.negated

        if operator.is_array:
            value = wrap_group(join_values(values))
        elif len(values) == 1:
            value = stringify(values[0])
        else:
            raise ValueError(
                f"{operator.value} operator requires exactly 1 value, got {len(values)}"
            )

        return self._builder._push(self._prop, format_operand(operator, value))


class NegatedPropertyOperations(_PropertyOperators):
    """取反的操作符集合，opcode 带 "not." 前缀."""

    _negated = True


class PropertyOperations(_PropertyOperators):
    """
    字段操作符句柄，由 EndpointBuilder.property() 返回.

    使用示例:
        endpoint("people").property("age").greater_than(18)
        # people?age=gt.18

        endpoint("people").property("id").not_.in_(1, 2)
        # people?id=not.in.(1,2)
    """

    def __init__(self, builder: EndpointBuilder, prop: StringValue):
        super().__init__(builder, prop)
        self.not_ = NegatedPropertyOperations(builder, prop)


class NegatedLogicalOperations:
    """取反的逻辑组合操作符: not.and / not.or."""

    def __init__(self, builder: EndpointBuilder):
        self._builder = builder

    def and_(self, fn: ScopeFunc) -> EndpointBuilder:
        return self._builder._logical(LogicalOperator.NOT_AND, fn)

    def or_(self, fn: ScopeFunc) -> EndpointBuilder:
        return self._builder._logical(LogicalOperator.NOT_OR, fn)


class EndpointBuilder:
    """
    表达式构建器.

    按调用顺序累积 (key, value) 参数，序列化为查询字符串，
    或在逻辑组合内部序列化为带括号的片段。

    使用示例:
        builder = endpoint("people")
        (
            builder
            .select("id", "name")
            .property("age").greater_than_or_equal(18)
            .or_(lambda e: e.property("role").equals("admin").property("vip").is_("true"))
            .order(lambda o: o.property("name").ascending())
            .limit(20)
        )

        builder.to_query_string()
        # 输出: people?select=id,name&age=gte.18&or=(role.eq.admin,vip.is.true)&order=name.asc&limit=20
    """

    def __init__(self, name: StringValue = ""):
        """
        初始化构建器.

        Args:
            name: 资源名，嵌套作用域为空字符串
        """
        self._name = stringify(name)
        self._params: Params = []

    @property
    def name(self) -> str:
        """资源名."""
        return self._name

    @property
    def params(self) -> Params:
        """已累积参数的副本."""
        return list(self._params)

    @property
    def not_(self) -> NegatedLogicalOperations:
        """取反的逻辑组合操作符."""
        return NegatedLogicalOperations(self)

    def _push(self, key: str, value: str) -> EndpointBuilder:
        self._params.append((key, value))
        return self

    def property(self, prop: StringValue) -> PropertyOperations:
        """获取字段操作符句柄."""
        return PropertyOperations(self, prop)

    def where(
        self,
        prop: StringValue,
        operator: FilterOperator | str,
        *values: StringValue,
    ) -> EndpointBuilder:
        """
        添加过滤条件.

        等价于 property(prop).apply(operator, *values)。

        示例:
            endpoint("people").where("age", "gte", 18).where("id", "not_in", 1, 2)
            # people?age=gte.18&id=not.in.(1,2)
        """
        return self.property(prop).apply(operator, *values)

    def select(self, *props: StringValue) -> EndpointBuilder:
        return self._push(ReservedParams.SELECT, join_values(props))

    def limit(self, amount: StringValue) -> EndpointBuilder:
        return self._push(ReservedParams.LIMIT, stringify(amount))

    def offset(self, amount: StringValue) -> EndpointBuilder:
        return self._push(ReservedParams.OFFSET, stringify(amount))

    def order(self, fn: OrderFunc) -> EndpointBuilder:
        """
        添加排序参数.

        Args:
            fn: 接收新的 OrderBuilder 并返回它的函数

        Raises:
            InvalidScopeError: fn 返回了非 OrderBuilder 对象
        """
        result = _run_scope(fn, OrderBuilder(), OrderBuilder)
        return self._push(ReservedParams.ORDER, result.to_string())

    def and_(self, fn: ScopeFunc) -> EndpointBuilder:
        return self._logical(LogicalOperator.AND, fn)

    def or_(self, fn: ScopeFunc) -> EndpointBuilder:
        return self._logical(LogicalOperator.OR, fn)

    def _logical(self, operator: LogicalOperator, fn: ScopeFunc) -> EndpointBuilder:
        """在新的空名作用域中执行 fn，并以片段形式追加到当前参数列表."""
        result = _run_scope(fn, EndpointBuilder(""), EndpointBuilder)
        fragment = result.to_fragment()
        logger.debug("Built %s fragment: %s", operator.value, fragment)
        return self._push(operator.value, fragment)

    def to_query_string(self) -> str:
        """序列化为 "<name>?k1=v1&k2=v2"."""
        return render_query_string(self._name, self._params)

    def to_fragment(self) -> str:
        """序列化为逻辑组合内部使用的 "(k1.v1,k2.v2)" 片段."""
        return render_fragment(self._params)

    def clear(self) -> EndpointBuilder:
        """清空所有参数."""
        self._params.clear()
        return self

    def __str__(self) -> str:
        return self.to_query_string()

    def __repr__(self) -> str:
        return f"<EndpointBuilder: {self.to_query_string()}>"

    def __bool__(self) -> bool:
        return bool(self._params)


def endpoint(name: StringValue) -> EndpointBuilder:
    """创建绑定到资源名的 EndpointBuilder."""
    return EndpointBuilder(name)


def _run_scope(fn: Callable, scope, expected: type):
    """
    以 scope 调用 fn，返回 fn 构建完成的对象.

    fn 返回 None 时沿用传入的 scope。
    """
    result = fn(scope)
    if result is None:
        logger.debug(
            "%s scope function returned None, using the passed-in builder",
            expected.__name__,
        )
        return scope
    if not isinstance(result, expected):
        raise InvalidScopeError(
            f"Scope function must return {expected.__name__}, "
            f"got {type(result).__name__}"
        )
    return result
