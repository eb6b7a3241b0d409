"""
restflow 工具函数模块

提供参数序列化相关的工具函数
"""

from collections.abc import Iterable
from typing import overload

from restflow.core.constants import QueryStringCharacters as Chars
from restflow.core.operators import OPERATOR_LOOKUP, FilterOperator
from restflow.exceptions import UnsupportedOperatorError
from restflow.typing import Param, StringValue


@overload
def stringify(value: StringValue, many: bool = False) -> str: ...


@overload
def stringify(value: Iterable[StringValue], many: bool = True) -> list[str]: ...


def stringify(value, many=False):
    """
    将调用方提供的值转换为字符串。

    值被视为不透明数据，不做任何转义或编码，仅调用 str()。

    示例:
        >>> stringify(18)
        '18'
        >>> stringify([1, "a"], many=True)
        ['1', 'a']

    Args:
        value: 单个值，或 many=True 时的值序列
        many: 是否批量转换

    Returns:
        字符串，或字符串列表
    """
    if many:
        return [str(v) for v in value]
    return str(value)


def join_values(values: Iterable[StringValue]) -> str:
    """用逗号连接多个值: ("a", 1) -> "a,1"."""
    return Chars.LIST_SEPARATOR.join(stringify(values, many=True))


def wrap_group(text: str) -> str:
    """用一对括号包裹: "a,b" -> "(a,b)"."""
    return f"{Chars.GROUP_OPEN}{text}{Chars.GROUP_CLOSE}"


def format_operand(operator: FilterOperator | str, value: StringValue) -> str:
    """构建 "<opcode>.<value>" 形式的参数值."""
    opcode = operator.value if isinstance(operator, FilterOperator) else operator
    return f"{opcode}{Chars.DOT}{stringify(value)}"


def render_query_string(name: StringValue, params: Iterable[Param]) -> str:
    """
    构建顶层查询字符串.

    示例:
        >>> render_query_string("people", [("age", "gt.18"), ("limit", "10")])
        'people?age=gt.18&limit=10'
        >>> render_query_string("people", [])
        'people?'
    """
    query = Chars.PARAM_SEPARATOR.join(
        f"{key}{Chars.KEY_VALUE_SEPARATOR}{value}" for key, value in params
    )
    return f"{stringify(name)}{Chars.QUERY_START}{query}"


def render_fragment(params: Iterable[Param]) -> str:
    """
    构建逻辑组合内部使用的片段.

    每个参数渲染为 key.value，逗号连接后整体用一对括号包裹。
    当 value 本身以 "(" 开头（即嵌套的逻辑组合）时，key 与 value 之间的 "."
    被折叠，直接渲染为 key(...)；操作符内部的括号值（如 in.(1,2)）保持原样。
    值内部出现的 ".(" 不做任何改写。

    示例:
        >>> render_fragment([("age", "gt.18"), ("id", "in.(1,2)")])
        '(age.gt.18,id.in.(1,2))'
        >>> render_fragment([("or", "(a.eq.1,b.eq.2)")])
        '(or(a.eq.1,b.eq.2))'
    """
    parts = []
    for key, value in params:
        if value.startswith(Chars.GROUP_OPEN):
            parts.append(f"{key}{value}")
        else:
            parts.append(f"{key}{Chars.DOT}{value}")
    return wrap_group(Chars.LIST_SEPARATOR.join(parts))


def resolve_operator(operator: FilterOperator | str) -> FilterOperator:
    """
    将外部操作符名称解析为 FilterOperator.

    支持 FilterOperator 成员、opcode（"eq"、"not.in"）以及 OPERATOR_LOOKUP 中的别名，
    名称不区分大小写。

    Raises:
        UnsupportedOperatorError: 无法识别的操作符名称
    """
    if isinstance(operator, FilterOperator):
        return operator

    name = str(operator).strip().lower()
    if name in OPERATOR_LOOKUP:
        return OPERATOR_LOOKUP[name]
    try:
        return FilterOperator(name)
    except ValueError:
        raise UnsupportedOperatorError(f"Unsupported operator: {operator}") from None
