"""restflow - PostgREST 风格查询字符串构建工具.

将过滤、逻辑组合、字段选择、排序和分页条件构建为
点分隔操作符语法的查询字符串（如 age=gt.18、id=not.in.(1,2)、order=name.asc.nullslast）。

主要功能:
    - EndpointBuilder: 构建查询字符串，支持 and/or/not 逻辑嵌套
    - OrderBuilder: 构建排序子句

使用示例:
    from restflow import endpoint

    query = (
        endpoint("people")
        .property("age").greater_than(18)
        .property("id").not_.in_(1, 2)
        .order(lambda o: o.property("name").ascending())
        .to_query_string()
    )
    # 输出: people?age=gt.18&id=not.in.(1,2)&order=name.asc
"""

__version__ = "0.1.0"

# 导出构建器
from restflow.builders import (
    EndpointBuilder,
    NegatedPropertyOperations,
    OrderBuilder,
    OrderProperty,
    PropertyOperations,
    endpoint,
)

# 导出操作符和枚举
from restflow.core import FilterOperator, LogicalOperator, NullsPosition, SortDirection

# 导出异常
from restflow.exceptions import (
    InvalidScopeError,
    RestFlowError,
    UnsupportedOperatorError,
)

__all__ = [
    # 版本
    "__version__",
    # 构建器
    "endpoint",
    "EndpointBuilder",
    "PropertyOperations",
    "NegatedPropertyOperations",
    "OrderBuilder",
    "OrderProperty",
    # 操作符和枚举
    "FilterOperator",
    "LogicalOperator",
    "SortDirection",
    "NullsPosition",
    # 异常
    "RestFlowError",
    "UnsupportedOperatorError",
    "InvalidScopeError",
]
