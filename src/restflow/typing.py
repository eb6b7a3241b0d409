"""restflow 类型定义模块."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from restflow.builders.endpoint import EndpointBuilder
    from restflow.builders.ordering import OrderBuilder

# 可转换为字符串的值（调用方提供，原样 str() 输出）
StringValue = Any

# 单个参数: (key, value)
Param = tuple[str, str]

# 有序参数列表，允许重复
Params = list[Param]

# 逻辑作用域回调: 接收新的 EndpointBuilder，返回（通常是同一个）EndpointBuilder
ScopeFunc = Callable[["EndpointBuilder"], "EndpointBuilder | None"]

# 排序回调: 接收新的 OrderBuilder，返回（通常是同一个）OrderBuilder
OrderFunc = Callable[["OrderBuilder"], "OrderBuilder | None"]
