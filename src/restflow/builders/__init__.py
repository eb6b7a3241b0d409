"""构建器模块导出."""

from restflow.builders.endpoint import (
    EndpointBuilder,
    InsensitiveOperations,
    NegatedLogicalOperations,
    NegatedPropertyOperations,
    PropertyOperations,
    endpoint,
)
from restflow.builders.ordering import OrderBuilder, OrderFlags, OrderProperty

__all__ = [
    "EndpointBuilder",
    "PropertyOperations",
    "NegatedPropertyOperations",
    "InsensitiveOperations",
    "NegatedLogicalOperations",
    "endpoint",
    "OrderBuilder",
    "OrderProperty",
    "OrderFlags",
]
