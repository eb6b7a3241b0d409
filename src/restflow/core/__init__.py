"""核心模块导出."""

from restflow.core.constants import QueryStringCharacters, ReservedParams
from restflow.core.operators import (
    OPERATOR_LOOKUP,
    FilterOperator,
    LogicalOperator,
    NullsPosition,
    SortDirection,
)
from restflow.core.utils import (
    format_operand,
    join_values,
    render_fragment,
    render_query_string,
    resolve_operator,
    stringify,
    wrap_group,
)

__all__ = [
    "QueryStringCharacters",
    "ReservedParams",
    "OPERATOR_LOOKUP",
    "FilterOperator",
    "LogicalOperator",
    "NullsPosition",
    "SortDirection",
    "format_operand",
    "join_values",
    "render_fragment",
    "render_query_string",
    "resolve_operator",
    "stringify",
    "wrap_group",
]
