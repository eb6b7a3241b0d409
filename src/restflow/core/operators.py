"""restflow 操作符定义模块."""

from enum import Enum


class FilterOperator(str, Enum):
    """过滤操作符，值即为写入参数值的 opcode."""

    EQUAL = "eq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    LIKE = "like"
    MATCH = "match"
    ILIKE = "ilike"  # 大小写不敏感
    IMATCH = "imatch"
    IS = "is"
    IN = "in"  # 数组操作符
    NOT_EQUAL = "not.eq"
    NOT_GT = "not.gt"
    NOT_GTE = "not.gte"
    NOT_LT = "not.lt"
    NOT_LTE = "not.lte"
    NOT_LIKE = "not.like"
    NOT_MATCH = "not.match"
    NOT_ILIKE = "not.ilike"
    NOT_IMATCH = "not.imatch"
    NOT_IS = "not.is"
    NOT_IN = "not.in"

    @property
    def is_array(self) -> bool:
        """是否为数组操作符（接收多个值）."""
        return self in (FilterOperator.IN, FilterOperator.NOT_IN)

    @property
    def negated(self) -> "FilterOperator":
        """返回取反后的操作符."""
        if self.value.startswith("not."):
            return FilterOperator(self.value[len("not.") :])
        return FilterOperator(f"not.{self.value}")


class LogicalOperator(str, Enum):
    """逻辑组合操作符，值即为参数 key."""

    AND = "and"
    OR = "or"
    NOT_AND = "not.and"
    NOT_OR = "not.or"


class SortDirection(str, Enum):
    """排序方向."""

    ASC = "asc"
    DESC = "desc"


class NullsPosition(str, Enum):
    """空值排序位置."""

    FIRST = "nullsfirst"
    LAST = "nullslast"


# 外部操作符名称到 FilterOperator 的映射
# opcode 本身（"eq"、"not.in" 等）总是可以直接使用，这里只列出别名
OPERATOR_LOOKUP = {
    "equal": FilterOperator.EQUAL,
    "equals": FilterOperator.EQUAL,
    "not_equal": FilterOperator.NOT_EQUAL,
    "neq": FilterOperator.NOT_EQUAL,
    "greater_than": FilterOperator.GT,
    "greater_than_or_equal": FilterOperator.GTE,
    "less_than": FilterOperator.LT,
    "less_than_or_equal": FilterOperator.LTE,
    "contains": FilterOperator.LIKE,
    "not_contains": FilterOperator.NOT_LIKE,
    "icontains": FilterOperator.ILIKE,
    "not_icontains": FilterOperator.NOT_ILIKE,
    "regex": FilterOperator.MATCH,
    "not_regex": FilterOperator.NOT_MATCH,
    "iregex": FilterOperator.IMATCH,
    "not_iregex": FilterOperator.NOT_IMATCH,
    "not_in": FilterOperator.NOT_IN,
    "nin": FilterOperator.NOT_IN,
    "is_not": FilterOperator.NOT_IS,
}
