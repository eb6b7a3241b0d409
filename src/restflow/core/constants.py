"""restflow 常量定义模块."""


class QueryStringCharacters:
    """查询字符串语法相关字符常量."""

    # 资源名与参数之间
    QUERY_START = "?"
    # 顶层参数之间
    PARAM_SEPARATOR = "&"
    # 顶层 key 与 value 之间
    KEY_VALUE_SEPARATOR = "="
    # opcode 与值之间，以及片段模式下 key 与 value 之间
    DOT = "."
    # 数组值之间、片段内参数之间、排序字段之间
    LIST_SEPARATOR = ","
    GROUP_OPEN = "("
    GROUP_CLOSE = ")"
    # 否定前缀
    NOT_PREFIX = "not."


class ReservedParams:
    """保留的顶层参数名."""

    SELECT = "select"
    LIMIT = "limit"
    OFFSET = "offset"
    ORDER = "order"
