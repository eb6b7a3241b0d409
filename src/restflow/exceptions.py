"""restflow 异常定义模块."""


class RestFlowError(Exception):
    """restflow 基础异常类."""

    pass


class UnsupportedOperatorError(RestFlowError):
    """不支持的操作符异常."""

    pass


class InvalidScopeError(RestFlowError):
    """作用域回调返回了非预期对象的异常."""

    pass
