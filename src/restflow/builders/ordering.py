"""排序子句构建器模块."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable

from restflow.core.constants import QueryStringCharacters as Chars
from restflow.core.operators import NullsPosition, SortDirection
from restflow.core.utils import stringify
from restflow.exceptions import UnsupportedOperatorError
from restflow.typing import StringValue

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class OrderFlags:
    """单个字段的排序标记.

    ascending/descending 互斥，nulls_first/nulls_last 互斥，
    由 OrderProperty 的方法维护。
    """

    ascending: bool = False
    descending: bool = False
    nulls_first: bool = False
    nulls_last: bool = False

    def is_empty(self) -> bool:
        """所有标记均为 False."""
        return not (
            self.ascending or self.descending or self.nulls_first or self.nulls_last
        )

    def render(self, name: str) -> str:
        """渲染为 name[.asc|.desc][.nullslast|.nullsfirst]."""
        parts = [name]
        if self.ascending:
            parts.append(SortDirection.ASC.value)
        if self.descending:
            parts.append(SortDirection.DESC.value)
        if self.nulls_last:
            parts.append(NullsPosition.LAST.value)
        if self.nulls_first:
            parts.append(NullsPosition.FIRST.value)
        return Chars.DOT.join(parts)


class OrderProperty:
    """
    单个字段的排序操作句柄.

    每个方法修改所属 OrderBuilder 中该字段的标记，并返回 OrderBuilder 本身，
    以便继续 .property(...) 链式调用。
    """

    def __init__(self, owner: OrderBuilder, flags: OrderFlags):
        self._owner = owner
        self._flags = flags

    def ascending(self) -> OrderBuilder:
        """升序，清除降序标记."""
        self._flags.descending = False
        self._flags.ascending = True
        return self._activate()

    def descending(self) -> OrderBuilder:
        """降序，清除升序标记."""
        self._flags.ascending = False
        self._flags.descending = True
        return self._activate()

    def nulls_first(self) -> OrderBuilder:
        """空值在前，清除 nulls_last 标记."""
        self._flags.nulls_last = False
        self._flags.nulls_first = True
        return self._activate()

    def nulls_last(self) -> OrderBuilder:
        """空值在后，清除 nulls_first 标记."""
        self._flags.nulls_first = False
        self._flags.nulls_last = True
        return self._activate()

    def direction(self, direction: SortDirection | str) -> OrderBuilder:
        """按 SortDirection（或 "asc"/"desc"）设置排序方向."""
        if _coerce(SortDirection, direction) is SortDirection.ASC:
            return self.ascending()
        return self.descending()

    def nulls(self, position: NullsPosition | str) -> OrderBuilder:
        """按 NullsPosition（或 "nullsfirst"/"nullslast"）设置空值位置."""
        if _coerce(NullsPosition, position) is NullsPosition.FIRST:
            return self.nulls_first()
        return self.nulls_last()

    def _activate(self) -> OrderBuilder:
        """将当前句柄设为所属 OrderBuilder 的最近字段，并返回 OrderBuilder."""
        self._owner._current = self
        return self._owner


class OrderBuilder:
    """
    排序子句构建器.

    按字段首次出现的顺序累积排序标记，并序列化为逗号连接的排序子句。
    未设置任何标记的字段不会出现在输出中。

    使用示例:
        builder = OrderBuilder()
        builder.property("age").ascending().nulls_last().property("name").descending()

        builder.to_string()
        # 输出: age.asc.nullslast,name.desc
    """

    def __init__(self) -> None:
        self._fields: dict[str, OrderFlags] = {}
        # 最近一次 property() 返回或设置过标记的句柄，供 ascending() 等方法连续设置同一字段
        self._current: OrderProperty | None = None

    @classmethod
    def from_fields(cls, fields: Iterable[str]) -> OrderBuilder:
        """
        从字段列表构建排序.

        字段名前缀 "-" 表示降序，否则为升序。

        示例:
            OrderBuilder.from_fields(["-create_time", "name"]).to_string()
            # 输出: create_time.desc,name.asc
        """
        builder = cls()
        for field in fields:
            if field.startswith("-"):
                builder.property(field[1:]).descending()
            else:
                builder.property(field).ascending()
        return builder

    def property(
        self,
        name: StringValue,
        direction: SortDirection | str | None = None,
        nulls: NullsPosition | str | None = None,
    ) -> OrderProperty:
        """
        获取字段的排序句柄.

        首次提及的字段会被登记（标记全为 False），其顺序决定输出顺序。

        Args:
            name: 字段名
            direction: 可选，立即应用的排序方向
            nulls: 可选，立即应用的空值位置

        Returns:
            OrderProperty 句柄
        """
        key = stringify(name)
        flags = self._fields.setdefault(key, OrderFlags())
        handle = OrderProperty(self, flags)
        self._current = handle
        if direction is not None:
            handle.direction(direction)
        if nulls is not None:
            handle.nulls(nulls)
        return handle

    def ascending(self) -> OrderBuilder:
        """对最近提及的字段设置升序."""
        return self._toggle("ascending")

    def descending(self) -> OrderBuilder:
        """对最近提及的字段设置降序."""
        return self._toggle("descending")

    def nulls_first(self) -> OrderBuilder:
        """对最近提及的字段设置空值在前."""
        return self._toggle("nulls_first")

    def nulls_last(self) -> OrderBuilder:
        """对最近提及的字段设置空值在后."""
        return self._toggle("nulls_last")

    def _toggle(self, name: str) -> OrderBuilder:
        # 尚未提及任何字段时不产生排序
        if self._current is None:
            logger.debug("Ignored %s(): no property mentioned yet", name)
            return self
        return getattr(self._current, name)()

    def to_string(self) -> str:
        """序列化为排序子句."""
        result = Chars.LIST_SEPARATOR.join(
            flags.render(name)
            for name, flags in self._fields.items()
            if not flags.is_empty()
        )
        logger.debug("Serialized order clause: %s", result)
        return result

    def is_empty(self) -> bool:
        """没有任何字段会被输出."""
        return all(flags.is_empty() for flags in self._fields.values())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self.is_empty():
            return "<OrderBuilder: (empty)>"
        return f"<OrderBuilder: {self.to_string()}>"

    def __bool__(self) -> bool:
        return not self.is_empty()


def _coerce(enum_cls, value):
    """将枚举成员或其字符串值转换为枚举成员."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        raise UnsupportedOperatorError(
            f"Unsupported {enum_cls.__name__}: {value}"
        ) from None
