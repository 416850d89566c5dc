"""Binder for one row of a tuple placeholder."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlrelate.binding._mixins import ScalarSettersMixin, encode_parameter
from sqlrelate.exceptions import UnknownParameterError

if TYPE_CHECKING:
    from sqlrelate.binding.types import ScalarType
    from sqlrelate.parameters.types import SqlType
    from sqlrelate.protocols import PositionalStatement

__all__ = ("TupleBinder",)


class TupleBinder(ScalarSettersMixin):
    """Sets the columns of one row in a multi-row insert.

    Positions are ``index + params[column]``: ``index`` is the 1-based position
    where the row starts and ``params`` maps each column to its 0-based offset
    inside the row. A row has a closed set of columns, so an unknown column
    always raises.
    """

    __slots__ = ("index", "params", "statement")

    def __init__(self, statement: "PositionalStatement", params: "Mapping[str, int]", index: int) -> None:
        self.statement = statement
        self.params = params
        self.index = index

    def _position(self, name: str) -> int:
        try:
            return self.index + self.params[name]
        except KeyError:
            msg = f"Column {name!r} is not part of the tuple; expected one of {sorted(self.params)!r}"
            raise UnknownParameterError(msg) from None

    def set(self, name: str, value: Any, scalar: "ScalarType[Any]") -> None:
        self.statement.set_value(self._position(name), encode_parameter(name, value, scalar))

    def set_null(self, name: str, sql_type: "SqlType") -> None:
        self.statement.set_null(self._position(name), sql_type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self.index!r}, params={dict(self.params)!r})"
