"""Named parameter binding onto a positional statement."""

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Optional

from typing_extensions import TypeVar

from sqlrelate.binding._mixins import ListSettersMixin, ScalarSettersMixin, encode_parameter
from sqlrelate.binding.tuples import TupleBinder
from sqlrelate.exceptions import ListParameterError, ParameterError, UnknownParameterError
from sqlrelate.parameters.config import DEFAULT_BINDER_CONFIG, BinderConfig
from sqlrelate.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlrelate.binding.types import ScalarType
    from sqlrelate.parameters.table import ParameterTable
    from sqlrelate.parameters.types import SqlType
    from sqlrelate.protocols import PositionalStatement

__all__ = ("StatementBinder",)

logger = get_logger("binding.statement")

RowT = TypeVar("RowT")


class StatementBinder(ScalarSettersMixin, ListSettersMixin):
    """Sets parameters by name on a positional statement.

    Names resolve through a :class:`~sqlrelate.parameters.table.ParameterTable`.
    A scalar is written at every position of its name. A list writes element
    ``i`` at ``base + i`` for every base position of its name.

    Binding a name that has no placeholder is a no-op unless the binder is
    configured as strict. Keep that in mind: with the default configuration a
    misspelled name silently leaves its placeholder unbound.

    List lengths are the caller's responsibility. Unless list length validation
    is enabled, a list shorter or longer than the declared count leaves
    positions unset or writes into the positions that follow the run.
    """

    __slots__ = ("config", "statement", "table")

    def __init__(
        self, statement: "PositionalStatement", table: "ParameterTable", config: Optional[BinderConfig] = None
    ) -> None:
        self.statement = statement
        self.table = table
        self.config = config or DEFAULT_BINDER_CONFIG

    def _resolve(self, name: str) -> "tuple[int, ...]":
        positions = self.table.positions(name)
        if not positions:
            self._unknown(name)
        return positions

    def _unknown(self, name: str) -> None:
        if self.config.strict:
            msg = f"No placeholder named {name!r}; known parameters are {sorted(self.table.names)!r}"
            raise UnknownParameterError(msg)
        logger.debug("Ignoring bind of unknown parameter %r", name)

    def set(self, name: str, value: Any, scalar: "ScalarType[Any]") -> None:
        """Bind ``value`` at every position of ``name``."""
        positions = self._resolve(name)
        if not positions:
            return
        encoded = encode_parameter(name, value, scalar)
        for position in positions:
            self.statement.set_value(position, encoded)

    def set_null(self, name: str, sql_type: "SqlType") -> None:
        """Bind a NULL of ``sql_type`` at every position of ``name``."""
        for position in self._resolve(name):
            self.statement.set_null(position, sql_type)

    def set_many(self, name: str, values: "Iterable[Any]", scalar: "ScalarType[Any]") -> None:
        """Bind a list value: element ``i`` goes to ``base + i`` for each base position."""
        if not self._resolve(name):
            return
        encoded = [encode_parameter(name, value, scalar) for value in values]
        self._check_length(name, len(encoded), self._declared_count(name))
        for position, index in self.table.list_positions(name, len(encoded)):
            self.statement.set_value(position, encoded[index])

    def tuples(self, name: str, rows: "Iterable[RowT]", bind_row: "Callable[[TupleBinder, RowT], None]") -> None:
        """Bind the rows of a tuple placeholder.

        ``bind_row`` is called once per row and occurrence of ``name`` with a
        :class:`TupleBinder` positioned at the start of that row.

        Raises:
            ParameterError: If ``name`` is a placeholder but not a tuple placeholder.
        """
        if not self._resolve(name):
            return
        param = self.table.tuple_param(name)
        if param is None:
            msg = f"Parameter {name!r} is not a tuple placeholder"
            raise ParameterError(msg)
        materialized = list(rows)
        self._check_length(name, len(materialized), param.count)
        for row_index, row in enumerate(materialized):
            for base in self.table.row_bases(name, row_index):
                bind_row(TupleBinder(self.statement, param.offsets, base), row)

    def _declared_count(self, name: str) -> Optional[int]:
        param = self.table.list_param(name)
        return None if param is None else param.count

    def _check_length(self, name: str, actual: int, declared: Optional[int]) -> None:
        if declared is None or actual == declared:
            return
        if self.config.validate_list_lengths:
            msg = f"Parameter {name!r} was declared with {declared} elements but {actual} were bound"
            raise ListParameterError(msg)
        logger.debug("Parameter %r declared with %d elements, bound with %d", name, declared, actual)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(table={self.table!r}, config={self.config!r})"
