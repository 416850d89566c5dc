"""Generic DB-API 2.0 adapter.

Provides a parameter buffer that satisfies
:class:`~sqlrelate.protocols.PositionalStatement` and is handed to
``cursor.execute`` as a tuple, a row cursor over a DB-API cursor, and
:class:`NamedQuery`, which runs one named statement end to end.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional

from typing_extensions import TypeVar

from sqlrelate.binding.statement import StatementBinder
from sqlrelate.exceptions import DecodeError, ParameterError
from sqlrelate.parameters.config import BinderConfig
from sqlrelate.parameters.converter import ParameterConverter
from sqlrelate.utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlrelate.parameters.converter import PreparedSQL
    from sqlrelate.parameters.types import ListParam, SqlType, TupleParam
    from sqlrelate.protocols import RowParser

__all__ = (
    "SQLITE_CONFIG",
    "DBAPIConfig",
    "DBAPIRowCursor",
    "DBAPIStatement",
    "NamedQuery",
)

logger = get_logger("adapters.dbapi")

T = TypeVar("T")

BindCallback = Callable[[StatementBinder], None]

_UNSET = object()


class DBAPIConfig:
    """Driver-specific parameter handling."""

    __slots__ = ("binder_config", "type_coercion_map")

    def __init__(
        self,
        type_coercion_map: "Optional[Mapping[type, Callable[[Any], Any]]]" = None,
        binder_config: Optional[BinderConfig] = None,
    ) -> None:
        """Initialize adapter configuration.

        Args:
            type_coercion_map: Converters applied to encoded values before they reach the
                driver, keyed by exact value type first and then by base class.
            binder_config: Configuration for the binder created by :class:`NamedQuery`.
        """
        self.type_coercion_map = dict(type_coercion_map or {})
        self.binder_config = binder_config

    def coerce(self, value: Any) -> Any:
        if not self.type_coercion_map:
            return value
        converter = self.type_coercion_map.get(type(value))
        if converter is None:
            for value_type, candidate in self.type_coercion_map.items():
                if isinstance(value, value_type):
                    converter = candidate
                    break
        return value if converter is None else converter(value)

    def hash(self) -> int:
        return hash((tuple(self.type_coercion_map), self.binder_config))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.type_coercion_map == other.type_coercion_map and self.binder_config == other.binder_config

    def __hash__(self) -> int:
        return self.hash()

    def __repr__(self) -> str:
        coerced = sorted(value_type.__name__ for value_type in self.type_coercion_map)
        return f"{type(self).__name__}(type_coercion_map={coerced!r}, binder_config={self.binder_config!r})"


def _datetime_to_iso(value: datetime) -> str:
    return value.isoformat(sep=" ")


SQLITE_CONFIG = DBAPIConfig(
    type_coercion_map={
        bool: int,
        Decimal: str,
        datetime: _datetime_to_iso,
        date: date.isoformat,
    }
)


class DBAPIStatement:
    """Fixed-size positional parameter buffer.

    Positions are 1-based. Every position must be set before the buffer is
    turned into driver parameters.
    """

    __slots__ = ("_values", "config", "null_types")

    def __init__(self, size: int, config: Optional[DBAPIConfig] = None) -> None:
        if size < 0:
            msg = f"Parameter count must be non-negative, got {size}"
            raise ValueError(msg)
        self.config = config or DBAPIConfig()
        self._values: list[Any] = [_UNSET] * size
        self.null_types: dict[int, SqlType] = {}

    @property
    def size(self) -> int:
        return len(self._values)

    def _check(self, position: int) -> int:
        if not 1 <= position <= len(self._values):
            msg = f"Parameter position {position} is out of range 1..{len(self._values)}"
            raise ParameterError(msg)
        return position - 1

    def set_value(self, position: int, value: Any) -> None:
        index = self._check(position)
        self._values[index] = self.config.coerce(value)
        self.null_types.pop(position, None)

    def set_null(self, position: int, sql_type: "SqlType") -> None:
        index = self._check(position)
        self._values[index] = None
        self.null_types[position] = sql_type

    def value(self, position: int) -> Any:
        value = self._values[self._check(position)]
        return None if value is _UNSET else value

    def is_set(self, position: int) -> bool:
        return self._values[self._check(position)] is not _UNSET

    def parameters(self) -> "tuple[Any, ...]":
        """Return the driver parameter tuple.

        Raises:
            ParameterError: If any position was never set.
        """
        unset = [index + 1 for index, value in enumerate(self._values) if value is _UNSET]
        if unset:
            msg = f"Parameters at positions {unset} were never bound"
            raise ParameterError(msg)
        return tuple(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size!r}, nulls={len(self.null_types)!r})"


class DBAPIRowCursor:
    """Row cursor over a DB-API cursor that has executed a query.

    Rows are fetched one at a time with ``fetchone`` so a limited decode never
    pulls more rows from the driver than it reads.
    """

    __slots__ = ("_columns", "_current", "_row_number", "closed", "cursor")

    def __init__(self, cursor: Any) -> None:
        self.cursor = cursor
        description: Optional[Sequence[Sequence[Any]]] = cursor.description
        self._columns: tuple[str, ...] = tuple(column[0] for column in description or ())
        self._current: Optional[Sequence[Any]] = None
        self._row_number = 0
        self.closed = False

    @property
    def row_number(self) -> int:
        return self._row_number

    @property
    def columns(self) -> "tuple[str, ...]":
        return self._columns

    def next(self) -> bool:
        if self.closed:
            msg = "Cannot advance a closed cursor"
            raise DecodeError(msg)
        row = self.cursor.fetchone()
        self._current = row
        if row is None:
            return False
        self._row_number += 1
        return True

    def get(self, column: "str | int") -> Any:
        if self._current is None:
            msg = "The cursor is not positioned on a row"
            raise DecodeError(msg)
        if isinstance(column, int):
            if column < 1:
                raise IndexError(column)
            return self._current[column - 1]
        if column not in self._columns:
            raise KeyError(column)
        return self._current[self._columns.index(column)]

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.cursor.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(row_number={self._row_number!r}, closed={self.closed!r})"


class NamedQuery:
    """A named SQL statement prepared for a DB-API connection.

    Example:
        >>> query = NamedQuery("SELECT name FROM users WHERE id IN (:ids)", [ListParam("ids", 2)])
        >>> names = query.execute_query(conn, collection(STRING), lambda b: b.ints("ids", [1, 2]))
    """

    __slots__ = ("config", "prepared")

    def __init__(
        self,
        sql: str,
        list_params: "Optional[Iterable[ListParam]]" = None,
        tuple_params: "Optional[Iterable[TupleParam]]" = None,
        config: Optional[DBAPIConfig] = None,
        converter: Optional[ParameterConverter] = None,
    ) -> None:
        self.config = config or DBAPIConfig()
        self.prepared: PreparedSQL = (converter or ParameterConverter()).prepare(sql, list_params, tuple_params)

    @property
    def sql(self) -> str:
        return self.prepared.sql

    def bind(self, bind: Optional[BindCallback] = None) -> DBAPIStatement:
        """Run ``bind`` against a fresh parameter buffer and return the buffer."""
        statement = DBAPIStatement(self.prepared.parameter_count, self.config)
        if bind is not None:
            bind(StatementBinder(statement, self.prepared.table, self.config.binder_config))
        return statement

    def _execute(self, connection: Any, bind: Optional[BindCallback]) -> Any:
        parameters = self.bind(bind).parameters()
        cursor = connection.cursor()
        try:
            cursor.execute(self.prepared.sql, parameters)
        except Exception:
            cursor.close()
            raise
        log_with_context(logger, logging.DEBUG, "Executed statement", parameter_count=len(parameters))
        return cursor

    def execute_query(self, connection: Any, parser: "RowParser[T]", bind: Optional[BindCallback] = None) -> T:
        """Execute the query and decode its rows with ``parser``.

        The driver cursor is closed once ``parser`` returns or raises.
        """
        cursor = self._execute(connection, bind)
        try:
            rows = DBAPIRowCursor(cursor)
        except Exception:
            cursor.close()
            raise
        return parser.parse(rows)

    def execute_update(self, connection: Any, bind: Optional[BindCallback] = None) -> int:
        """Execute a DML statement and return the driver's row count."""
        cursor = self._execute(connection, bind)
        try:
            rowcount = cursor.rowcount
        finally:
            cursor.close()
        return rowcount if isinstance(rowcount, int) and rowcount > 0 else 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sql={self.prepared.sql!r})"
