"""In-memory row cursor."""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, Optional

from sqlrelate.exceptions import DecodeError

__all__ = ("IterableRowCursor",)

_NO_ROW = object()


class IterableRowCursor:
    """Row cursor over an iterable of rows already fetched from a driver.

    Rows may be mappings (label to value) or sequences (values in column order).
    The iterable is consumed lazily, one row per :meth:`next`, so a generator
    source is never read past the rows actually decoded.
    """

    __slots__ = ("_columns", "_current", "_rows", "_rows_read", "closed")

    def __init__(
        self, rows: "Iterable[Mapping[str, Any] | Sequence[Any]]", columns: "Optional[Sequence[str]]" = None
    ) -> None:
        self._rows: Iterator[Any] = iter(rows)
        self._columns: Optional[tuple[str, ...]] = tuple(columns) if columns is not None else None
        self._current: Any = _NO_ROW
        self._rows_read = 0
        self.closed = False

    @property
    def row_number(self) -> int:
        return self._rows_read

    @property
    def columns(self) -> "tuple[str, ...]":
        if self._columns is None:
            if isinstance(self._current, Mapping):
                return tuple(self._current)
            return ()
        return self._columns

    def next(self) -> bool:
        if self.closed:
            msg = "Cannot advance a closed cursor"
            raise DecodeError(msg)
        row = next(self._rows, _NO_ROW)
        if row is _NO_ROW:
            self._current = _NO_ROW
            return False
        self._current = row
        self._rows_read += 1
        return True

    def get(self, column: "str | int") -> Any:
        if self._current is _NO_ROW:
            msg = "The cursor is not positioned on a row"
            raise DecodeError(msg)
        row = self._current
        if isinstance(column, int):
            if column < 1:
                raise IndexError(column)
            if isinstance(row, Mapping):
                return row[self.columns[column - 1]]
            return row[column - 1]
        if isinstance(row, Mapping):
            return row[column]
        columns = self.columns
        if column not in columns:
            raise KeyError(column)
        return row[columns.index(column)]

    def close(self) -> None:
        self.closed = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(row_number={self._rows_read!r}, closed={self.closed!r})"
