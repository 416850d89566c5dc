"""Typed access to the current row of a cursor."""

from __future__ import annotations

import builtins
from typing import TYPE_CHECKING, Any, Optional

from typing_extensions import TypeAlias

from sqlrelate.binding.types import (
    BIG_DECIMAL,
    BIG_INT,
    BOOL,
    BYTE,
    BYTE_ARRAY,
    CHAR,
    DATE,
    DOUBLE,
    FLOAT,
    INT,
    LONG,
    SHORT,
    STRING,
    TIMESTAMP,
    UUID_TYPE,
)
from sqlrelate.exceptions import ColumnNotFoundError

if TYPE_CHECKING:
    import datetime
    from decimal import Decimal
    from uuid import UUID

    from typing_extensions import TypeVar

    from sqlrelate.binding.types import ScalarType
    from sqlrelate.protocols import RowCursor

    T = TypeVar("T")

__all__ = ("ColumnRef", "SqlRow")

ColumnRef: TypeAlias = "str | int"


class SqlRow:
    """View of the cursor's current row.

    The same instance is reused while the cursor advances, so decoders must not
    keep it beyond the call they receive it in. Getters take a column label or a
    1-based column index. Plain getters reject NULL; ``*_option`` getters
    return ``None`` for it.
    """

    __slots__ = ("cursor",)

    def __init__(self, cursor: RowCursor) -> None:
        self.cursor = cursor

    @property
    def row_number(self) -> builtins.int:
        return self.cursor.row_number

    @property
    def columns(self) -> tuple[str, ...]:
        return tuple(self.cursor.columns)

    def get(self, column: ColumnRef) -> Any:
        """Raw driver value of ``column``."""
        try:
            return self.cursor.get(column)
        except (KeyError, IndexError) as exc:
            msg = f"Column {column!r} is not in the result; available columns are {list(self.cursor.columns)!r}"
            raise ColumnNotFoundError(msg) from exc

    def __getitem__(self, column: ColumnRef) -> Any:
        return self.get(column)

    def is_null(self, column: ColumnRef) -> builtins.bool:
        return self.get(column) is None

    def as_dict(self) -> dict[str, Any]:
        """Column label to raw value mapping for the current row."""
        return {label: self.cursor.get(label) for label in self.cursor.columns}

    def scalar(self, column: ColumnRef, scalar: ScalarType[T]) -> T:
        return scalar.decode(self.get(column), column)

    def scalar_option(self, column: ColumnRef, scalar: ScalarType[T]) -> Optional[T]:
        value = self.get(column)
        if value is None:
            return None
        return scalar.decode(value, column)

    def big_decimal(self, column: ColumnRef) -> Decimal:
        return self.scalar(column, BIG_DECIMAL)

    def big_decimal_option(self, column: ColumnRef) -> Optional[Decimal]:
        return self.scalar_option(column, BIG_DECIMAL)

    def big_int(self, column: ColumnRef) -> builtins.int:
        return self.scalar(column, BIG_INT)

    def big_int_option(self, column: ColumnRef) -> Optional[builtins.int]:
        return self.scalar_option(column, BIG_INT)

    def bool(self, column: ColumnRef) -> builtins.bool:
        return self.scalar(column, BOOL)

    def bool_option(self, column: ColumnRef) -> Optional[builtins.bool]:
        return self.scalar_option(column, BOOL)

    def byte(self, column: ColumnRef) -> builtins.int:
        return self.scalar(column, BYTE)

    def byte_option(self, column: ColumnRef) -> Optional[builtins.int]:
        return self.scalar_option(column, BYTE)

    def byte_array(self, column: ColumnRef) -> builtins.bytes:
        return self.scalar(column, BYTE_ARRAY)

    def byte_array_option(self, column: ColumnRef) -> Optional[builtins.bytes]:
        return self.scalar_option(column, BYTE_ARRAY)

    def char(self, column: ColumnRef) -> str:
        return self.scalar(column, CHAR)

    def char_option(self, column: ColumnRef) -> Optional[str]:
        return self.scalar_option(column, CHAR)

    def date(self, column: ColumnRef) -> datetime.date:
        return self.scalar(column, DATE)

    def date_option(self, column: ColumnRef) -> Optional[datetime.date]:
        return self.scalar_option(column, DATE)

    def double(self, column: ColumnRef) -> builtins.float:
        return self.scalar(column, DOUBLE)

    def double_option(self, column: ColumnRef) -> Optional[builtins.float]:
        return self.scalar_option(column, DOUBLE)

    def float(self, column: ColumnRef) -> builtins.float:
        return self.scalar(column, FLOAT)

    def float_option(self, column: ColumnRef) -> Optional[builtins.float]:
        return self.scalar_option(column, FLOAT)

    def int(self, column: ColumnRef) -> builtins.int:
        return self.scalar(column, INT)

    def int_option(self, column: ColumnRef) -> Optional[builtins.int]:
        return self.scalar_option(column, INT)

    def long(self, column: ColumnRef) -> builtins.int:
        return self.scalar(column, LONG)

    def long_option(self, column: ColumnRef) -> Optional[builtins.int]:
        return self.scalar_option(column, LONG)

    def short(self, column: ColumnRef) -> builtins.int:
        return self.scalar(column, SHORT)

    def short_option(self, column: ColumnRef) -> Optional[builtins.int]:
        return self.scalar_option(column, SHORT)

    def string(self, column: ColumnRef) -> str:
        return self.scalar(column, STRING)

    def string_option(self, column: ColumnRef) -> Optional[str]:
        return self.scalar_option(column, STRING)

    def timestamp(self, column: ColumnRef) -> datetime.datetime:
        return self.scalar(column, TIMESTAMP)

    def timestamp_option(self, column: ColumnRef) -> Optional[datetime.datetime]:
        return self.scalar_option(column, TIMESTAMP)

    def uuid(self, column: ColumnRef) -> UUID:
        return self.scalar(column, UUID_TYPE)

    def uuid_option(self, column: ColumnRef) -> Optional[UUID]:
        return self.scalar_option(column, UUID_TYPE)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(row_number={self.cursor.row_number!r})"
