"""Per-type entry points shared by the statement and tuple binders.

Every scalar type gets ``<type>(name, value)`` and ``<type>_option(name, value)``;
binders that support list placeholders also get the plural
``<types>(name, values)``. All of them delegate to the generic ``set``,
``set_optional`` and ``set_many`` with the matching :class:`ScalarType`.
"""

from __future__ import annotations

import builtins
from typing import TYPE_CHECKING, Any, Optional

from mypy_extensions import trait

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
from sqlrelate.exceptions import ParameterTypeError

if TYPE_CHECKING:
    from collections.abc import Iterable
    import datetime
    from decimal import Decimal
    from uuid import UUID

    from sqlrelate.binding.types import ScalarType
    from sqlrelate.parameters.types import SqlType

__all__ = ("ListSettersMixin", "ScalarSettersMixin", "encode_parameter")


def encode_parameter(name: str, value: Any, scalar: ScalarType[Any]) -> Any:
    """Encode ``value`` for ``scalar``, naming the parameter on failure."""
    try:
        return scalar.encode(value)
    except (TypeError, ValueError) as exc:
        msg = f"Cannot bind parameter {name!r} as {scalar.name}: {exc}"
        raise ParameterTypeError(msg) from exc


@trait
class ScalarSettersMixin:
    __slots__ = ()

    def set(self, name: str, value: Any, scalar: ScalarType[Any]) -> None:
        raise NotImplementedError

    def set_null(self, name: str, sql_type: SqlType) -> None:
        raise NotImplementedError

    def set_optional(self, name: str, value: Optional[Any], scalar: ScalarType[Any]) -> None:
        """Bind ``value`` when present, otherwise a NULL typed with the scalar's SQL type."""
        if value is None:
            self.set_null(name, scalar.sql_type)
        else:
            self.set(name, value, scalar)

    def big_decimal(self, name: str, value: Decimal) -> None:
        self.set(name, value, BIG_DECIMAL)

    def big_decimal_option(self, name: str, value: Optional[Decimal]) -> None:
        self.set_optional(name, value, BIG_DECIMAL)

    def big_int(self, name: str, value: builtins.int) -> None:
        self.set(name, value, BIG_INT)

    def big_int_option(self, name: str, value: Optional[builtins.int]) -> None:
        self.set_optional(name, value, BIG_INT)

    def bool(self, name: str, value: builtins.bool) -> None:
        self.set(name, value, BOOL)

    def bool_option(self, name: str, value: Optional[builtins.bool]) -> None:
        self.set_optional(name, value, BOOL)

    def byte(self, name: str, value: builtins.int) -> None:
        self.set(name, value, BYTE)

    def byte_option(self, name: str, value: Optional[builtins.int]) -> None:
        self.set_optional(name, value, BYTE)

    def byte_array(self, name: str, value: builtins.bytes) -> None:
        self.set(name, value, BYTE_ARRAY)

    def byte_array_option(self, name: str, value: Optional[builtins.bytes]) -> None:
        self.set_optional(name, value, BYTE_ARRAY)

    def char(self, name: str, value: str) -> None:
        self.set(name, value, CHAR)

    def char_option(self, name: str, value: Optional[str]) -> None:
        self.set_optional(name, value, CHAR)

    def date(self, name: str, value: datetime.date) -> None:
        """Bind a date. Dates are written as timestamps at midnight."""
        self.set(name, value, DATE)

    def date_option(self, name: str, value: Optional[datetime.date]) -> None:
        self.set_optional(name, value, DATE)

    def double(self, name: str, value: builtins.float) -> None:
        self.set(name, value, DOUBLE)

    def double_option(self, name: str, value: Optional[builtins.float]) -> None:
        self.set_optional(name, value, DOUBLE)

    def float(self, name: str, value: builtins.float) -> None:
        self.set(name, value, FLOAT)

    def float_option(self, name: str, value: Optional[builtins.float]) -> None:
        self.set_optional(name, value, FLOAT)

    def int(self, name: str, value: builtins.int) -> None:
        self.set(name, value, INT)

    def int_option(self, name: str, value: Optional[builtins.int]) -> None:
        self.set_optional(name, value, INT)

    def long(self, name: str, value: builtins.int) -> None:
        self.set(name, value, LONG)

    def long_option(self, name: str, value: Optional[builtins.int]) -> None:
        self.set_optional(name, value, LONG)

    def short(self, name: str, value: builtins.int) -> None:
        self.set(name, value, SHORT)

    def short_option(self, name: str, value: Optional[builtins.int]) -> None:
        self.set_optional(name, value, SHORT)

    def string(self, name: str, value: str) -> None:
        self.set(name, value, STRING)

    def string_option(self, name: str, value: Optional[str]) -> None:
        self.set_optional(name, value, STRING)

    def timestamp(self, name: str, value: datetime.datetime) -> None:
        self.set(name, value, TIMESTAMP)

    def timestamp_option(self, name: str, value: Optional[datetime.datetime]) -> None:
        self.set_optional(name, value, TIMESTAMP)

    def uuid(self, name: str, value: UUID) -> None:
        """Bind a UUID as its 16 byte encoding."""
        self.set(name, value, UUID_TYPE)

    def uuid_option(self, name: str, value: Optional[UUID]) -> None:
        self.set_optional(name, value, UUID_TYPE)


@trait
class ListSettersMixin:
    __slots__ = ()

    def set_many(self, name: str, values: Iterable[Any], scalar: ScalarType[Any]) -> None:
        raise NotImplementedError

    def big_decimals(self, name: str, values: Iterable[Decimal]) -> None:
        self.set_many(name, values, BIG_DECIMAL)

    def big_ints(self, name: str, values: Iterable[builtins.int]) -> None:
        self.set_many(name, values, BIG_INT)

    def bools(self, name: str, values: Iterable[builtins.bool]) -> None:
        self.set_many(name, values, BOOL)

    def bytes(self, name: str, values: Iterable[builtins.int]) -> None:
        self.set_many(name, values, BYTE)

    def byte_arrays(self, name: str, values: Iterable[builtins.bytes]) -> None:
        self.set_many(name, values, BYTE_ARRAY)

    def chars(self, name: str, values: Iterable[str]) -> None:
        self.set_many(name, values, CHAR)

    def dates(self, name: str, values: Iterable[datetime.date]) -> None:
        self.set_many(name, values, DATE)

    def doubles(self, name: str, values: Iterable[builtins.float]) -> None:
        self.set_many(name, values, DOUBLE)

    def floats(self, name: str, values: Iterable[builtins.float]) -> None:
        self.set_many(name, values, FLOAT)

    def ints(self, name: str, values: Iterable[builtins.int]) -> None:
        self.set_many(name, values, INT)

    def longs(self, name: str, values: Iterable[builtins.int]) -> None:
        self.set_many(name, values, LONG)

    def shorts(self, name: str, values: Iterable[builtins.int]) -> None:
        self.set_many(name, values, SHORT)

    def strings(self, name: str, values: Iterable[str]) -> None:
        self.set_many(name, values, STRING)

    def timestamps(self, name: str, values: Iterable[datetime.datetime]) -> None:
        self.set_many(name, values, TIMESTAMP)

    def uuids(self, name: str, values: Iterable[UUID]) -> None:
        self.set_many(name, values, UUID_TYPE)
