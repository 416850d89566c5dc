"""Scalar column types.

Each :class:`ScalarType` pairs the encoding rule used when binding a Python
value with the inverse rule used when reading the column back, and carries
the SQL type code written for a NULL of that type.
"""

from collections.abc import Callable
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any, Final, Generic
from uuid import UUID

from mypy_extensions import mypyc_attr
from typing_extensions import TypeVar

from sqlrelate.exceptions import ColumnTypeError
from sqlrelate.parameters.types import SqlType
from sqlrelate.utils.uuids import bytes_to_uuid, uuid_to_bytes

__all__ = (
    "BIG_DECIMAL",
    "BIG_INT",
    "BOOL",
    "BYTE",
    "BYTE_ARRAY",
    "CHAR",
    "DATE",
    "DOUBLE",
    "FLOAT",
    "INT",
    "LONG",
    "SCALAR_TYPES",
    "SHORT",
    "STRING",
    "TIMESTAMP",
    "UUID_TYPE",
    "ScalarType",
)

T = TypeVar("T")

_DECODE_FAILURES: Final = (TypeError, ValueError, ArithmeticError)


@mypyc_attr(allow_interpreted_subclasses=True)
class ScalarType(Generic[T]):
    """Encode and decode rules for one scalar column type."""

    __slots__ = ("_decoder", "_encoder", "name", "sql_type")

    def __init__(
        self, name: str, sql_type: SqlType, encoder: "Callable[[Any], Any]", decoder: "Callable[[Any], T]"
    ) -> None:
        self.name = name
        self.sql_type = sql_type
        self._encoder = encoder
        self._decoder = decoder

    def encode(self, value: Any) -> Any:
        """Convert a Python value to the form handed to the driver.

        Raises:
            TypeError: If the value has the wrong type.
            ValueError: If the value is out of range for the type.
        """
        return self._encoder(value)

    def decode(self, value: Any, column: "str | int" = "?") -> T:
        """Convert a driver value back to the Python type.

        Raises:
            ColumnTypeError: If the value cannot be read as this type, including NULL.
        """
        if value is None:
            raise ColumnTypeError(column, self.name, value)
        try:
            return self._decoder(value)
        except _DECODE_FAILURES as exc:
            raise ColumnTypeError(column, self.name, value) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, sql_type={self.sql_type!s})"


def _type_error(expected: str, value: Any) -> TypeError:
    return TypeError(f"expected {expected}, got {type(value).__name__}")


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _type_error("int", value)
    return value


def _fixed_width(bits: int) -> "Callable[[Any], int]":
    low = -(1 << (bits - 1))
    high = (1 << (bits - 1)) - 1

    def _encode(value: Any) -> int:
        number = _require_int(value)
        if not low <= number <= high:
            msg = f"{number} does not fit in a signed {bits}-bit integer"
            raise ValueError(msg)
        return number

    return _encode


def _read_integral(value: Any) -> int:
    if isinstance(value, Decimal):
        if value != value.to_integral_value():
            msg = f"{value} is not integral"
            raise ValueError(msg)
        return int(value)
    if isinstance(value, str):
        return int(value.strip())
    return _require_int(value)


def _fixed_width_reader(bits: int) -> "Callable[[Any], int]":
    check = _fixed_width(bits)
    return lambda value: check(_read_integral(value))


def _encode_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise _type_error("bool", value)
    return value


def _decode_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in {0, 1}:
        return bool(value)
    raise _type_error("bool", value)


def _encode_big_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise _type_error("Decimal", value)
    if isinstance(value, (int, str)):
        try:
            return Decimal(value)
        except InvalidOperation as exc:
            msg = f"{value!r} is not a decimal number"
            raise ValueError(msg) from exc
    if isinstance(value, float):
        return Decimal(repr(value))
    raise _type_error("Decimal", value)


def _decode_big_decimal(value: Any) -> Decimal:
    if isinstance(value, float):
        return Decimal(repr(value))
    return _encode_big_decimal(value)


def _encode_big_int(value: Any) -> Decimal:
    return Decimal(_require_int(value))


def _encode_byte_array(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise _type_error("bytes", value)


def _encode_char(value: Any) -> str:
    if not isinstance(value, str):
        raise _type_error("str", value)
    if len(value) != 1:
        msg = f"expected a single character, got {len(value)} characters"
        raise ValueError(msg)
    return value


def _decode_char(value: Any) -> str:
    raw = _encode_string(value)
    # CHAR(n) columns come back blank padded; an all-blank value is one space.
    text = raw.rstrip(" ") or raw[:1]
    if len(text) != 1:
        msg = f"expected a single character, got {len(text)} characters"
        raise ValueError(msg)
    return text


def _encode_date(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    raise _type_error("date", value)


def _decode_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value).date()
    raise _type_error("date", value)


def _encode_floating(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _type_error("float", value)
    return float(value)


def _decode_floating(value: Any) -> float:
    if isinstance(value, Decimal):
        return float(value)
    return _encode_floating(value)


def _encode_string(value: Any) -> str:
    if not isinstance(value, str):
        raise _type_error("str", value)
    return value


def _encode_timestamp(value: Any) -> datetime:
    if not isinstance(value, datetime):
        raise _type_error("datetime", value)
    return value


def _decode_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    raise _type_error("datetime", value)


def _encode_uuid(value: Any) -> bytes:
    if not isinstance(value, UUID):
        raise _type_error("UUID", value)
    return uuid_to_bytes(value)


def _decode_uuid(value: Any) -> UUID:
    if isinstance(value, UUID):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes_to_uuid(value)
    if isinstance(value, str):
        return UUID(value)
    raise _type_error("UUID", value)


BIG_DECIMAL: Final[ScalarType[Decimal]] = ScalarType("big_decimal", SqlType.DECIMAL, _encode_big_decimal, _decode_big_decimal)
BIG_INT: Final[ScalarType[int]] = ScalarType("big_int", SqlType.DECIMAL, _encode_big_int, _read_integral)
BOOL: Final[ScalarType[bool]] = ScalarType("bool", SqlType.BOOLEAN, _encode_bool, _decode_bool)
BYTE: Final[ScalarType[int]] = ScalarType("byte", SqlType.TINYINT, _fixed_width(8), _fixed_width_reader(8))
BYTE_ARRAY: Final[ScalarType[bytes]] = ScalarType("byte_array", SqlType.BLOB, _encode_byte_array, _encode_byte_array)
CHAR: Final[ScalarType[str]] = ScalarType("char", SqlType.CHAR, _encode_char, _decode_char)
DATE: Final[ScalarType[date]] = ScalarType("date", SqlType.DATE, _encode_date, _decode_date)
DOUBLE: Final[ScalarType[float]] = ScalarType("double", SqlType.DOUBLE, _encode_floating, _decode_floating)
FLOAT: Final[ScalarType[float]] = ScalarType("float", SqlType.FLOAT, _encode_floating, _decode_floating)
INT: Final[ScalarType[int]] = ScalarType("int", SqlType.INTEGER, _fixed_width(32), _fixed_width_reader(32))
LONG: Final[ScalarType[int]] = ScalarType("long", SqlType.BIGINT, _fixed_width(64), _fixed_width_reader(64))
SHORT: Final[ScalarType[int]] = ScalarType("short", SqlType.SMALLINT, _fixed_width(16), _fixed_width_reader(16))
STRING: Final[ScalarType[str]] = ScalarType("string", SqlType.VARCHAR, _encode_string, _encode_string)
TIMESTAMP: Final[ScalarType[datetime]] = ScalarType("timestamp", SqlType.TIMESTAMP, _encode_timestamp, _decode_timestamp)
UUID_TYPE: Final[ScalarType[UUID]] = ScalarType("uuid", SqlType.VARCHAR, _encode_uuid, _decode_uuid)

SCALAR_TYPES: Final[dict[str, ScalarType[Any]]] = {
    scalar.name: scalar
    for scalar in (
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
}
