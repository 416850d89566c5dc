"""Tests for scalar type encode and decode rules."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

import pytest

from sqlrelate.binding import types
from sqlrelate.binding.types import SCALAR_TYPES, ScalarType
from sqlrelate.exceptions import ColumnTypeError
from sqlrelate.parameters import SqlType
from sqlrelate.result import IterableRowCursor, collection, column


def test_every_scalar_type_is_registered() -> None:
    assert set(SCALAR_TYPES) == {
        "big_decimal",
        "big_int",
        "bool",
        "byte",
        "byte_array",
        "char",
        "date",
        "double",
        "float",
        "int",
        "long",
        "short",
        "string",
        "timestamp",
        "uuid",
    }
    assert all(isinstance(scalar, ScalarType) for scalar in SCALAR_TYPES.values())


def test_big_int_null_type_is_decimal() -> None:
    assert types.BIG_INT.sql_type is SqlType.DECIMAL
    assert types.BIG_DECIMAL.sql_type is SqlType.DECIMAL


def test_uuid_null_type_is_varchar() -> None:
    assert types.UUID_TYPE.sql_type is SqlType.VARCHAR


def test_big_decimal_encode_accepts_numbers_and_strings() -> None:
    assert types.BIG_DECIMAL.encode(Decimal("1.25")) == Decimal("1.25")
    assert types.BIG_DECIMAL.encode(3) == Decimal(3)
    assert types.BIG_DECIMAL.encode("2.50") == Decimal("2.50")
    assert types.BIG_DECIMAL.encode(0.1) == Decimal("0.1")


def test_big_decimal_encode_rejects_garbage() -> None:
    with pytest.raises(ValueError, match="not a decimal"):
        types.BIG_DECIMAL.encode("abc")
    with pytest.raises(TypeError):
        types.BIG_DECIMAL.encode(True)


def test_date_encodes_as_midnight_timestamp() -> None:
    assert types.DATE.encode(date(2020, 5, 17)) == datetime(2020, 5, 17, 0, 0)


@pytest.mark.parametrize(
    ("scalar", "raw", "expected"),
    [
        (types.BOOL, 1, True),
        (types.BOOL, 0, False),
        (types.INT, Decimal("12"), 12),
        (types.LONG, "99", 99),
        (types.BIG_INT, "123456789012345678901234567890", 123456789012345678901234567890),
        (types.DOUBLE, Decimal("1.5"), 1.5),
        (types.FLOAT, 2, 2.0),
        (types.BIG_DECIMAL, "3.10", Decimal("3.10")),
        (types.DATE, "2024-02-03", date(2024, 2, 3)),
        (types.DATE, datetime(2024, 2, 3, 10, 0), date(2024, 2, 3)),
        (types.TIMESTAMP, "2024-02-03 04:05:06", datetime(2024, 2, 3, 4, 5, 6)),
        (types.TIMESTAMP, date(2024, 2, 3), datetime(2024, 2, 3)),
        (types.CHAR, "x", "x"),
        (types.CHAR, "y   ", "y"),
        (types.CHAR, "   ", " "),
        (types.BYTE_ARRAY, memoryview(b"ab"), b"ab"),
        (types.UUID_TYPE, "12345678-1234-5678-1234-567812345678", UUID("12345678-1234-5678-1234-567812345678")),
    ],
)
def test_decode_accepts_driver_representations(scalar: ScalarType, raw: object, expected: object) -> None:
    assert scalar.decode(raw) == expected


def test_uuid_decodes_from_bytes() -> None:
    data = bytes.fromhex("0102030405060708" "0807060504030201")

    assert types.UUID_TYPE.decode(data) == UUID("01020304-0506-0708-0807-060504030201")


@pytest.mark.parametrize(
    ("scalar", "raw"),
    [
        (types.INT, 2**31),
        (types.INT, Decimal("1.5")),
        (types.BOOL, 2),
        (types.STRING, 5),
        (types.CHAR, ""),
        (types.CHAR, "ab"),
        (types.UUID_TYPE, b"short"),
        (types.TIMESTAMP, "not a timestamp"),
    ],
)
def test_decode_rejects_bad_values(scalar: ScalarType, raw: object) -> None:
    with pytest.raises(ColumnTypeError, match=f"as {scalar.name}"):
        scalar.decode(raw, "col")


def test_decode_rejects_null() -> None:
    with pytest.raises(ColumnTypeError, match="Cannot decode column 'total' as long"):
        types.LONG.decode(None, "total")


def test_decode_error_is_chained() -> None:
    with pytest.raises(ColumnTypeError) as exc_info:
        types.INT.decode("x", 1)

    assert isinstance(exc_info.value.__cause__, ValueError)
    assert exc_info.value.column == 1


def test_char_collection_rejects_multi_character_values() -> None:
    cursor = IterableRowCursor([("ab",)], columns=("c",))

    with pytest.raises(ColumnTypeError, match="Cannot decode column 'c' as char"):
        collection(column(types.CHAR, "c")).parse(cursor)
    assert cursor.closed
