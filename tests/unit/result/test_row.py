"""Tests for typed access to the current row."""

from datetime import date
from decimal import Decimal
from uuid import UUID

import pytest

from sqlrelate.binding import STRING
from sqlrelate.exceptions import ColumnNotFoundError, ColumnTypeError
from sqlrelate.result import IterableRowCursor, SqlRow


def row_for(values: dict) -> SqlRow:  # type: ignore[type-arg]
    cursor = IterableRowCursor([values])
    cursor.next()
    return SqlRow(cursor)


def test_typed_getters() -> None:
    uid = UUID("12345678-1234-5678-1234-567812345678")
    row = row_for(
        {
            "id": 7,
            "price": "9.99",
            "active": 1,
            "born": "1990-01-02",
            "initial": "Q",
            "ratio": 0.5,
            "tag": "x",
            "uid": uid.bytes,
        }
    )

    assert row.int("id") == 7
    assert row.long(1) == 7
    assert row.big_decimal("price") == Decimal("9.99")
    assert row.bool("active") is True
    assert row.date("born") == date(1990, 1, 2)
    assert row.char("initial") == "Q"
    assert row.double("ratio") == 0.5
    assert row.string("tag") == "x"
    assert row.uuid("uid") == uid


def test_option_getters_return_none_for_null() -> None:
    row = row_for({"a": None, "b": 3})

    assert row.int_option("a") is None
    assert row.string_option("a") is None
    assert row.timestamp_option("a") is None
    assert row.short_option("b") == 3
    assert row.is_null("a")
    assert not row.is_null("b")


def test_plain_getter_rejects_null() -> None:
    row = row_for({"a": None})

    with pytest.raises(ColumnTypeError, match="Cannot decode column 'a' as int"):
        row.int("a")


def test_missing_column() -> None:
    row = row_for({"a": 1})

    with pytest.raises(ColumnNotFoundError, match="'b'"):
        row.get("b")
    with pytest.raises(ColumnNotFoundError):
        row[5]


def test_as_dict_and_columns() -> None:
    row = row_for({"a": 1, "b": None})

    assert row.columns == ("a", "b")
    assert row.as_dict() == {"a": 1, "b": None}
    assert row["a"] == 1
    assert row.row_number == 1


def test_generic_scalar_getters() -> None:
    row = row_for({"name": "n", "missing": None})

    assert row.scalar("name", STRING) == "n"
    assert row.scalar_option("missing", STRING) is None
