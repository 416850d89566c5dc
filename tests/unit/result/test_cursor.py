import pytest

from sqlrelate.exceptions import DecodeError
from sqlrelate.result import IterableRowCursor


def test_mapping_rows() -> None:
    cursor = IterableRowCursor([{"id": 1, "name": "a"}, {"id": 2, "name": "b"}])

    assert cursor.row_number == 0
    assert cursor.next()
    assert cursor.row_number == 1
    assert cursor.columns == ("id", "name")
    assert cursor.get("name") == "a"
    assert cursor.get(1) == 1
    assert cursor.next()
    assert cursor.get("id") == 2
    assert not cursor.next()
    assert cursor.row_number == 2


def test_sequence_rows_with_columns() -> None:
    cursor = IterableRowCursor([(1, "a")], columns=["id", "name"])

    cursor.next()

    assert cursor.get("name") == "a"
    assert cursor.get(2) == "a"
    with pytest.raises(KeyError):
        cursor.get("missing")
    with pytest.raises(IndexError):
        cursor.get(0)


def test_get_before_first_row_fails() -> None:
    cursor = IterableRowCursor([(1,)], columns=["id"])

    with pytest.raises(DecodeError, match="not positioned"):
        cursor.get(1)


def test_rows_are_read_lazily() -> None:
    consumed: list[int] = []

    def rows():  # type: ignore[no-untyped-def]
        for number in range(5):
            consumed.append(number)
            yield (number,)

    cursor = IterableRowCursor(rows(), columns=["n"])
    cursor.next()
    cursor.next()

    assert consumed == [0, 1]


def test_closed_cursor_cannot_advance() -> None:
    cursor = IterableRowCursor([(1,)], columns=["id"])
    cursor.close()

    assert cursor.closed
    with pytest.raises(DecodeError, match="closed"):
        cursor.next()
