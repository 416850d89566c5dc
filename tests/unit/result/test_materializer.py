"""Tests for result materialization strategies."""

from collections import OrderedDict, deque
from typing import Any
from unittest.mock import Mock

import pytest

from sqlrelate.binding import INT, LONG, STRING
from sqlrelate.exceptions import ColumnTypeError, DecodeError, NotFoundError
from sqlrelate.result import (
    IterableRowCursor,
    SqlRow,
    collection,
    column,
    column_option,
    columns,
    limited_collection,
    multimap,
    one,
    optional,
    pair_collection,
    scalar,
)


def make_cursor(*rows: "tuple[Any, ...]", names: "tuple[str, ...]" = ("id", "name")) -> IterableRowCursor:
    return IterableRowCursor(list(rows), columns=names)


def test_collection_reads_every_row() -> None:
    cursor = make_cursor((1, "a"), (2, "b"), (3, "c"))

    assert collection(INT).parse(cursor) == [1, 2, 3]
    assert cursor.closed


def test_collection_with_container_type() -> None:
    assert collection(column(STRING, "name"), tuple).parse(make_cursor((1, "a"), (2, "b"))) == ("a", "b")
    assert collection(INT, set).parse(make_cursor((1, "a"), (1, "b"))) == {1}
    assert collection(INT, deque).parse(make_cursor((1, "a"))) == deque([1])


def test_collection_of_tuples() -> None:
    parser = collection(columns(column(INT, "id"), column(STRING, "name")))

    assert parser.parse(make_cursor((1, "a"), (2, "b"))) == [(1, "a"), (2, "b")]


def test_collection_with_function_decoder() -> None:
    parser = collection(lambda row: f"{row.int('id')}:{row.string('name')}")

    assert parser.parse(make_cursor((1, "a"))) == ["1:a"]


@pytest.mark.parametrize(("limit", "expected"), [(0, []), (2, [1, 2]), (3, [1, 2, 3]), (10, [1, 2, 3])])
def test_limited_collection_stops_at_limit(limit: int, expected: "list[int]") -> None:
    cursor = make_cursor((1, "a"), (2, "b"), (3, "c"))

    assert limited_collection(INT, limit).parse(cursor) == expected
    assert cursor.row_number == len(expected)


def test_limited_collection_never_fetches_past_the_limit() -> None:
    cursor = Mock()
    cursor.row_number = 0

    def advance() -> bool:
        cursor.row_number += 1
        return True

    cursor.next.side_effect = advance
    cursor.get.return_value = 5

    assert limited_collection(INT, 2).parse(cursor) == [5, 5]
    assert cursor.next.call_count == 2
    cursor.close.assert_called_once_with()


def test_limited_collection_rejects_negative_limit() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        limited_collection(INT, -1)


def test_optional() -> None:
    assert optional(INT).parse(make_cursor((4, "a"), (5, "b"))) == 4
    assert optional(INT).parse(make_cursor()) is None


def test_optional_reads_a_single_row() -> None:
    cursor = make_cursor((4, "a"), (5, "b"))

    optional(INT).parse(cursor)

    assert cursor.row_number == 1


def test_one() -> None:
    assert one(column(STRING, "name")).parse(make_cursor((1, "x"))) == "x"


def test_one_on_empty_result_raises_not_found() -> None:
    cursor = make_cursor()

    with pytest.raises(NotFoundError):
        one(INT).parse(cursor)
    assert cursor.closed


def test_scalar() -> None:
    cursor = make_cursor((42,), names=("count",))

    assert scalar(LONG).parse(cursor) == 42


def test_scalar_by_label() -> None:
    assert scalar(STRING, "name").parse(make_cursor((1, "z"))) == "z"


def test_pair_collection_keeps_duplicates_in_list() -> None:
    parser = pair_collection(column(STRING, "name"), column(INT, "id"))

    assert parser.parse(make_cursor((1, "a"), (2, "a"))) == [("a", 1), ("a", 2)]


def test_pair_collection_last_key_wins_in_dict() -> None:
    parser = pair_collection(column(STRING, "name"), column(INT, "id"), dict)

    assert parser.parse(make_cursor((1, "a"), (2, "b"), (3, "a"))) == {"a": 3, "b": 2}


def test_pair_collection_into_dict_subclass() -> None:
    parser = pair_collection(column(STRING, "name"), column(INT, "id"), OrderedDict)

    result = parser.parse(make_cursor((1, "b"), (2, "a")))

    assert isinstance(result, OrderedDict)
    assert list(result) == ["b", "a"]


def test_multimap_groups_values() -> None:
    parser = multimap(column(STRING, "name"), column(INT, "id"))

    result = parser.parse(make_cursor((1, "a"), (2, "b"), (3, "a"), (1, "a")))

    assert dict(result) == {"a": frozenset({1, 3}), "b": frozenset({2})}


def test_multimap_result_is_read_only() -> None:
    result = multimap(column(STRING, "name"), INT).parse(make_cursor((1, "a")))

    with pytest.raises(TypeError):
        result["b"] = frozenset()  # type: ignore[index]


def test_multimap_empty() -> None:
    assert dict(multimap(INT, INT).parse(make_cursor())) == {}


def test_nullable_column_decoder() -> None:
    parser = collection(column_option(STRING, "name"))

    assert parser.parse(make_cursor((1, None), (2, "b"))) == [None, "b"]


def test_decoder_error_closes_cursor_and_keeps_type() -> None:
    cursor = make_cursor((1, None))

    with pytest.raises(ColumnTypeError):
        collection(column(STRING, "name")).parse(cursor)
    assert cursor.closed


def test_foreign_error_is_wrapped_in_decode_error() -> None:
    def explode(row: SqlRow) -> int:
        raise RuntimeError("driver went away")

    cursor = make_cursor((1, "a"))

    with pytest.raises(DecodeError, match="Failed to decode collection") as exc_info:
        collection(explode).parse(cursor)
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert cursor.closed


def test_cursor_failure_is_wrapped_and_cursor_closed() -> None:
    cursor = Mock()
    cursor.row_number = 0
    cursor.next.side_effect = OSError("connection reset")

    with pytest.raises(DecodeError) as exc_info:
        collection(INT).parse(cursor)
    assert isinstance(exc_info.value.__cause__, OSError)
    cursor.close.assert_called_once_with()


def test_parser_is_callable() -> None:
    parser = collection(INT)

    assert parser(make_cursor((1, "a"))) == [1]
    assert repr(parser) == "ResultParser(collection)"


def test_parser_can_be_reused() -> None:
    parser = collection(INT)

    assert parser.parse(make_cursor((1, "a"))) == [1]
    assert parser.parse(make_cursor((2, "b"))) == [2]
