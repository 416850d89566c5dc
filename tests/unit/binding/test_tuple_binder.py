import pytest

from sqlrelate.binding import TupleBinder
from sqlrelate.exceptions import UnknownParameterError
from sqlrelate.parameters import SqlType
from tests.conftest import RecordingStatement


def test_position_is_row_start_plus_column_offset(statement: RecordingStatement) -> None:
    binder = TupleBinder(statement, {"id": 0, "name": 1, "score": 2}, 4)

    binder.int("id", 1)
    binder.string("name", "bob")
    binder.double_option("score", None)

    assert statement.values == {4: 1, 5: "bob"}
    assert statement.nulls == {6: SqlType.DOUBLE}


def test_unknown_column_raises(statement: RecordingStatement) -> None:
    binder = TupleBinder(statement, {"id": 0}, 1)

    with pytest.raises(UnknownParameterError, match="'missing' is not part of the tuple"):
        binder.string("missing", "x")
    assert statement.writes == []


def test_tuple_binder_has_no_list_setters(statement: RecordingStatement) -> None:
    binder = TupleBinder(statement, {"id": 0}, 1)

    assert not hasattr(binder, "ints")
