import pytest

from sqlrelate import exceptions
from sqlrelate.exceptions import (
    ColumnNotFoundError,
    ColumnTypeError,
    DecodeError,
    ListParameterError,
    NotFoundError,
    ParameterError,
    ParameterTypeError,
    SQLRelateError,
    UnknownParameterError,
    wrap_decode_errors,
)


def test_exception_hierarchy() -> None:
    """Test exception classes inherit correctly."""
    assert issubclass(UnknownParameterError, ParameterError)
    assert issubclass(ListParameterError, ParameterError)
    assert issubclass(ParameterTypeError, ParameterError)
    assert issubclass(ParameterError, SQLRelateError)

    assert issubclass(ColumnTypeError, DecodeError)
    assert issubclass(ColumnNotFoundError, DecodeError)
    assert issubclass(DecodeError, SQLRelateError)
    assert issubclass(NotFoundError, SQLRelateError)


def test_parameter_error_includes_sql() -> None:
    exc = ParameterError("bad marker", "SELECT ?")

    assert exc.sql == "SELECT ?"
    assert "SQL: SELECT ?" in str(exc)


def test_exception_instantiation() -> None:
    exc = NotFoundError("Nothing here")

    assert str(exc) == "Nothing here"
    assert repr(exc) == "NotFoundError - Nothing here"


def test_every_exported_error_is_a_library_error() -> None:
    exported = [getattr(exceptions, name) for name in exceptions.__all__ if name != "wrap_decode_errors"]

    assert all(issubclass(error, exceptions.SQLRelateError) for error in exported)
    assert not any(issubclass(error, ImportError) for error in exported)


def test_wrap_decode_errors_chains_cause() -> None:
    with pytest.raises(DecodeError, match="boom context") as exc_info:
        with wrap_decode_errors("boom context"):
            raise RuntimeError("driver failure")

    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_wrap_decode_errors_passes_library_errors_through() -> None:
    with pytest.raises(NotFoundError):
        with wrap_decode_errors():
            raise NotFoundError("empty")


def test_wrap_decode_errors_no_error() -> None:
    with wrap_decode_errors():
        value = 1

    assert value == 1
