from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Optional

__all__ = (
    "ColumnNotFoundError",
    "ColumnTypeError",
    "DecodeError",
    "ImproperConfigurationError",
    "ListParameterError",
    "NotFoundError",
    "ParameterError",
    "ParameterTypeError",
    "SQLRelateError",
    "UnknownParameterError",
    "wrap_decode_errors",
)


class SQLRelateError(Exception):
    """Base exception class from which all SQLRelate exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLRelateError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLRelateError):
    """Improper Configuration error."""


# -- Parameter Errors --
class ParameterError(SQLRelateError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class UnknownParameterError(ParameterError):
    """Raised when binding a name that has no placeholder in the statement."""


class ListParameterError(ParameterError):
    """Raised when a list value does not match the declared list length."""


class ParameterTypeError(ParameterError):
    """Raised when a value cannot be encoded for the requested column type."""


# -- Result Errors --
class DecodeError(SQLRelateError):
    """Reading or decoding rows from a cursor failed.

    The originating exception is always available as ``__cause__``.
    """


class ColumnTypeError(DecodeError):
    """A column value cannot be decoded as the requested type."""

    column: "Optional[str | int]"

    def __init__(self, column: "str | int", type_name: str, value: Any = None) -> None:
        super().__init__(
            detail=f"Cannot decode column {column!r} as {type_name} (got {type(value).__name__}: {value!r})"
        )
        self.column = column


class ColumnNotFoundError(DecodeError):
    """The requested column is not part of the result row."""


class NotFoundError(SQLRelateError):
    """A single row was required but the result was empty."""


@contextmanager
def wrap_decode_errors(message: str = "An error occurred while decoding the result.") -> Generator[None, None, None]:
    """Re-raise any failure as a :class:`DecodeError` chained to its cause.

    Errors that already belong to the SQLRelate hierarchy pass through untouched.
    """
    try:
        yield

    except SQLRelateError:
        raise
    except Exception as exc:
        raise DecodeError(detail=message) from exc
