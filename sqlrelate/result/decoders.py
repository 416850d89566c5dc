"""Row decoders: turn the current row into one value."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, Union

import msgspec
from typing_extensions import TypeVar

from sqlrelate.binding.types import ScalarType
from sqlrelate.exceptions import DecodeError
from sqlrelate.protocols import RowDecoder

if TYPE_CHECKING:
    from sqlrelate.result.row import SqlRow

__all__ = (
    "ColumnDecoder",
    "DecoderSpec",
    "FunctionDecoder",
    "SchemaDecoder",
    "TupleDecoder",
    "as_decoder",
    "as_schema",
    "column",
    "column_option",
    "columns",
)

T = TypeVar("T")

DecoderSpec = Union[RowDecoder[Any], ScalarType[Any], "Callable[[SqlRow], Any]"]


class ColumnDecoder(Generic[T]):
    """Reads one column as a scalar type."""

    __slots__ = ("column", "nullable", "scalar")

    def __init__(self, scalar: ScalarType[T], column: "str | int" = 1, nullable: bool = False) -> None:
        self.scalar = scalar
        self.column = column
        self.nullable = nullable

    def decode(self, row: "SqlRow") -> T:
        if self.nullable:
            return row.scalar_option(self.column, self.scalar)  # type: ignore[return-value]
        return row.scalar(self.column, self.scalar)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scalar={self.scalar.name!r}, column={self.column!r}, nullable={self.nullable!r})"


class FunctionDecoder(Generic[T]):
    """Adapts a plain ``row -> value`` function."""

    __slots__ = ("func",)

    def __init__(self, func: "Callable[[SqlRow], T]") -> None:
        self.func = func

    def decode(self, row: "SqlRow") -> T:
        return self.func(row)


class TupleDecoder:
    """Decodes several values from the same row into a tuple."""

    __slots__ = ("decoders",)

    def __init__(self, *decoders: DecoderSpec) -> None:
        self.decoders = tuple(as_decoder(decoder) for decoder in decoders)

    def decode(self, row: "SqlRow") -> "tuple[Any, ...]":
        return tuple(decoder.decode(row) for decoder in self.decoders)


class SchemaDecoder(Generic[T]):
    """Converts the whole row into a dataclass, msgspec ``Struct``, TypedDict or attrs class.

    Column labels are matched to field names. Conversion is lax, so driver
    representations such as ``0``/``1`` for booleans or ISO strings for
    timestamps are accepted.
    """

    __slots__ = ("schema_type", "strict")

    def __init__(self, schema_type: "type[T]", strict: bool = False) -> None:
        self.schema_type = schema_type
        self.strict = strict

    def decode(self, row: "SqlRow") -> T:
        try:
            return msgspec.convert(row.as_dict(), type=self.schema_type, strict=self.strict)
        except msgspec.ValidationError as exc:
            msg = f"Cannot decode row {row.row_number} as {self.schema_type.__name__}: {exc}"
            raise DecodeError(msg) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(schema_type={self.schema_type.__name__!r})"


def as_decoder(spec: DecoderSpec) -> RowDecoder[Any]:
    """Normalize a decoder specification.

    A :class:`ScalarType` reads the first column, an object with ``decode`` is
    used as is and any other callable is treated as a ``row -> value`` function.
    """
    if isinstance(spec, ScalarType):
        return ColumnDecoder(spec)
    if isinstance(spec, RowDecoder):
        return spec
    if callable(spec):
        return FunctionDecoder(spec)
    msg = f"Expected a row decoder, scalar type or function, got {spec!r}"
    raise TypeError(msg)


def column(scalar: ScalarType[T], name: "str | int" = 1) -> ColumnDecoder[T]:
    """Decoder reading ``name`` (label or 1-based index) as ``scalar``; NULL is an error."""
    return ColumnDecoder(scalar, name)


def column_option(scalar: ScalarType[T], name: "str | int" = 1) -> ColumnDecoder[T]:
    """Decoder reading ``name`` as ``scalar``, or ``None`` for NULL."""
    return ColumnDecoder(scalar, name, nullable=True)


def columns(*decoders: DecoderSpec) -> TupleDecoder:
    return TupleDecoder(*decoders)


def as_schema(schema_type: "type[T]", strict: bool = False) -> SchemaDecoder[T]:
    return SchemaDecoder(schema_type, strict=strict)
