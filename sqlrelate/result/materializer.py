"""Result materialization strategies.

Each strategy is a :class:`ResultParser` that consumes a row cursor and
returns one value of the requested shape. The cursor is always closed before
the parser returns or raises, and every failure other than the SQLRelate
errors themselves surfaces as a :class:`~sqlrelate.exceptions.DecodeError`
chained to its cause.

Row limits bound cursor advancement. A parser limited to ``n`` rows never
fetches row ``n + 1``: :func:`optional`, :func:`one` and :func:`scalar` read
at most one row and do **not** report that further rows were available.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, Optional

from mypy_extensions import mypyc_attr
from typing_extensions import TypeVar

from sqlrelate.exceptions import NotFoundError, wrap_decode_errors
from sqlrelate.result.builders import BuilderSpec, resolve_builder
from sqlrelate.result.decoders import DecoderSpec, as_decoder, column
from sqlrelate.result.row import SqlRow
from sqlrelate.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlrelate.binding.types import ScalarType
    from sqlrelate.protocols import RowCursor, RowDecoder

__all__ = (
    "ResultParser",
    "collection",
    "limited_collection",
    "multimap",
    "one",
    "optional",
    "pair_collection",
    "scalar",
)

logger = get_logger("result.materializer")

_list_builder = resolve_builder(list)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


@mypyc_attr(allow_interpreted_subclasses=True)
class ResultParser(Generic[T]):
    """Wraps a cursor-consuming function with cursor release and error wrapping."""

    __slots__ = ("description", "func")

    def __init__(self, func: "Callable[[RowCursor], T]", description: str = "result") -> None:
        self.func = func
        self.description = description

    def parse(self, cursor: "RowCursor") -> T:
        """Decode ``cursor``, closing it on every exit path.

        Raises:
            DecodeError: Reading the cursor or decoding a row failed.
            NotFoundError: A single row was required and none was found.
        """
        with wrap_decode_errors(f"Failed to decode {self.description}"):
            try:
                return self.func(cursor)
            finally:
                cursor.close()

    def __call__(self, cursor: "RowCursor") -> T:
        return self.parse(cursor)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description})"


def _collect(
    cursor: "RowCursor", decoder: "RowDecoder[Any]", max_rows: Optional[int], builder_factory: "Callable[[], Any]"
) -> Any:
    builder = builder_factory()
    row = SqlRow(cursor)
    while (max_rows is None or cursor.row_number < max_rows) and cursor.next():
        builder.append(decoder.decode(row))
    logger.debug("Decoded %d rows", cursor.row_number)
    return builder.build()


def limited_collection(
    decoder: DecoderSpec, max_rows: Optional[int] = None, builder: BuilderSpec = list
) -> ResultParser[Any]:
    """Decode at most ``max_rows`` rows, one element per row.

    Args:
        decoder: Element decoder, scalar type or ``row -> value`` function.
        max_rows: Row limit; ``None`` reads every row.
        builder: Container type or factory of empty builders.
    """
    if max_rows is not None and max_rows < 0:
        msg = f"max_rows must be non-negative, got {max_rows}"
        raise ValueError(msg)
    element = as_decoder(decoder)
    factory = resolve_builder(builder)
    return ResultParser(lambda cursor: _collect(cursor, element, max_rows, factory), "collection")


def collection(decoder: DecoderSpec, builder: BuilderSpec = list) -> ResultParser[Any]:
    """Decode every row into a container, one element per row."""
    return limited_collection(decoder, None, builder)


def _first(cursor: "RowCursor", decoder: "RowDecoder[T]") -> Optional[T]:
    items: list[T] = _collect(cursor, decoder, 1, _list_builder)
    return items[0] if items else None


def optional(decoder: DecoderSpec) -> ResultParser[Any]:
    """Decode the first row, or ``None`` when the result is empty."""
    element = as_decoder(decoder)
    return ResultParser(lambda cursor: _first(cursor, element), "optional row")


def _exactly_one(cursor: "RowCursor", decoder: "RowDecoder[T]") -> T:
    if not cursor.next():
        msg = "Expected one row, the result was empty"
        raise NotFoundError(msg)
    return decoder.decode(SqlRow(cursor))


def one(decoder: DecoderSpec) -> ResultParser[Any]:
    """Decode the first row; an empty result raises :class:`NotFoundError`."""
    element = as_decoder(decoder)
    return ResultParser(lambda cursor: _exactly_one(cursor, element), "single row")


def scalar(scalar_type: "ScalarType[T]", name: "str | int" = 1) -> ResultParser[T]:
    """Decode one column of the first row, e.g. a count or a generated key."""
    element = column(scalar_type, name)
    return ResultParser(lambda cursor: _exactly_one(cursor, element), f"{scalar_type.name} scalar")


def _collect_pairs(
    cursor: "RowCursor", key: "RowDecoder[Any]", value: "RowDecoder[Any]", builder_factory: "Callable[[], Any]"
) -> Any:
    builder = builder_factory()
    row = SqlRow(cursor)
    while cursor.next():
        builder.append((key.decode(row), value.decode(row)))
    return builder.build()


def pair_collection(key: DecoderSpec, value: DecoderSpec, builder: BuilderSpec = list) -> ResultParser[Any]:
    """Decode every row into a ``(key, value)`` pair.

    Duplicate keys are kept when the container keeps them (``list``) and the
    last one wins for a ``dict``.
    """
    key_decoder = as_decoder(key)
    value_decoder = as_decoder(value)
    factory = resolve_builder(builder)
    return ResultParser(lambda cursor: _collect_pairs(cursor, key_decoder, value_decoder, factory), "pairs")


def _group(cursor: "RowCursor", key: "RowDecoder[K]", value: "RowDecoder[V]") -> "Mapping[K, frozenset[V]]":
    groups: dict[K, set[V]] = {}
    row = SqlRow(cursor)
    while cursor.next():
        row_key = key.decode(row)
        row_value = value.decode(row)
        if row_key in groups:
            groups[row_key].add(row_value)
        else:
            groups[row_key] = {row_value}
    return MappingProxyType({group_key: frozenset(values) for group_key, values in groups.items()})


def multimap(key: DecoderSpec, value: DecoderSpec) -> "ResultParser[Mapping[Any, frozenset[Any]]]":
    """Group every row's value under its key.

    Reads all rows. The result is a read-only mapping from key to the frozenset
    of values seen for it.
    """
    key_decoder = as_decoder(key)
    value_decoder = as_decoder(value)
    return ResultParser(lambda cursor: _group(cursor, key_decoder, value_decoder), "multimap")
