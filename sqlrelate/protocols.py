"""Runtime-checkable protocols for the collaborators SQLRelate talks to.

The driver side (positional statements, row cursors) and the decode side
(row decoders, result parsers, container builders) are all expressed as
protocols so any driver or container can plug in.
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from typing_extensions import TypeVar

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlrelate.parameters.types import SqlType
    from sqlrelate.result.row import SqlRow

__all__ = ("Builder", "PositionalStatement", "RowCursor", "RowDecoder", "RowParser")

T_co = TypeVar("T_co", covariant=True)
ItemT = TypeVar("ItemT", contravariant=True)
ContainerT = TypeVar("ContainerT", covariant=True)


@runtime_checkable
class PositionalStatement(Protocol):
    """A statement whose parameters are set by 1-based position."""

    def set_value(self, position: int, value: Any) -> None:
        """Set the parameter at ``position``."""
        ...

    def set_null(self, position: int, sql_type: "SqlType") -> None:
        """Set the parameter at ``position`` to a NULL of the given SQL type."""
        ...


@runtime_checkable
class RowCursor(Protocol):
    """Forward-only, single pass cursor over result rows."""

    @property
    def row_number(self) -> int:
        """1-based number of the current row, 0 before the first row."""
        ...

    @property
    def columns(self) -> "Sequence[str]":
        """Column labels in result order."""
        ...

    def next(self) -> bool:
        """Advance to the next row. Returns False when no row is left."""
        ...

    def get(self, column: "str | int") -> Any:
        """Value of ``column`` in the current row, by label or 1-based index."""
        ...

    def close(self) -> None:
        """Release the cursor."""
        ...


@runtime_checkable
class RowDecoder(Protocol[T_co]):
    """Decodes the current row into a value."""

    def decode(self, row: "SqlRow") -> T_co:
        """Decode one row."""
        ...


@runtime_checkable
class RowParser(Protocol[T_co]):
    """Consumes a cursor and produces a result."""

    def parse(self, cursor: RowCursor) -> T_co:
        """Parse the cursor, closing it on every exit path."""
        ...


@runtime_checkable
class Builder(Protocol[ItemT, ContainerT]):
    """Accumulates items and produces a container."""

    def append(self, item: ItemT) -> None:
        """Add one item."""
        ...

    def build(self) -> ContainerT:
        """Return the finished container."""
        ...
