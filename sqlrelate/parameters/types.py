"""Core parameter types used by the binder and the placeholder extractor."""

from enum import IntEnum
from typing import Final, Optional

__all__ = ("POSITIONAL_PLACEHOLDER", "ListParam", "PlaceholderInfo", "SqlType", "TupleParam", "placeholder_width")

POSITIONAL_PLACEHOLDER: Final[str] = "?"


class SqlType(IntEnum):
    """SQL type codes carried by typed NULL writes.

    Values follow the ``java.sql.Types`` constants, which most drivers and
    bridges (JDBC, ODBC, ADBC) understand.
    """

    BIT = -7
    TINYINT = -6
    SMALLINT = 5
    INTEGER = 4
    BIGINT = -5
    FLOAT = 6
    REAL = 7
    DOUBLE = 8
    NUMERIC = 2
    DECIMAL = 3
    CHAR = 1
    VARCHAR = 12
    LONGVARCHAR = -1
    DATE = 91
    TIME = 92
    TIMESTAMP = 93
    BINARY = -2
    VARBINARY = -3
    NULL = 0
    BLOB = 2004
    CLOB = 2005
    BOOLEAN = 16

    def __str__(self) -> str:
        return self.name


class ListParam:
    """A placeholder that expands to ``count`` comma separated positions."""

    __slots__ = ("count", "name")

    def __init__(self, name: str, count: int) -> None:
        if count < 1:
            msg = f"List parameter {name!r} must hold at least one element, got {count}"
            raise ValueError(msg)
        self.name = name
        self.count = count

    @property
    def width(self) -> int:
        """Number of statement positions one occurrence of the placeholder occupies."""
        return self.count

    def render(self) -> str:
        return ", ".join([POSITIONAL_PLACEHOLDER] * self.count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.name == other.name and self.count == other.count

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name, self.count))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, count={self.count!r})"


class TupleParam:
    """A placeholder that expands to ``count`` parenthesized groups of columns.

    ``(?, ?), (?, ?)`` for two rows of two columns. Used for multi-row inserts.
    """

    __slots__ = ("columns", "count", "name", "offsets")

    def __init__(self, name: str, columns: "tuple[str, ...] | list[str]", count: int) -> None:
        if count < 1:
            msg = f"Tuple parameter {name!r} must hold at least one row, got {count}"
            raise ValueError(msg)
        if not columns:
            msg = f"Tuple parameter {name!r} must declare at least one column"
            raise ValueError(msg)
        if len(set(columns)) != len(columns):
            msg = f"Tuple parameter {name!r} declares duplicate columns: {list(columns)!r}"
            raise ValueError(msg)
        self.name = name
        self.columns = tuple(columns)
        self.count = count
        self.offsets = {column: offset for offset, column in enumerate(self.columns)}

    @property
    def row_width(self) -> int:
        return len(self.columns)

    @property
    def width(self) -> int:
        return self.count * len(self.columns)

    def render(self) -> str:
        group = "(" + ", ".join([POSITIONAL_PLACEHOLDER] * len(self.columns)) + ")"
        return ", ".join([group] * self.count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.name == other.name and self.columns == other.columns and self.count == other.count

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name, self.columns, self.count))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, columns={self.columns!r}, count={self.count!r})"


class PlaceholderInfo:
    """A named placeholder found in SQL text."""

    __slots__ = ("end", "name", "ordinal", "start")

    def __init__(self, name: str, start: int, end: int, ordinal: int) -> None:
        self.name = name
        self.start = start
        self.end = end
        self.ordinal = ordinal

    @property
    def placeholder_text(self) -> str:
        return f":{self.name}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.name == other.name and self.start == other.start and self.ordinal == other.ordinal

    def __hash__(self) -> int:
        return hash((self.name, self.start, self.ordinal))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, start={self.start!r}, "
            f"end={self.end!r}, ordinal={self.ordinal!r})"
        )


def placeholder_width(param: "Optional[ListParam | TupleParam]") -> int:
    """Positions consumed by one occurrence of a placeholder."""
    return 1 if param is None else param.width
