"""Name to position resolution for a prepared statement.

A :class:`ParameterTable` is computed once per statement preparation and is
read-only afterwards. Positions are 1-based, matching statement parameter
indexing. A name maps to several positions when its placeholder occurs more
than once in the SQL text. For list and tuple placeholders each position is
the start of a contiguous run.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Optional

from mypy_extensions import mypyc_attr
from typing_extensions import TypeVar

from sqlrelate.parameters.types import ListParam, TupleParam, placeholder_width

__all__ = ("ParameterTable",)

ParamT = TypeVar("ParamT", ListParam, TupleParam)


def _index_params(params: "Optional[Iterable[ParamT] | Mapping[str, ParamT]]") -> "dict[str, ParamT]":
    if not params:
        return {}
    if isinstance(params, Mapping):
        return dict(params)
    return {param.name: param for param in params}


@mypyc_attr(allow_interpreted_subclasses=False)
class ParameterTable:
    """Immutable snapshot of placeholder positions for one statement."""

    __slots__ = ("_list_params", "_names", "_size", "_tuple_params")

    def __init__(
        self,
        names: "Mapping[str, Sequence[int]]",
        list_params: "Optional[Iterable[ListParam] | Mapping[str, ListParam]]" = None,
        tuple_params: "Optional[Iterable[TupleParam] | Mapping[str, TupleParam]]" = None,
        size: Optional[int] = None,
    ) -> None:
        """Initialize the table.

        Args:
            names: Base positions per parameter name.
            list_params: List placeholders, keyed by name or given as an iterable.
            tuple_params: Tuple placeholders, keyed by name or given as an iterable.
            size: Total number of positional parameters in the statement. Derived from
                the highest position in use when omitted.

        Raises:
            ValueError: If a position is not a positive integer, a name has no positions,
                or a name is declared both as a list and as a tuple placeholder.
        """
        frozen: dict[str, tuple[int, ...]] = {}
        for name, positions in names.items():
            resolved = tuple(positions)
            if not resolved:
                msg = f"Parameter {name!r} has no positions"
                raise ValueError(msg)
            if any(position < 1 for position in resolved):
                msg = f"Parameter {name!r} has non-positive positions {resolved!r}; positions are 1-based"
                raise ValueError(msg)
            frozen[name] = resolved

        indexed_lists = _index_params(list_params)
        indexed_tuples = _index_params(tuple_params)
        overlap = set(indexed_lists) & set(indexed_tuples)
        if overlap:
            msg = f"Parameters declared as both list and tuple placeholders: {sorted(overlap)!r}"
            raise ValueError(msg)

        self._names: Mapping[str, tuple[int, ...]] = MappingProxyType(frozen)
        self._list_params: Mapping[str, ListParam] = MappingProxyType(indexed_lists)
        self._tuple_params: Mapping[str, TupleParam] = MappingProxyType(indexed_tuples)
        self._size = self._highest_position() if size is None else size

    @classmethod
    def build(
        cls,
        placeholders: "Iterable[str]",
        list_params: "Optional[Iterable[ListParam] | Mapping[str, ListParam]]" = None,
        tuple_params: "Optional[Iterable[TupleParam] | Mapping[str, TupleParam]]" = None,
    ) -> "ParameterTable":
        """Assign positions to placeholder names in order of appearance.

        Positions start at 1. An ordinary placeholder takes one position, a list
        placeholder takes ``count`` positions and a tuple placeholder takes
        ``count * len(columns)`` positions.

        Args:
            placeholders: Placeholder names in the order they occur in the SQL text.
            list_params: List placeholders with their element counts.
            tuple_params: Tuple placeholders with their columns and row counts.

        Returns:
            The computed table.
        """
        indexed_lists = _index_params(list_params)
        indexed_tuples = _index_params(tuple_params)
        names: dict[str, list[int]] = {}
        position = 1
        for name in placeholders:
            names.setdefault(name, []).append(position)
            position += placeholder_width(indexed_lists.get(name) or indexed_tuples.get(name))
        return cls(names, indexed_lists, indexed_tuples, size=position - 1)

    def _highest_position(self) -> int:
        highest = 0
        for name, positions in self._names.items():
            width = placeholder_width(self._list_params.get(name) or self._tuple_params.get(name))
            highest = max(highest, max(positions) + width - 1)
        return highest

    @property
    def names(self) -> "Mapping[str, tuple[int, ...]]":
        """Read-only view of base positions per name."""
        return self._names

    @property
    def list_params(self) -> "Mapping[str, ListParam]":
        return self._list_params

    @property
    def tuple_params(self) -> "Mapping[str, TupleParam]":
        return self._tuple_params

    @property
    def size(self) -> int:
        """Number of positional parameters the statement expects."""
        return self._size

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> "Iterator[str]":
        return iter(self._names)

    def positions(self, name: str) -> "tuple[int, ...]":
        """Base positions for ``name``; empty when the name is unknown."""
        return self._names.get(name, ())

    def element_positions(self, name: str, index: int) -> "tuple[int, ...]":
        """Positions of the ``index``-th element of a list value, one per occurrence of ``name``."""
        return tuple(base + index for base in self.positions(name))

    def list_positions(self, name: str, length: int) -> "list[tuple[int, int]]":
        """Positions written when binding a list of ``length`` elements to ``name``.

        Returns:
            ``(position, element_index)`` pairs ordered by element, then by occurrence.
            ``length * len(positions(name))`` pairs, or none for an unknown name.
        """
        bases = self.positions(name)
        return [(base + index, index) for index in range(length) for base in bases]

    def list_param(self, name: str) -> Optional[ListParam]:
        return self._list_params.get(name)

    def tuple_param(self, name: str) -> Optional[TupleParam]:
        return self._tuple_params.get(name)

    def row_bases(self, name: str, row: int) -> "tuple[int, ...]":
        """Start positions of row ``row`` of the tuple placeholder ``name``."""
        param = self._tuple_params.get(name)
        if param is None:
            return ()
        return tuple(base + row * param.row_width for base in self.positions(name))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return (
            dict(self._names) == dict(other._names)
            and dict(self._list_params) == dict(other._list_params)
            and dict(self._tuple_params) == dict(other._tuple_params)
            and self._size == other._size
        )

    def __hash__(self) -> int:
        return hash((tuple(sorted(self._names.items())), self._size))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(names={dict(self._names)!r}, list_params={list(self._list_params.values())!r}, "
            f"tuple_params={list(self._tuple_params.values())!r}, size={self._size!r})"
        )
