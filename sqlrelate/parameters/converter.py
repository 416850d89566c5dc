"""Rewrite named SQL into positional SQL plus its parameter table."""

from collections.abc import Iterable, Mapping
from typing import Optional

from sqlrelate.parameters.table import ParameterTable
from sqlrelate.parameters.types import POSITIONAL_PLACEHOLDER, ListParam, TupleParam
from sqlrelate.parameters.validator import ParameterValidator
from sqlrelate.utils.logging import get_logger

__all__ = ("ParameterConverter", "PreparedSQL")

logger = get_logger("parameters.converter")


class PreparedSQL:
    """Positional SQL text and the table that maps names onto it."""

    __slots__ = ("named_sql", "sql", "table")

    def __init__(self, sql: str, table: ParameterTable, named_sql: str) -> None:
        self.sql = sql
        self.table = table
        self.named_sql = named_sql

    @property
    def parameter_count(self) -> int:
        return self.table.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.sql == other.sql and self.table == other.table and self.named_sql == other.named_sql

    def __hash__(self) -> int:
        return hash((self.sql, self.named_sql))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sql={self.sql!r}, table={self.table!r})"


class ParameterConverter:
    """Converts ``:name`` placeholders to ``?`` markers.

    List placeholders expand to ``?, ?, ?`` and tuple placeholders to
    ``(?, ?), (?, ?)``. The caller writes any surrounding parentheses for a
    list, e.g. ``WHERE id IN (:ids)``.
    """

    __slots__ = ("validator",)

    def __init__(self, validator: Optional[ParameterValidator] = None) -> None:
        self.validator = validator or ParameterValidator()

    def prepare(
        self,
        sql: str,
        list_params: "Optional[Iterable[ListParam] | Mapping[str, ListParam]]" = None,
        tuple_params: "Optional[Iterable[TupleParam] | Mapping[str, TupleParam]]" = None,
    ) -> PreparedSQL:
        """Prepare named SQL for a positional driver.

        Args:
            sql: SQL text with ``:name`` placeholders.
            list_params: Placeholders that take a list value, with their element counts.
            tuple_params: Placeholders that take rows of columns, with their row counts.

        Returns:
            The positional SQL and its parameter table.
        """
        table = ParameterTable.build(
            [info.name for info in self.validator.extract_parameters(sql)], list_params, tuple_params
        )
        parts: list[str] = []
        cursor = 0
        for info in self.validator.extract_parameters(sql):
            parts.append(sql[cursor : info.start])
            expanding = table.list_param(info.name) or table.tuple_param(info.name)
            parts.append(POSITIONAL_PLACEHOLDER if expanding is None else expanding.render())
            cursor = info.end
        parts.append(sql[cursor:])
        positional_sql = "".join(parts)

        declared = set(table.list_params) | set(table.tuple_params)
        unused = declared - set(table.names)
        if unused:
            logger.debug("Expanding parameters without a placeholder: %s", sorted(unused))
        logger.debug("Prepared SQL with %d positional parameters", table.size)
        return PreparedSQL(positional_sql, table, sql)
