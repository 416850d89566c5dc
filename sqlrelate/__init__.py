"""SQLRelate: named parameter binding and typed result decoding for positional SQL drivers."""

from sqlrelate import adapters, binding, exceptions, parameters, protocols, result, utils
from sqlrelate.__metadata__ import __version__
from sqlrelate.adapters import SQLITE_CONFIG, DBAPIConfig, DBAPIRowCursor, DBAPIStatement, NamedQuery
from sqlrelate.binding import (
    BIG_DECIMAL,
    BIG_INT,
    BOOL,
    BYTE,
    BYTE_ARRAY,
    CHAR,
    DATE,
    DOUBLE,
    FLOAT,
    INT,
    LONG,
    SHORT,
    STRING,
    TIMESTAMP,
    UUID_TYPE,
    ScalarType,
    StatementBinder,
    TupleBinder,
)
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
)
from sqlrelate.parameters import (
    BinderConfig,
    ListParam,
    ParameterConverter,
    ParameterTable,
    PreparedSQL,
    SqlType,
    TupleParam,
)
from sqlrelate.result import (
    IterableRowCursor,
    ResultParser,
    SqlRow,
    as_schema,
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

__all__ = (
    "BIG_DECIMAL",
    "BIG_INT",
    "BOOL",
    "BYTE",
    "BYTE_ARRAY",
    "CHAR",
    "DATE",
    "DOUBLE",
    "FLOAT",
    "INT",
    "LONG",
    "SHORT",
    "SQLITE_CONFIG",
    "STRING",
    "TIMESTAMP",
    "UUID_TYPE",
    "BinderConfig",
    "ColumnNotFoundError",
    "ColumnTypeError",
    "DBAPIConfig",
    "DBAPIRowCursor",
    "DBAPIStatement",
    "DecodeError",
    "IterableRowCursor",
    "ListParam",
    "ListParameterError",
    "NamedQuery",
    "NotFoundError",
    "ParameterConverter",
    "ParameterError",
    "ParameterTable",
    "ParameterTypeError",
    "PreparedSQL",
    "ResultParser",
    "SQLRelateError",
    "ScalarType",
    "SqlRow",
    "SqlType",
    "StatementBinder",
    "TupleBinder",
    "TupleParam",
    "UnknownParameterError",
    "__version__",
    "adapters",
    "as_schema",
    "binding",
    "collection",
    "column",
    "column_option",
    "columns",
    "exceptions",
    "limited_collection",
    "multimap",
    "one",
    "optional",
    "pair_collection",
    "parameters",
    "protocols",
    "result",
    "scalar",
    "utils",
)
