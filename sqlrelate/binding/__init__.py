from sqlrelate.binding.statement import StatementBinder
from sqlrelate.binding.tuples import TupleBinder
from sqlrelate.binding.types import (
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
    SCALAR_TYPES,
    SHORT,
    STRING,
    TIMESTAMP,
    UUID_TYPE,
    ScalarType,
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
    "SCALAR_TYPES",
    "SHORT",
    "STRING",
    "TIMESTAMP",
    "UUID_TYPE",
    "ScalarType",
    "StatementBinder",
    "TupleBinder",
)
