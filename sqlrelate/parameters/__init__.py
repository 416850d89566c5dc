"""Named parameter bookkeeping.

Placeholder extraction, name to position tables and binder configuration.
"""

from sqlrelate.parameters.config import DEFAULT_BINDER_CONFIG, BinderConfig
from sqlrelate.parameters.converter import ParameterConverter, PreparedSQL
from sqlrelate.parameters.table import ParameterTable
from sqlrelate.parameters.types import POSITIONAL_PLACEHOLDER, ListParam, PlaceholderInfo, SqlType, TupleParam
from sqlrelate.parameters.validator import ParameterValidator

__all__ = (
    "DEFAULT_BINDER_CONFIG",
    "POSITIONAL_PLACEHOLDER",
    "BinderConfig",
    "ListParam",
    "ParameterConverter",
    "ParameterTable",
    "ParameterValidator",
    "PlaceholderInfo",
    "PreparedSQL",
    "SqlType",
    "TupleParam",
)
