"""Result materialization: row access, decoders, builders and parsing strategies."""

from sqlrelate.result.builders import (
    BuilderFactory,
    BuilderSpec,
    DictBuilder,
    SequenceBuilder,
    builder_for,
    register_builder,
    resolve_builder,
)
from sqlrelate.result.cursor import IterableRowCursor
from sqlrelate.result.decoders import (
    ColumnDecoder,
    DecoderSpec,
    FunctionDecoder,
    SchemaDecoder,
    TupleDecoder,
    as_decoder,
    as_schema,
    column,
    column_option,
    columns,
)
from sqlrelate.result.materializer import (
    ResultParser,
    collection,
    limited_collection,
    multimap,
    one,
    optional,
    pair_collection,
    scalar,
)
from sqlrelate.result.row import SqlRow

__all__ = (
    "BuilderFactory",
    "BuilderSpec",
    "ColumnDecoder",
    "DecoderSpec",
    "DictBuilder",
    "FunctionDecoder",
    "IterableRowCursor",
    "ResultParser",
    "SchemaDecoder",
    "SequenceBuilder",
    "SqlRow",
    "TupleDecoder",
    "as_decoder",
    "as_schema",
    "builder_for",
    "collection",
    "column",
    "column_option",
    "columns",
    "limited_collection",
    "multimap",
    "one",
    "optional",
    "pair_collection",
    "register_builder",
    "resolve_builder",
    "scalar",
)
