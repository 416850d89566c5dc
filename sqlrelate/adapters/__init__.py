"""Driver adapters."""

from sqlrelate.adapters.dbapi import SQLITE_CONFIG, DBAPIConfig, DBAPIRowCursor, DBAPIStatement, NamedQuery

__all__ = ("SQLITE_CONFIG", "DBAPIConfig", "DBAPIRowCursor", "DBAPIStatement", "NamedQuery")
