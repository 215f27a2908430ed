"""PostgreSQL backend."""

from .adapter import PostgreSQLAdapter
from .connection import PostgreSQLConnection
from .datatypes import POSTGRES_DATATYPES, classify

__all__ = [
    "PostgreSQLAdapter",
    "PostgreSQLConnection",
    "POSTGRES_DATATYPES",
    "classify",
]
