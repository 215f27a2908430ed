"""Database backend implementations."""

from typing import TYPE_CHECKING, Type

from ..exceptions import BackendNotAvailableError, ConfigurationError

if TYPE_CHECKING:
    from ..base import BaseAdapter, BaseConnection


def get_backend(db_type: str) -> tuple[Type["BaseConnection"], Type["BaseAdapter"]]:
    """
    Get the connection and adapter classes for a database type.

    Returns:
        Tuple of (ConnectionClass, AdapterClass)
    """
    if db_type == "postgresql":
        try:
            from .postgresql import PostgreSQLAdapter, PostgreSQLConnection
            return PostgreSQLConnection, PostgreSQLAdapter
        except ImportError as e:
            raise BackendNotAvailableError(
                f"PostgreSQL backend requires psycopg. Install with: pip install inverse-schema\n"
                f"Error: {e}"
            )

    else:
        raise ConfigurationError(
            f"Unknown database type: {db_type}. "
            f"Supported types: postgresql"
        )
