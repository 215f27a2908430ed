"""PostgreSQL database connection."""

import logging
from contextlib import contextmanager
from typing import Any, Generator, Optional

import psycopg
from psycopg.pq import TransactionStatus
from psycopg.rows import dict_row

from ...base.connection import BaseConnection
from ...config import IntrospectConfig
from ...context import ParseContext
from ...exceptions import ConnectionError

logger = logging.getLogger(__name__)


class PostgreSQLConnection(BaseConnection):
    """PostgreSQL connection using psycopg3."""

    def __init__(self, config: IntrospectConfig, connection: Optional[psycopg.Connection] = None):
        super().__init__(config, connection)

    def connect(self) -> None:
        """Establish database connection."""
        if self._connection is not None:
            return
        try:
            conn_params = {
                "host": self.config.host,
                "port": self.config.port or 5432,
                "dbname": self.config.database,
                "user": self.config.username,
                # Catalog reads only; no transaction is left open
                "autocommit": True,
            }
            if self.config.password:
                conn_params["password"] = self.config.password

            logger.debug(f"Connecting to PostgreSQL: {self.config.host}:{conn_params['port']}/{self.config.database}")
            self._connection = psycopg.connect(**conn_params)
            logger.info(f"Connected to {self.config.database}")
        except psycopg.Error as e:
            raise ConnectionError(f"Failed to connect to database: {e}") from e

    def disconnect(self) -> None:
        """Close database connection."""
        if self._connection and self._owned:
            self._connection.close()
            self._connection = None
            logger.info("Disconnected from database")

    @property
    def connection(self) -> psycopg.Connection:
        """Get the active connection."""
        if not self._connection:
            raise ConnectionError("Not connected to database")
        return self._connection

    def cancel(self) -> None:
        """Ask the server to abort the running statement."""
        logger.debug("Cancelling in-flight catalog query")
        self.connection.cancel()

    @contextmanager
    def _hand_back(self) -> Generator[None, None, None]:
        """Close the transaction a query opened on an idle, non-autocommit connection."""
        conn = self.connection
        opened_here = (
            not conn.autocommit
            and conn.info.transaction_status == TransactionStatus.IDLE
        )
        try:
            yield
        finally:
            if opened_here:
                conn.rollback()

    def execute_dict(
        self, query: str, params: tuple = (), ctx: Optional[ParseContext] = None
    ) -> list[dict[str, Any]]:
        """Execute a query and return results as dictionaries."""
        with self._hand_back(), self._watch(ctx), self.connection.cursor(row_factory=dict_row) as cur:
            cur.execute(query, params)
            return cur.fetchall()

    def execute_scalar(self, query: str, params: tuple = ()) -> Any:
        """Execute a query and return a single value."""
        with self._hand_back():
            return super().execute_scalar(query, params)

    def get_version(self) -> str:
        """Get PostgreSQL version."""
        return self.execute_scalar("SELECT version()") or "Unknown"
