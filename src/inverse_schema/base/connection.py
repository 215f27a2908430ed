"""Abstract base class for database connections."""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager, nullcontext
from typing import Any, Generator, Optional

from ..context import ParseContext

logger = logging.getLogger(__name__)


class BaseConnection(ABC):
    """Abstract base class for database connections.

    A connection may wrap one opened from ``config`` or one supplied by the
    caller. Caller-supplied connections are never closed here.
    """

    def __init__(self, config: Any, connection: Any = None):
        self.config = config
        self._connection = connection
        self._owned = connection is None

    @abstractmethod
    def connect(self) -> None:
        """Establish database connection."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close database connection."""
        pass

    @property
    @abstractmethod
    def connection(self) -> Any:
        """Get the active connection."""
        pass

    def cancel(self) -> None:
        """Interrupt the statement currently running, if the driver can."""
        pass

    @contextmanager
    def cursor(self) -> Generator[Any, None, None]:
        """Get a cursor context manager."""
        cur = self.connection.cursor()
        try:
            yield cur
        finally:
            cur.close()

    def _watch(self, ctx: Optional[ParseContext]):
        if ctx is None:
            return nullcontext()
        ctx.check()
        return ctx.watch(self.cancel)

    def execute_dict(
        self, query: str, params: tuple = (), ctx: Optional[ParseContext] = None
    ) -> list[dict[str, Any]]:
        """Execute a query and return results as dictionaries."""
        with self._watch(ctx), self.cursor() as cur:
            cur.execute(query, params)
            columns = [column[0] for column in cur.description]
            return [dict(zip(columns, row)) for row in cur.fetchall()]

    def execute_scalar(self, query: str, params: tuple = ()) -> Any:
        """Execute a query and return a single value."""
        with self.cursor() as cur:
            cur.execute(query, params)
            row = cur.fetchone()
            return row[0] if row else None

    def __enter__(self) -> "BaseConnection":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.disconnect()
