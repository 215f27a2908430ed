"""Abstract base class for catalog extractors."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from ..context import ParseContext
from ..exceptions import ExtractionError
from .connection import BaseConnection


class BaseExtractor(ABC):
    """Abstract base class for extracting catalog metadata of one namespace."""

    def __init__(self, connection: BaseConnection, schema_name: str):
        self.connection = connection
        self.schema_name = schema_name
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def extract(self, ctx: Optional[ParseContext], *args: Any) -> list[Any]:
        """Extract all objects of this type."""
        pass

    def _query(
        self, ctx: Optional[ParseContext], query: str, params: tuple = ()
    ) -> list[dict[str, Any]]:
        """Run a catalog query, honoring the context."""
        return self.connection.execute_dict(query, params, ctx=ctx)

    @staticmethod
    def _field(row: dict[str, Any], name: str) -> Any:
        """Read a required field from a catalog row."""
        try:
            return row[name]
        except KeyError as e:
            raise ExtractionError(f"catalog row is missing field {name!r}") from e
