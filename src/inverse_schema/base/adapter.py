"""Abstract base class for backend adapters."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..context import ParseContext
from .connection import BaseConnection
from .models import Enum, Table


class BaseAdapter(ABC):
    """Catalog access for one backend and one namespace.

    New backends are supported by subclassing, never by branching inside
    the extraction logic of an existing adapter.
    """

    def __init__(self, connection: BaseConnection, schema_name: str):
        self.connection = connection
        self.schema_name = schema_name
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def list_tables(self, ctx: Optional[ParseContext] = None) -> list[Table]:
        """Extract every table of the namespace, fully assembled."""
        pass

    @abstractmethod
    def list_enums(self, ctx: Optional[ParseContext] = None) -> list[Enum]:
        """Extract every enumerated type of the namespace."""
        pass
