"""PostgreSQL implementation of the adapter capability."""

import logging
from typing import Optional

from ...base import BaseAdapter
from ...base.connection import BaseConnection
from ...base.models import Enum, Table
from ...base.reconcile import index_columns, materialize_table, reconcile_constraints
from ...context import ParseContext
from .extractors import ColumnExtractor, ConstraintExtractor, EnumExtractor, TableNameExtractor

logger = logging.getLogger(__name__)


class PostgreSQLAdapter(BaseAdapter):
    """Reads tables and enums of one namespace from the PostgreSQL catalog."""

    def __init__(self, connection: BaseConnection, schema_name: str = "public"):
        super().__init__(connection, schema_name)
        self.table_name_extractor = TableNameExtractor(connection, schema_name)
        self.column_extractor = ColumnExtractor(connection, schema_name)
        self.constraint_extractor = ConstraintExtractor(connection, schema_name)
        self.enum_extractor = EnumExtractor(connection, schema_name)

    def list_tables(self, ctx: Optional[ParseContext] = None) -> list[Table]:
        """Assemble every table of the namespace, one after another."""
        return [self.assemble_table(ctx, name) for name in self.table_name_extractor.extract(ctx)]

    def list_enums(self, ctx: Optional[ParseContext] = None) -> list[Enum]:
        return self.enum_extractor.extract(ctx)

    def assemble_table(self, ctx: Optional[ParseContext], table_name: str) -> Table:
        """Extract one table with constraints reconciled onto its columns."""
        logger.debug(f"Assembling table {self.schema_name}.{table_name}")
        index = index_columns(self.column_extractor.extract(ctx, table_name))
        reconcile_constraints(index, self.constraint_extractor.extract(ctx, table_name))
        return materialize_table(table_name, index)
