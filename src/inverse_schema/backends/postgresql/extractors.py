"""PostgreSQL catalog extractors."""

import logging
from typing import Any, Optional

from ...base import BaseExtractor
from ...base.models import (
    Column,
    Constraint,
    ConstraintType,
    Datatype,
    Enum,
    EnumValue,
    UserDefinedType,
)
from ...context import ParseContext
from ...exceptions import UnsupportedConstraintError
from .datatypes import classify

logger = logging.getLogger(__name__)


class TableNameExtractor(BaseExtractor):
    """Lists the tables of a namespace."""

    def extract(self, ctx: Optional[ParseContext]) -> list[str]:
        """Get table names, sorted by name."""
        query = """
            SELECT tablename
            FROM pg_catalog.pg_tables
            WHERE schemaname = %s
            ORDER BY tablename
        """
        rows = self._query(ctx, query, (self.schema_name,))
        names = [self._field(row, "tablename") for row in rows]
        logger.info(f"Found {len(names)} tables in {self.schema_name}")
        return names


class ColumnExtractor(BaseExtractor):
    """Extracts column metadata for one table."""

    def extract(self, ctx: Optional[ParseContext], table_name: str) -> list[Column]:
        """Get the columns of a table in catalog row order."""
        query = """
            SELECT
                c.ordinal_position,
                c.column_name,
                c.column_default,
                c.is_nullable,
                c.data_type,
                e.data_type AS element_type,
                e.udt_schema AS element_udt_schema,
                e.udt_name AS element_udt_name,
                c.character_maximum_length,
                c.udt_schema,
                c.udt_name,
                pg_catalog.col_description(
                    format('%%I.%%I', c.table_schema, c.table_name)::regclass,
                    c.ordinal_position::int
                ) AS column_comment
            FROM information_schema.columns c
            LEFT JOIN information_schema.element_types e
                ON (c.table_catalog, c.table_schema, c.table_name, 'TABLE', c.dtd_identifier)
                = (e.object_catalog, e.object_schema, e.object_name, e.object_type,
                   e.collection_type_identifier)
            WHERE c.table_schema = %s AND c.table_name = %s
            ORDER BY c.ordinal_position
        """
        rows = self._query(ctx, query, (self.schema_name, table_name))
        columns = [self._build_column(row) for row in rows]
        logger.debug(f"Found {len(columns)} columns in {table_name}")
        return columns

    def _build_column(self, row: dict[str, Any]) -> Column:
        """Normalize one information_schema.columns row."""
        datatype_raw = self._field(row, "data_type")
        column = Column(
            ordinal_position=self._field(row, "ordinal_position"),
            name=self._field(row, "column_name"),
            datatype_raw=datatype_raw,
            datatype=classify(datatype_raw),
        )

        comment = self._field(row, "column_comment")
        if comment is not None:
            column.comments = comment
        max_length = self._field(row, "character_maximum_length")
        if max_length is not None:
            column.character_max_length = max_length
        if self._field(row, "is_nullable") == "YES":
            column.is_nullable = True
        default = self._field(row, "column_default")
        if default:
            column.has_default = True
            column.default = default

        if column.datatype is Datatype.USER_DEFINED:
            column.is_user_defined = True
            column.user_defined_type = UserDefinedType(
                name=self._field(row, "udt_name"),
                schema=self._field(row, "udt_schema"),
            )

        if column.datatype is Datatype.ARRAY:
            # The column's type becomes the element type; arrayness is a flag
            column.is_array = True
            column.datatype = classify(self._field(row, "element_type"))
            if column.datatype is Datatype.USER_DEFINED:
                column.is_user_defined = True
                column.user_defined_type = UserDefinedType(
                    name=self._field(row, "element_udt_name"),
                    schema=self._field(row, "element_udt_schema"),
                )

        return column


class ConstraintExtractor(BaseExtractor):
    """Extracts primary key, foreign key and unique constraints for one table."""

    def extract(self, ctx: Optional[ParseContext], table_name: str) -> list[Constraint]:
        """Get one constraint record per constrained column."""
        query = """
            SELECT
                con.conname AS constraint_name,
                CASE con.contype
                    WHEN 'p' THEN 'PRIMARY KEY'
                    WHEN 'f' THEN 'FOREIGN KEY'
                    WHEN 'u' THEN 'UNIQUE'
                END AS constraint_type,
                a.attname AS column_name,
                fc.relname AS foreign_table_name,
                fa.attname AS foreign_column_name
            FROM pg_catalog.pg_constraint con
            CROSS JOIN LATERAL unnest(con.conkey, con.confkey)
                WITH ORDINALITY AS k(attnum, foreign_attnum, position)
            JOIN pg_catalog.pg_attribute a
                ON a.attrelid = con.conrelid AND a.attnum = k.attnum
            LEFT JOIN pg_catalog.pg_class fc
                ON fc.oid = con.confrelid
            LEFT JOIN pg_catalog.pg_attribute fa
                ON fa.attrelid = con.confrelid AND fa.attnum = k.foreign_attnum
            WHERE con.conrelid = format('%%I.%%I', %s, %s)::regclass
            AND con.contype IN ('p', 'f', 'u')
            ORDER BY con.conname, k.position
        """
        rows = self._query(ctx, query, (self.schema_name, table_name))
        constraints = [self._build_constraint(table_name, row) for row in rows]
        logger.debug(f"Found {len(constraints)} constraint columns in {table_name}")
        return constraints

    def _build_constraint(self, table_name: str, row: dict[str, Any]) -> Constraint:
        """Normalize one constraint/column row."""
        label = self._field(row, "constraint_type")
        try:
            constraint_type = ConstraintType(label)
        except ValueError:
            raise UnsupportedConstraintError(label) from None

        foreign_tablename = ""
        foreign_columnname = ""
        if constraint_type is ConstraintType.FOREIGN_KEY:
            foreign_tablename = self._field(row, "foreign_table_name") or ""
            foreign_columnname = self._field(row, "foreign_column_name") or ""

        return Constraint(
            name=self._field(row, "constraint_name"),
            type=constraint_type,
            tablename=table_name,
            columnname=self._field(row, "column_name"),
            foreign_tablename=foreign_tablename,
            foreign_columnname=foreign_columnname,
        )


class EnumExtractor(BaseExtractor):
    """Extracts enumerated types of a namespace."""

    def extract(self, ctx: Optional[ParseContext]) -> list[Enum]:
        """Get enums sorted by name, each with values in sort order."""
        query = """
            SELECT
                t.typname AS type_name,
                e.enumsortorder AS enum_order,
                e.enumlabel AS enum_value
            FROM pg_catalog.pg_type t
            JOIN pg_catalog.pg_enum e ON t.oid = e.enumtypid
            JOIN pg_catalog.pg_namespace n ON n.oid = t.typnamespace
            WHERE n.nspname = %s
            ORDER BY t.typname, e.enumsortorder
        """
        rows = self._query(ctx, query, (self.schema_name,))

        enums_by_name: dict[str, Enum] = {}
        for row in rows:
            name = self._field(row, "type_name")
            enum = enums_by_name.setdefault(name, Enum(name=name))
            enum.values.append(
                EnumValue(
                    label=self._field(row, "enum_value"),
                    order=self._field(row, "enum_order"),
                )
            )

        for enum in enums_by_name.values():
            enum.values.sort(key=lambda value: value.order)
        enums = sorted(enums_by_name.values(), key=lambda enum: enum.name)
        logger.info(f"Found {len(enums)} enums in {self.schema_name}")
        return enums
