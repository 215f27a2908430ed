"""Conversion of the schema model to JSON-ready dictionaries.

Empty, false and missing values are omitted, so a column only lists the
attributes that actually apply to it.
"""

from typing import Any

from .base.models import Column, Constraint, Enum, Schema, Table


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value not in (None, "", False, [], {})}


def constraint_to_dict(constraint: Constraint) -> dict[str, Any]:
    return _compact({
        "name": constraint.name,
        "type": constraint.type.value,
        "tablename": constraint.tablename,
        "columnname": constraint.columnname,
        "foreign_tablename": constraint.foreign_tablename,
        "foreign_columnname": constraint.foreign_columnname,
    })


def column_to_dict(column: Column) -> dict[str, Any]:
    udt = column.user_defined_type
    return _compact({
        "ordinal_position": column.ordinal_position,
        "name": column.name,
        "constraints": [constraint_to_dict(c) for c in column.constraints],
        "is_reference": column.is_reference,
        "foreign_tablename": column.foreign_tablename,
        "foreign_columnname": column.foreign_columnname,
        "is_primary": column.is_primary,
        "is_unique": column.is_unique,
        "has_default": column.has_default,
        "default": column.default,
        "is_nullable": column.is_nullable,
        "datatype_raw": column.datatype_raw,
        "datatype": column.datatype.value,
        "is_user_defined": column.is_user_defined,
        "is_array": column.is_array,
        "character_max_length": column.character_max_length,
        "user_defined_type": _compact({"name": udt.name, "schema": udt.schema}) if udt else None,
        "comments": column.comments,
    })


def table_to_dict(table: Table) -> dict[str, Any]:
    return _compact({
        "name": table.name,
        "columns": [column_to_dict(c) for c in table.columns],
    })


def enum_to_dict(enum: Enum) -> dict[str, Any]:
    return _compact({
        "name": enum.name,
        "values": [{"label": v.label, "order": v.order} for v in enum.values],
    })


def schema_to_dict(schema: Schema) -> dict[str, Any]:
    """Convert a whole schema; tables and enums keep their order."""
    return {
        "tables": [table_to_dict(t) for t in schema.tables],
        "enums": [enum_to_dict(e) for e in schema.enums],
    }
