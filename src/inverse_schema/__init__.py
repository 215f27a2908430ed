"""Catalog introspection into a normalized schema model for code generation."""

from .base.models import (
    Column,
    Constraint,
    ConstraintType,
    Datatype,
    Enum,
    EnumValue,
    Schema,
    Table,
    UserDefinedType,
)
from .context import ParseContext
from .parser import SchemaParser, parse_schema

__version__ = "0.1.0"

SUPPORTED_BACKENDS = ["postgresql"]

__all__ = [
    "Column",
    "Constraint",
    "ConstraintType",
    "Datatype",
    "Enum",
    "EnumValue",
    "ParseContext",
    "Schema",
    "SchemaParser",
    "Table",
    "UserDefinedType",
    "parse_schema",
]
