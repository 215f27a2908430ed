"""Base classes and shared interfaces."""

from .adapter import BaseAdapter
from .connection import BaseConnection
from .extractor import BaseExtractor
from .models import (
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

__all__ = [
    "BaseAdapter",
    "BaseConnection",
    "BaseExtractor",
    "Schema",
    "Table",
    "Column",
    "Constraint",
    "ConstraintType",
    "Datatype",
    "Enum",
    "EnumValue",
    "UserDefinedType",
]
