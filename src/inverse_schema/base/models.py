"""Dataclasses for the normalized schema model."""

from dataclasses import dataclass, field
from enum import Enum as _Enum
from typing import Optional


class Datatype(_Enum):
    """Semantic column type, independent of the backend's type names."""

    UNKNOWN = "unknown"
    USER_DEFINED = "userdefined"
    ARRAY = "array"
    BIGINT = "bigint"
    INT = "int"
    SMALLINT = "smallint"
    DECIMAL = "decimal"
    NUMERIC = "numeric"
    VARIABLE_NUMERIC = "variable_numeric"
    JSONB = "jsonb"
    JSON = "json"
    TEXT = "text"
    VARCHAR = "varchar"
    BOOLEAN = "boolean"
    DATE = "date"
    TIMESTAMP = "timestamp"
    TIMESTAMPTZ = "timestamptz"
    UUID = "uuid"


class ConstraintType(_Enum):
    """Constraint kinds, valued by their catalog labels."""

    CHECK = "CHECK"
    FOREIGN_KEY = "FOREIGN KEY"
    PRIMARY_KEY = "PRIMARY KEY"
    UNIQUE = "UNIQUE"
    TRIGGER = "TRIGGER"
    EXCLUSION = "EXCLUSION"


@dataclass(frozen=True)
class Constraint:
    """Represents one column's participation in a table constraint."""

    name: str
    type: ConstraintType
    tablename: str
    columnname: str
    foreign_tablename: str = ""
    foreign_columnname: str = ""


@dataclass(frozen=True)
class UserDefinedType:
    """The underlying type of a user-defined column."""

    name: str
    schema: str

    @property
    def full_name(self) -> str:
        return f"{self.schema}.{self.name}"


@dataclass
class Column:
    """Represents a table column.

    ``is_primary``, ``is_unique`` and ``is_reference`` are derived from the
    attached constraints, so they can never disagree with them.
    """

    ordinal_position: int
    name: str
    datatype_raw: str
    datatype: Datatype = Datatype.UNKNOWN
    is_nullable: bool = False
    has_default: bool = False
    default: Optional[str] = None
    character_max_length: Optional[int] = None
    is_array: bool = False
    is_user_defined: bool = False
    user_defined_type: Optional[UserDefinedType] = None
    comments: Optional[str] = None
    constraints: list[Constraint] = field(default_factory=list)

    def _constraints_of(self, constraint_type: ConstraintType) -> list[Constraint]:
        return [c for c in self.constraints if c.type is constraint_type]

    @property
    def is_primary(self) -> bool:
        return bool(self._constraints_of(ConstraintType.PRIMARY_KEY))

    @property
    def is_unique(self) -> bool:
        return bool(self._constraints_of(ConstraintType.UNIQUE))

    @property
    def is_reference(self) -> bool:
        return self._reference is not None

    @property
    def _reference(self) -> Optional[Constraint]:
        # Last foreign key wins when a column references several tables
        references = self._constraints_of(ConstraintType.FOREIGN_KEY)
        return references[-1] if references else None

    @property
    def foreign_tablename(self) -> str:
        reference = self._reference
        return reference.foreign_tablename if reference else ""

    @property
    def foreign_columnname(self) -> str:
        reference = self._reference
        return reference.foreign_columnname if reference else ""


@dataclass
class Table:
    """Represents a database table with columns in declaration order."""

    name: str
    columns: list[Column] = field(default_factory=list)

    @property
    def columns_by_name(self) -> dict[str, Column]:
        """Name-keyed view over ``columns``."""
        return {column.name: column for column in self.columns}

    def column(self, name: str) -> Column:
        """Get a column by name, raising KeyError if absent."""
        return self.columns_by_name[name]


@dataclass(frozen=True)
class EnumValue:
    """One label of an enumerated type."""

    label: str
    order: float


@dataclass
class Enum:
    """Represents an enumerated type."""

    name: str
    values: list[EnumValue] = field(default_factory=list)

    @property
    def labels(self) -> list[str]:
        return [value.label for value in self.values]


@dataclass
class Schema:
    """Tables and enums of one namespace, as of a single parse."""

    tables: list[Table] = field(default_factory=list)
    enums: list[Enum] = field(default_factory=list)

    def table(self, name: str) -> Optional[Table]:
        """Find a table by name."""
        for table in self.tables:
            if table.name == name:
                return table
        return None

    def enum(self, name: str) -> Optional[Enum]:
        """Find an enum by name."""
        for enum in self.enums:
            if enum.name == name:
                return enum
        return None
