"""Classification of PostgreSQL type names."""

from ...base.models import Datatype

# Keys are information_schema.columns.data_type values
POSTGRES_DATATYPES: dict[str, Datatype] = {
    "USER-DEFINED": Datatype.USER_DEFINED,
    "ARRAY": Datatype.ARRAY,
    "boolean": Datatype.BOOLEAN,
    "smallint": Datatype.SMALLINT,
    "integer": Datatype.INT,
    "bigint": Datatype.BIGINT,
    "numeric": Datatype.NUMERIC,
    "text": Datatype.TEXT,
    "character varying": Datatype.VARCHAR,
    "json": Datatype.JSON,
    "jsonb": Datatype.JSONB,
    "uuid": Datatype.UUID,
    "date": Datatype.DATE,
    "timestamp without time zone": Datatype.TIMESTAMP,
    "timestamp with time zone": Datatype.TIMESTAMPTZ,
}


def classify(raw: str) -> Datatype:
    """Map a catalog type name to a Datatype; unmapped names are UNKNOWN."""
    return POSTGRES_DATATYPES.get(raw, Datatype.UNKNOWN)
