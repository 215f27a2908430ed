"""Shared fixtures: an in-memory connection serving canned catalog rows."""

from typing import Any, Optional

import pytest
from inverse_schema.base.connection import BaseConnection
from inverse_schema.context import ParseContext

TABLES_QUERY = "pg_catalog.pg_tables"
COLUMNS_QUERY = "information_schema.columns"
CONSTRAINTS_QUERY = "pg_catalog.pg_constraint"
ENUMS_QUERY = "pg_catalog.pg_enum"


class FakeConnection(BaseConnection):
    """Answers catalog queries by matching a fragment of the SQL text.

    A response is a list of row dicts, an exception instance to raise, or a
    callable taking (query, params). ``table`` restricts a response to
    queries whose parameters include that table name.
    """

    def __init__(self, config: Any = None):
        super().__init__(config, connection=object())
        self.responses: list[tuple[str, Optional[str], Any]] = []
        self.queries: list[tuple[str, tuple]] = []
        self.cancel_calls = 0

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        pass

    @property
    def connection(self) -> Any:
        return self._connection

    def cancel(self) -> None:
        self.cancel_calls += 1

    def respond(self, fragment: str, result: Any, table: Optional[str] = None) -> "FakeConnection":
        self.responses.append((fragment, table, result))
        return self

    def execute_dict(
        self, query: str, params: tuple = (), ctx: Optional[ParseContext] = None
    ) -> list[dict[str, Any]]:
        with self._watch(ctx):
            self.queries.append((query, params))
            for fragment, table, result in self.responses:
                if fragment not in query:
                    continue
                if table is not None and table not in params:
                    continue
                if isinstance(result, Exception):
                    raise result
                if callable(result):
                    return result(query, params)
                return [dict(row) for row in result]
            return []

    def queried(self, fragment: str) -> int:
        """Count queries containing ``fragment``."""
        return sum(1 for query, _ in self.queries if fragment in query)


def column_row(ordinal_position: int, name: str, data_type: str, **overrides: Any) -> dict[str, Any]:
    """An information_schema.columns row with everything optional left empty."""
    row = {
        "ordinal_position": ordinal_position,
        "column_name": name,
        "column_default": None,
        "is_nullable": "NO",
        "data_type": data_type,
        "element_type": None,
        "element_udt_schema": None,
        "element_udt_name": None,
        "character_maximum_length": None,
        "udt_schema": "pg_catalog",
        "udt_name": data_type,
        "column_comment": None,
    }
    row.update(overrides)
    return row


def constraint_row(
    name: str,
    constraint_type: str,
    column_name: str,
    foreign_table_name: Optional[str] = None,
    foreign_column_name: Optional[str] = None,
) -> dict[str, Any]:
    return {
        "constraint_name": name,
        "constraint_type": constraint_type,
        "column_name": column_name,
        "foreign_table_name": foreign_table_name,
        "foreign_column_name": foreign_column_name,
    }


def enum_row(type_name: str, order: float, label: str) -> dict[str, Any]:
    return {"type_name": type_name, "enum_order": order, "enum_value": label}


def users_catalog() -> FakeConnection:
    """Catalog with ``roles``, ``users`` and a ``status`` enum."""
    conn = FakeConnection()
    conn.respond(TABLES_QUERY, [{"tablename": "roles"}, {"tablename": "users"}])
    conn.respond(COLUMNS_QUERY, [
        column_row(1, "id", "integer"),
        column_row(2, "name", "text", is_nullable="YES"),
    ], table="roles")
    conn.respond(CONSTRAINTS_QUERY, [
        constraint_row("roles_pkey", "PRIMARY KEY", "id"),
    ], table="roles")
    conn.respond(COLUMNS_QUERY, [
        column_row(1, "id", "integer", column_default="nextval('users_id_seq'::regclass)"),
        column_row(2, "email", "character varying", character_maximum_length=255),
        column_row(3, "role_id", "integer", is_nullable="YES"),
        column_row(4, "status", "USER-DEFINED", udt_schema="public", udt_name="status"),
    ], table="users")
    conn.respond(CONSTRAINTS_QUERY, [
        constraint_row("users_email_key", "UNIQUE", "email"),
        constraint_row("users_pkey", "PRIMARY KEY", "id"),
        constraint_row("users_role_id_fkey", "FOREIGN KEY", "role_id", "roles", "id"),
    ], table="users")
    conn.respond(ENUMS_QUERY, [
        enum_row("status", 2, "done"),
        enum_row("status", 1, "pending"),
    ])
    return conn


@pytest.fixture
def fake_connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def catalog() -> FakeConnection:
    return users_catalog()
