"""Tests for the command line interface."""

import json
from unittest.mock import patch

from click.testing import CliRunner
from conftest import COLUMNS_QUERY, FakeConnection, users_catalog
from inverse_schema.backends.postgresql import PostgreSQLAdapter
from inverse_schema.cli import cli
from inverse_schema.exceptions import BackendNotAvailableError

CONNECTION_ARGS = ["-h", "localhost", "-d", "app", "-u", "postgres"]


class CannedConnection(FakeConnection):
    """FakeConnection built from a config, as get_backend classes are."""

    def __init__(self, config):
        super().__init__(config)
        self.responses = users_catalog().responses

    def get_version(self):
        return "PostgreSQL 16.0"


class BrokenConnection(FakeConnection):
    def __init__(self, config):
        super().__init__(config)
        self.respond(COLUMNS_QUERY, RuntimeError("catalog exploded"))
        self.respond("pg_catalog.pg_tables", [{"tablename": "t"}])


def backend(connection_class):
    return patch("inverse_schema.cli.get_backend", return_value=(connection_class, PostgreSQLAdapter))


class TestInspect:
    """Tests for the inspect command."""

    def test_writes_json(self, tmp_path):
        """Should write the parsed schema as JSON."""
        out = tmp_path / "schema.json"
        with backend(CannedConnection):
            result = CliRunner().invoke(cli, ["inspect", *CONNECTION_ARGS, "-o", str(out)])
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text())
        assert [t["name"] for t in data["tables"]] == ["roles", "users"]
        assert data["enums"][0]["values"][0]["label"] == "pending"

    def test_missing_host(self):
        """Should report configuration errors."""
        result = CliRunner().invoke(cli, ["inspect", "-d", "app", "-u", "postgres"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_backend_not_available(self):
        """Should report a missing driver."""
        with patch("inverse_schema.cli.get_backend", side_effect=BackendNotAvailableError("no psycopg")):
            result = CliRunner().invoke(cli, ["inspect", *CONNECTION_ARGS])
        assert result.exit_code == 1
        assert "Backend not available" in result.output

    def test_unexpected_error(self):
        """Should exit non-zero when extraction fails."""
        with backend(BrokenConnection):
            result = CliRunner().invoke(cli, ["inspect", *CONNECTION_ARGS])
        assert result.exit_code == 1
        assert "catalog exploded" in result.output


class TestTestConnection:
    """Tests for the test-connection command."""

    def test_prints_version(self):
        """Should print the server version."""
        with backend(CannedConnection):
            result = CliRunner().invoke(cli, ["test-connection", *CONNECTION_ARGS])
        assert result.exit_code == 0, result.output
        assert "PostgreSQL 16.0" in result.output
