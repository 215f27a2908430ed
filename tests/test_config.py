"""Tests for configuration module."""

import pytest
from inverse_schema.config import IntrospectConfig
from inverse_schema.exceptions import ConfigurationError


def valid(**overrides):
    params = dict(host="localhost", database="app", username="postgres")
    params.update(overrides)
    return IntrospectConfig(**params)


class TestIntrospectConfig:
    """Tests for IntrospectConfig class."""

    def test_validate_postgresql(self):
        """PostgreSQL config should validate with username."""
        valid().validate()

    def test_default_port(self):
        """Should default the port when a host is given."""
        assert valid().port == 5432
        assert valid(port=6543).port == 6543
        assert IntrospectConfig().port is None

    def test_default_schema(self):
        """Should introspect the public namespace by default."""
        assert valid().schema_name == "public"

    @pytest.mark.parametrize("field, message", [
        ("host", "Host"),
        ("database", "Database"),
        ("username", "Username"),
        ("schema_name", "Schema name"),
    ])
    def test_missing_required(self, field, message):
        """Should reject configs lacking a required field."""
        with pytest.raises(ConfigurationError, match=message):
            valid(**{field: ""}).validate()

    def test_unknown_db_type(self):
        """Should reject unsupported backends."""
        with pytest.raises(ConfigurationError, match="Unknown database type"):
            valid(db_type="mssql").validate()

    def test_timeout_must_be_positive(self):
        """Should reject zero or negative timeouts."""
        with pytest.raises(ConfigurationError, match="Timeout"):
            valid(timeout=0).validate()
        valid(timeout=2.5).validate()

    def test_new_context(self):
        """Should build a context carrying the timeout."""
        assert valid().new_context().remaining() is None
        assert valid(timeout=30).new_context().remaining() <= 30
