"""Configuration dataclasses for schema introspection."""

from dataclasses import dataclass
from typing import Optional

from .context import ParseContext
from .exceptions import ConfigurationError

DEFAULT_PORTS = {
    "postgresql": 5432,
}


@dataclass
class IntrospectConfig:
    """Configuration for a catalog introspection run."""

    # Database type
    db_type: str = "postgresql"

    # Connection parameters
    host: Optional[str] = None
    port: Optional[int] = None
    database: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    # Namespace to introspect
    schema_name: str = "public"

    # Seconds allowed for a whole parse
    timeout: Optional[float] = None

    verbosity: int = 0

    def __post_init__(self) -> None:
        """Fill in defaults that depend on other fields."""
        if self.port is None and self.host:
            self.port = self._default_port()

    def _default_port(self) -> int:
        """Get default port for the database type."""
        return DEFAULT_PORTS.get(self.db_type, 0)

    def validate(self) -> None:
        """Validate the configuration is complete and consistent."""
        if self.db_type not in DEFAULT_PORTS:
            raise ConfigurationError(
                f"Unknown database type: {self.db_type}. "
                f"Supported types: {', '.join(sorted(DEFAULT_PORTS))}"
            )
        if not self.host:
            raise ConfigurationError("Host is required")
        if not self.database:
            raise ConfigurationError("Database is required")
        if not self.username:
            raise ConfigurationError("Username is required")
        if not self.schema_name:
            raise ConfigurationError("Schema name is required")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError("Timeout must be positive")

    def new_context(self) -> ParseContext:
        """Build a parse context honoring the configured timeout."""
        return ParseContext(timeout=self.timeout)
