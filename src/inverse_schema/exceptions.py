"""Custom exceptions for schema introspection."""


class InverseSchemaError(Exception):
    """Base exception for all introspection errors."""

    pass


class ConnectionError(InverseSchemaError):
    """Error establishing database connection."""

    pass


class ConfigurationError(InverseSchemaError):
    """Error in configuration or parameters."""

    pass


class ExtractionError(InverseSchemaError):
    """Error extracting schema metadata."""

    pass


class UnsupportedConstraintError(ExtractionError):
    """The catalog reported a constraint kind with no known mapping."""

    def __init__(self, constraint_type: str):
        super().__init__(f"unsupported constraint type: {constraint_type}")
        self.constraint_type = constraint_type


class ParseCancelled(ExtractionError):
    """Extraction was cancelled by the caller."""

    pass


class DeadlineExceeded(ParseCancelled):
    """Extraction ran past the caller's deadline."""

    pass


class BackendNotAvailableError(InverseSchemaError):
    """Required backend driver is not installed."""

    pass
