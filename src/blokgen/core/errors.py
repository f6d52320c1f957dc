"""
Error types for blokgen schema loading, field mapping and configuration.
"""

from dataclasses import dataclass


class BlokgenError(Exception):
    """Base exception for all blokgen errors."""

    def __init__(self, message: str, context: "ErrorContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message

    def with_context(self, context: "ErrorContext") -> "BlokgenError":
        """Return the same error with a location attached."""
        self.context = context
        self.args = (self._format_message(),)
        return self


class UnsupportedTypeError(BlokgenError):
    """
    Raised when a field's type has no mapping rule.

    Examples:
    - A list of Boolean
    - A scalar the mapper does not know
    - A list of String without a datasource
    """

    def __init__(self, type_name: str, message: str | None = None, context: "ErrorContext | None" = None):
        self.type_name = type_name
        super().__init__(message or f"Unsupported type {type_name}", context)


class MissingIntegrationConfigError(BlokgenError):
    """Raised when a field needs commercetools settings that were not supplied."""

    def __init__(self, field_name: str, context: "ErrorContext | None" = None):
        self.field_name = field_name
        super().__init__(f"Commercetools config is required for {field_name}", context)


class DuplicateFieldError(BlokgenError):
    """Raised when a field name repeats or a section or tab key collides with another schema key."""

    def __init__(self, key: str, context: "ErrorContext | None" = None):
        self.key = key
        super().__init__(f"Duplicate schema key {key}", context)


class SchemaLoadError(BlokgenError):
    """Raised when the GraphQL SDL cannot be parsed."""

    pass


class ConfigError(BlokgenError):
    """Raised when blokgen.toml is unreadable or invalid."""

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside the type graph.

    Attributes:
        type_name: Name of the type definition being mapped
        field_name: Optional field within that type
    """

    type_name: str
    field_name: str | None = None

    def format(self) -> str:
        """Format as ``Type.field`` or ``Type``."""
        if self.field_name:
            return f"{self.type_name}.{self.field_name}"
        return self.type_name
