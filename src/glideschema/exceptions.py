"""
Exception classes for glideschema operations.
"""


class GlideSchemaError(Exception):
    """Base exception for schema construction and conversion."""

    pass


class ConfigurationError(GlideSchemaError):
    """Exception raised when schema configuration is missing or invalid."""

    pass


class FieldNotFoundError(GlideSchemaError):
    """Exception raised when a requested field is not in a record schema."""

    pass


class UnsupportedConverterError(GlideSchemaError):
    """Exception raised when no converter exists for a requested target."""

    pass


class DuplicateFieldError(GlideSchemaError):
    """Exception raised when a target cannot hold two fields with the same name."""

    pass
