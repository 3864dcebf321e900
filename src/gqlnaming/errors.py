"""Exceptions raised by the gqlnaming host layer (config and schema loading)."""


class GqlNamingError(Exception):
    """Base class for gqlnaming errors."""


class ConfigError(GqlNamingError):
    """Raised when a config file cannot be read or does not validate."""


class SchemaLoadError(GqlNamingError):
    """Raised when a schema path cannot be read or built into a schema."""
