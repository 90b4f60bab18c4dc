"""Configuration exceptions for neo-param-cache."""

from .base import ParamCacheError


class ConfigurationError(ParamCacheError):
    """Raised when configuration is invalid."""
    pass


class CacheConstructionError(ConfigurationError):
    """Raised when a cache cannot be built from configuration or credentials."""
    pass
