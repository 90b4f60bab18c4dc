"""Exceptions module for neo-param-cache.

This module provides the complete exception hierarchy, organized by
configuration concerns and cache/infrastructure concerns.
"""

from .base import ParamCacheError

from .domain import (
    ConfigurationError,
    CacheConstructionError,
)

from .infrastructure import (
    # Cache Errors
    CacheError,
    CacheKeyError,
    CacheKeyNotFoundError,
    CacheSerializationError,
    CacheDeserializationError,
    
    # Parameter Store Errors
    ParameterStoreError,
    ParameterStoreTimeoutError,
)

__all__ = [
    # Base
    "ParamCacheError",
    
    # Configuration Errors
    "ConfigurationError",
    "CacheConstructionError",
    
    # Cache Errors
    "CacheError",
    "CacheKeyError",
    "CacheKeyNotFoundError",
    "CacheSerializationError",
    "CacheDeserializationError",
    
    # Parameter Store Errors
    "ParameterStoreError",
    "ParameterStoreTimeoutError",
]
