"""Infrastructure-specific exceptions for neo-param-cache.

This module defines exceptions raised by the cache façade and by the
parameter store adapters it talks to.
"""

from typing import Any, Dict, Optional

from .base import ParamCacheError


# Cache Errors
class CacheError(ParamCacheError):
    """Base class for cache-related errors."""
    pass


class CacheKeyError(CacheError):
    """Raised when cache key is invalid."""
    pass


class CacheKeyNotFoundError(CacheError):
    """Raised when no payload is stored for a cache key."""
    
    def __init__(self, key: str, parameter_name: str, **kwargs):
        super().__init__(
            f"No parameter found: {parameter_name}",
            error_code="CACHE_KEY_NOT_FOUND",
            details={"key": key, "parameter_name": parameter_name},
            **kwargs
        )
        self.key = key
        self.parameter_name = parameter_name


class CacheSerializationError(CacheError):
    """Raised when a cache envelope cannot be serialized."""
    pass


class CacheDeserializationError(CacheSerializationError):
    """Raised when a stored payload is not a valid cache envelope.
    
    The offending parameter is left in place; it may have been written by
    something other than this cache.
    """
    
    def __init__(
        self,
        message: str,
        payload: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        details = dict(details or {})
        if payload is not None:
            details.setdefault("payload_size", len(payload))
            details.setdefault("payload_preview", payload[:50])
        super().__init__(message, error_code="CACHE_DESERIALIZATION_ERROR", details=details, **kwargs)
        self.payload = payload


# Parameter Store Errors
class ParameterStoreError(CacheError):
    """Raised when a call to the parameter store fails."""
    
    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        parameter_name: Optional[str] = None,
        store_error_code: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.parameter_name = parameter_name
        self.store_error_code = store_error_code
        if operation:
            self.details["operation"] = operation
        if parameter_name:
            self.details["parameter_name"] = parameter_name
        if store_error_code:
            self.details["store_error_code"] = store_error_code


class ParameterStoreTimeoutError(ParameterStoreError):
    """Raised when a parameter store call exceeds the caller's deadline."""
    
    def __init__(self, operation: str, parameter_name: str, timeout: float, **kwargs):
        super().__init__(
            f"Parameter store {operation} for {parameter_name} timed out after {timeout}s",
            operation=operation,
            parameter_name=parameter_name,
            error_code="PARAMETER_STORE_TIMEOUT",
            **kwargs
        )
        self.timeout = timeout
        self.details["timeout_seconds"] = timeout
