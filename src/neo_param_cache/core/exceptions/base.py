"""Base exceptions for neo-param-cache.

This module defines the root of the exception hierarchy. Every exception
raised by the library inherits from ParamCacheError and carries an error
code and a details mapping for structured logging.
"""

from typing import Any, Dict, Optional


class ParamCacheError(Exception):
    """Base exception for all neo-param-cache errors.
    
    All exceptions in the library inherit from this base class and include
    structured error information for better debugging.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

