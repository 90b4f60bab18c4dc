"""Logging configuration for neo-param-cache."""

from .logging_config import LoggingConfig, LogFormat, LogLevel, LogVerbosity, configure_logging, get_logger

__all__ = [
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "configure_logging",
    "get_logger",
]
