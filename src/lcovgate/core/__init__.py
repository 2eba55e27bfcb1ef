"""Core module exports."""

from lcovgate.core.errors import (
    CollectionError,
    ConfigError,
    ErrorCode,
    LcovGateError,
)
from lcovgate.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "CollectionError",
    "ConfigError",
    "ErrorCode",
    "LcovGateError",
    # Logging
    "configure_logging",
    "get_logger",
]
