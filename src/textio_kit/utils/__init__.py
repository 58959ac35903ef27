"""
Utility modules for the textio toolkit.
"""

from .exceptions import (
    ConfigurationError,
    IOFailureError,
    NotFoundError,
    TextioError,
    UnsupportedOperationError,
    handle_io_error,
)
from .logging import LoggerMixin, get_logger, setup_logging

__all__ = [
    "TextioError",
    "NotFoundError",
    "IOFailureError",
    "UnsupportedOperationError",
    "ConfigurationError",
    "handle_io_error",
    "setup_logging",
    "get_logger",
    "LoggerMixin",
]
