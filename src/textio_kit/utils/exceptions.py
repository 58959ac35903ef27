"""
Custom exceptions for the textio toolkit.
"""

from pathlib import Path
from typing import Any, Optional, Union

PathLike = Union[str, Path]


class TextioError(Exception):
    """Base exception for textio toolkit errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class NotFoundError(TextioError):
    """Exception raised when a path does not resolve to an existing regular file."""

    def __init__(self, message: str, file_path: Optional[PathLike] = None):
        details = {}
        if file_path:
            details["file_path"] = str(file_path)
        super().__init__(message, details)
        self.file_path = str(file_path) if file_path else None


class IOFailureError(TextioError):
    """Exception raised when reading, writing or closing a file fails."""

    def __init__(
        self,
        message: str,
        file_path: Optional[PathLike] = None,
        operation: Optional[str] = None,
    ):
        details = {}
        if file_path:
            details["file_path"] = str(file_path)
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
        self.file_path = str(file_path) if file_path else None
        self.operation = operation


class UnsupportedOperationError(TextioError):
    """Exception raised when a read-only sequence is asked to mutate."""

    def __init__(self, message: str, operation: Optional[str] = None):
        details = {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
        self.operation = operation


class ConfigurationError(TextioError):
    """Exception raised when configuration is invalid."""

    def __init__(
        self, message: str, config_field: Optional[str] = None, config_value: Any = None
    ):
        details = {}
        if config_field:
            details["config_field"] = config_field
        if config_value is not None:
            details["config_value"] = str(config_value)
        super().__init__(message, details)
        self.config_field = config_field
        self.config_value = config_value


def handle_io_error(
    error: Exception, file_path: Optional[PathLike] = None, operation: str = "read"
) -> TextioError:
    """Convert built-in exceptions raised during file access to TextioError."""
    if isinstance(error, TextioError):
        return error

    if isinstance(error, (FileNotFoundError, IsADirectoryError)):
        return NotFoundError(f"File not found: {error}", file_path=file_path)
    elif isinstance(error, PermissionError):
        return IOFailureError(
            f"Permission denied: {error}", file_path=file_path, operation=operation
        )
    elif isinstance(error, UnicodeError):
        return IOFailureError(
            f"Encoding error: {error}", file_path=file_path, operation="decode"
        )
    elif isinstance(error, OSError):
        return IOFailureError(
            f"OS error: {error}", file_path=file_path, operation=operation
        )
    else:
        return TextioError(
            f"Unexpected error: {error}",
            details={"error_type": type(error).__name__},
        )
