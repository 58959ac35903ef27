"""
Configuration models for the textio toolkit.
"""

from .config import (
    ClassifierConfig,
    LoggingConfig,
    ReaderConfig,
    TextioConfig,
    load_config,
)

__all__ = [
    "TextioConfig",
    "ReaderConfig",
    "ClassifierConfig",
    "LoggingConfig",
    "load_config",
]
