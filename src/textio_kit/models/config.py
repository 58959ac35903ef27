"""
Configuration models for the textio toolkit.
"""

import codecs
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..utils.exceptions import ConfigurationError


def _check_codec(v: str) -> str:
    try:
        codecs.lookup(v)
    except LookupError as e:
        raise ValueError(f"Unknown encoding: {v}") from e
    return v


class ReaderConfig(BaseModel):
    """Configuration for reading and decoding files."""

    charset: str = Field(default="utf-8", description="Charset used to decode text")
    decode_errors: Literal["strict", "replace", "ignore"] = Field(
        default="replace", description="How undecodable bytes are handled"
    )
    detect_encoding: bool = Field(
        default=False, description="Guess the charset with chardet before decoding"
    )
    max_detection_bytes: int = Field(
        default=10000, ge=1, description="Sample size used for charset detection"
    )
    min_confidence: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Minimum chardet confidence to accept a detected charset",
    )

    @field_validator("charset")
    @classmethod
    def validate_charset(cls, v):
        """Ensure the charset is known to the codec registry."""
        return _check_codec(v)


class ClassifierConfig(BaseModel):
    """Configuration for the text classification heuristics."""

    legacy_encoding: str = Field(
        default="gbk",
        description="Double-byte encoding inspected by the non-Chinese byte heuristic",
    )

    @field_validator("legacy_encoding")
    @classmethod
    def validate_legacy_encoding(cls, v):
        """Ensure the encoding is known to the codec registry."""
        return _check_codec(v)


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Console log level"
    )
    log_file: Optional[Path] = Field(default=None, description="Optional log file")
    verbose: bool = Field(default=False, description="Force DEBUG level")

    @field_validator("level", mode="before")
    @classmethod
    def normalise_level(cls, v):
        """Accept lower-case level names."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("log_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string paths to Path objects."""
        if v is None:
            return v
        return Path(v) if not isinstance(v, Path) else v


class TextioConfig(BaseModel):
    """Top-level configuration passed explicitly to toolkit components."""

    reader: ReaderConfig = Field(
        default_factory=ReaderConfig, description="Reader configuration"
    )
    classifier: ClassifierConfig = Field(
        default_factory=ClassifierConfig, description="Classifier configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @classmethod
    def from_cli_args(cls, args: dict[str, Any]) -> "TextioConfig":
        """Create configuration from CLI arguments."""
        reader: dict[str, Any] = {}
        if args.get("charset"):
            reader["charset"] = args["charset"]
        if args.get("detect_encoding"):
            reader["detect_encoding"] = True

        log: dict[str, Any] = {"verbose": bool(args.get("verbose", False))}
        if args.get("log_level"):
            log["level"] = args["log_level"]
        if args.get("log_file"):
            log["log_file"] = args["log_file"]

        return load_config({"reader": reader, "logging": log})


def load_config(data: Optional[dict[str, Any]] = None) -> TextioConfig:
    """Build a TextioConfig from a plain mapping, raising ConfigurationError."""
    try:
        return TextioConfig.model_validate(data or {})
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid configuration: {first.get('msg')}",
            config_field=field or None,
            config_value=first.get("input"),
        ) from e
