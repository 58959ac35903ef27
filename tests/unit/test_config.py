"""Unit tests for configuration models."""

from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from textio_kit.models.config import (
    ClassifierConfig,
    LoggingConfig,
    ReaderConfig,
    TextioConfig,
    load_config,
)
from textio_kit.utils.exceptions import ConfigurationError


def test_defaults() -> None:
    cfg = TextioConfig()
    assert cfg.reader.charset == "utf-8"
    assert cfg.reader.decode_errors == "replace"
    assert cfg.reader.detect_encoding is False
    assert cfg.reader.max_detection_bytes == 10000
    assert cfg.classifier.legacy_encoding == "gbk"
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.log_file is None


def test_unknown_charset_rejected() -> None:
    with pytest.raises(pydantic.ValidationError):
        ReaderConfig(charset="no-such-codec")
    with pytest.raises(pydantic.ValidationError):
        ClassifierConfig(legacy_encoding="no-such-codec")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"decode_errors": "surrogateescape"},
        {"max_detection_bytes": 0},
        {"min_confidence": 1.5},
    ],
)
def test_reader_bounds(kwargs: dict) -> None:
    with pytest.raises(pydantic.ValidationError):
        ReaderConfig(**kwargs)


def test_logging_level_normalised_and_path_converted() -> None:
    cfg = LoggingConfig(level="debug", log_file="logs/out.log")
    assert cfg.level == "DEBUG"
    assert cfg.log_file == Path("logs/out.log")


def test_load_config_wraps_validation_errors() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        load_config({"reader": {"charset": "no-such-codec"}})
    assert exc_info.value.config_field == "reader.charset"
    assert exc_info.value.config_value == "no-such-codec"


def test_load_config_empty() -> None:
    assert load_config() == TextioConfig()


def test_from_cli_args() -> None:
    cfg = TextioConfig.from_cli_args(
        {
            "charset": "gbk",
            "detect_encoding": True,
            "log_level": "info",
            "log_file": Path("run.log"),
            "verbose": False,
        }
    )
    assert cfg.reader.charset == "gbk"
    assert cfg.reader.detect_encoding is True
    assert cfg.logging.level == "INFO"
    assert cfg.logging.log_file == Path("run.log")


def test_from_cli_args_defaults() -> None:
    cfg = TextioConfig.from_cli_args({})
    assert cfg.reader == ReaderConfig()
    assert cfg.logging.verbose is False
