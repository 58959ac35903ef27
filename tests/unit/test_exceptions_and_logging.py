"""Unit tests for the exception taxonomy and logging helpers."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from textio_kit.utils.exceptions import (
    ConfigurationError,
    IOFailureError,
    NotFoundError,
    TextioError,
    UnsupportedOperationError,
    handle_io_error,
)
from textio_kit.utils.logging import LoggerMixin, get_logger, setup_logging


def test_error_str_includes_details() -> None:
    err = IOFailureError("Failed to read", file_path="a.txt", operation="read")
    assert str(err) == "Failed to read (file_path=a.txt, operation=read)"
    assert str(TextioError("plain")) == "plain"


def test_taxonomy_shares_base() -> None:
    for cls in (NotFoundError, IOFailureError, UnsupportedOperationError, ConfigurationError):
        assert issubclass(cls, TextioError)


@pytest.mark.parametrize(
    "error, expected",
    [
        (FileNotFoundError("x"), NotFoundError),
        (IsADirectoryError("x"), NotFoundError),
        (PermissionError("x"), IOFailureError),
        (OSError("disk"), IOFailureError),
        (UnicodeDecodeError("utf-8", b"\xff", 0, 1, "bad"), IOFailureError),
        (ValueError("odd"), TextioError),
    ],
)
def test_handle_io_error(error: Exception, expected: type) -> None:
    converted = handle_io_error(error, file_path=Path("f.txt"))
    assert type(converted) is expected


def test_handle_io_error_passes_through_textio_errors() -> None:
    err = NotFoundError("gone")
    assert handle_io_error(err) is err


def test_handle_io_error_decode_operation() -> None:
    converted = handle_io_error(UnicodeDecodeError("utf-8", b"\xff", 0, 1, "bad"))
    assert converted.operation == "decode"


class _Component(LoggerMixin):
    pass


def test_logger_mixin_name_and_context(caplog: pytest.LogCaptureFixture) -> None:
    component = _Component()
    assert component.logger.name.endswith("._Component")
    with caplog.at_level(logging.INFO):
        component.log_info("Loaded", lines=3, path="a.txt")
        component.log_error("reading", OSError("boom"), path="b.txt")
    assert "Loaded (lines=3, path=a.txt)" in caplog.text
    assert "Failed reading: boom (path=b.txt)" in caplog.text


def test_log_error_adds_traceback_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    component = _Component()
    try:
        raise OSError("disk gone")
    except OSError as e:
        with caplog.at_level(logging.DEBUG):
            component.log_error("reading", e)
    debug = [r for r in caplog.records if r.levelno == logging.DEBUG]
    assert len(debug) == 1
    assert debug[0].getMessage().startswith("Traceback")
    assert "OSError: disk gone" in debug[0].getMessage()


def test_log_error_skips_traceback_above_debug(caplog: pytest.LogCaptureFixture) -> None:
    component = _Component()
    try:
        raise OSError("disk gone")
    except OSError as e:
        with caplog.at_level(logging.INFO):
            component.log_error("reading", e)
    assert "Traceback" not in caplog.text


def test_setup_logging_writes_file(tmp_path: Path, restore_logging) -> None:
    log_file = tmp_path / "logs" / "textio.log"
    setup_logging(level="WARNING", log_file=log_file)
    get_logger("textio_kit.test").debug("to file only")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert log_file.exists()
    assert "to file only" in log_file.read_text(encoding="utf-8")


def test_setup_logging_verbose_forces_debug(restore_logging) -> None:
    setup_logging(level="ERROR", verbose=True)
    assert logging.getLogger().level == logging.DEBUG
