"""Integration tests for the command line entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from textio_kit.__main__ import main

WriteFile = Callable[[str, bytes], Path]


@pytest.fixture(autouse=True)
def _logging(restore_logging):
    yield


def test_lines_streams_file(write_file: WriteFile, capsys: pytest.CaptureFixture) -> None:
    path = write_file("bom.txt", b"\xef\xbb\xbfa\nb\nc\n")
    assert main(["lines", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["a", "b", "c"]


def test_lines_limit(write_file: WriteFile, capsys: pytest.CaptureFixture) -> None:
    path = write_file("many.txt", "".join(f"{i}\n" for i in range(100)).encode())
    assert main(["lines", str(path), "--limit", "3"]) == 0
    assert capsys.readouterr().out.splitlines() == ["0", "1", "2"]


def test_lines_missing_file_is_lenient(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert main(["lines", str(tmp_path / "missing.txt")]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "opening line stream" in captured.err


def test_lines_with_charset(write_file: WriteFile, capsys: pytest.CaptureFixture) -> None:
    path = write_file("gbk.txt", "中文\n".encode("gbk"))
    assert main(["--charset", "gbk", "lines", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["中文"]


def test_text_strips_bom(write_file: WriteFile, capsys: pytest.CaptureFixture) -> None:
    path = write_file("bom.txt", b"\xef\xbb\xbfhello\n")
    assert main(["text", str(path)]) == 0
    assert capsys.readouterr().out == "hello\n"


def test_text_missing_file_fails(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert main(["text", str(tmp_path / "missing.txt")]) == 1
    assert "Error: File not found" in capsys.readouterr().err


def test_size(write_file: WriteFile, capsys: pytest.CaptureFixture) -> None:
    path = write_file("blob.bin", b"\x00" * 42)
    assert main(["size", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "42"


def test_classify(capsys: pytest.CaptureFixture) -> None:
    assert main(["classify", "中文", "-3.14", "abc"]) == 0
    rows = [line.split("\t") for line in capsys.readouterr().out.splitlines()]
    assert rows[0] == ["value", "chinese", "non_chinese", "single_byte", "numeral"]
    assert rows[1] == ["中文", "true", "false", "false", "false"]
    assert rows[2] == ["-3.14", "false", "true", "true", "true"]
    assert rows[3] == ["abc", "false", "true", "true", "false"]


def test_invalid_charset_option(capsys: pytest.CaptureFixture) -> None:
    assert main(["--charset", "no-such-codec", "classify", "x"]) == 1
    assert "Invalid configuration" in capsys.readouterr().err
