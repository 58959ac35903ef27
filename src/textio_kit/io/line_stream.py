"""
Lazy, single-pass line iteration over large text files.
"""

import codecs
from collections import deque
from collections.abc import Iterator
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Optional

from ..models.config import ReaderConfig
from ..utils.exceptions import ConfigurationError, PathLike, UnsupportedOperationError
from ..utils.logging import LoggerMixin

UTF8_BOM = codecs.BOM_UTF8


class StreamState(str, Enum):
    """Lifecycle of a LineStream."""

    OPEN = "open"
    EXHAUSTED = "exhausted"
    CLOSED = "closed"


class LineStream(LoggerMixin, Iterator[str]):
    """
    Pull-based iterator over the lines of a text file.

    The stream opens its file on construction and keeps exactly one line of
    lookahead, so ``has_next`` never touches the file. The handle is released
    as soon as the end of the file is reached, on ``close`` or when leaving a
    ``with`` block, whichever happens first.

    The file is read as bytes, one ``\\n``-terminated record at a time, and
    each record is decoded on its own. A decode failure therefore ends the
    stream at the offending line and every earlier line is still delivered.
    Line breaks follow ``str.splitlines``, so ``\\r\\n`` and a lone ``\\r``
    end a line too. Records are split on the ``\\n`` byte, which restricts
    ``charset`` to ASCII-compatible encodings (UTF-8, GBK, Latin-1, ...).

    Failures never escape iteration: a file that cannot be opened or read is
    logged and the stream simply reports no further lines. A raw UTF-8 BOM at
    the start of the file is skipped before decoding, whatever the charset.

    Not thread-safe.
    """

    def __init__(
        self,
        path: PathLike,
        config: Optional[ReaderConfig] = None,
        charset: Optional[str] = None,
    ):
        """Open ``path`` and pre-fetch its first line."""
        self.path = Path(path)
        self.config = config or ReaderConfig()
        self.charset = charset or self.config.charset
        self.lines_read = 0

        self._handle: Optional[BinaryIO] = None
        self._pending: Optional[str] = None
        # Lines already decoded from the current record but not yet buffered
        self._queued: deque[str] = deque()
        self._lines_decoded = 0
        self._first = True
        self.state = StreamState.EXHAUSTED

        try:
            codecs.lookup(self.charset)
        except LookupError as e:
            raise ConfigurationError(
                f"Unknown encoding: {self.charset}",
                config_field="charset",
                config_value=self.charset,
            ) from e

        try:
            self._handle = self.path.open("rb")
        except OSError as e:
            self.log_error("opening line stream", e, file_path=str(self.path))
            return

        self.state = StreamState.OPEN
        self._advance()

    def has_next(self) -> bool:
        """True if another line is buffered."""
        return self._pending is not None

    def next(self) -> Optional[str]:
        """Return the buffered line and read ahead, or None once exhausted."""
        line = self._pending
        if line is None:
            return None
        self.lines_read += 1
        self._advance()
        return line

    def __next__(self) -> str:
        line = self.next()
        if line is None:
            raise StopIteration
        return line

    def __iter__(self) -> "LineStream":
        return self

    def remove(self) -> None:
        """Lines cannot be removed from a file-backed stream."""
        raise UnsupportedOperationError(
            "LineStream is read-only", operation="remove"
        )

    def close(self) -> None:
        """Release the file handle. Safe to call any number of times."""
        self._pending = None
        self._queued.clear()
        self._release()
        self.state = StreamState.CLOSED

    def __enter__(self) -> "LineStream":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _advance(self) -> None:
        """Refill the lookahead buffer from the file."""
        if not self._queued:
            self._read_record()

        if self._queued:
            self._pending = self._queued.popleft()
            return

        self._pending = None
        if self._handle is not None:
            self._release()
            self.state = StreamState.EXHAUSTED
            self.log_debug(
                "Line stream exhausted", file_path=str(self.path), lines=self.lines_read
            )

    def _read_record(self) -> None:
        """Decode the next ``\\n``-terminated record into the line queue."""
        if self._handle is None:
            return

        try:
            raw = self._handle.readline()
            if self._first:
                self._first = False
                if raw.startswith(UTF8_BOM):
                    raw = raw[len(UTF8_BOM):]
            text = raw.decode(self.charset, errors=self.config.decode_errors)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            self.log_error(
                "reading line",
                e,
                file_path=str(self.path),
                line=self._lines_decoded + 1,
            )
            return

        lines = text.splitlines()
        self._lines_decoded += len(lines)
        self._queued.extend(lines)

    def _release(self) -> None:
        handle, self._handle = self._handle, None
        if handle is None:
            return
        try:
            handle.close()
        except OSError as e:
            self.log_error("closing line stream", e, file_path=str(self.path))
