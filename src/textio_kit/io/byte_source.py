"""
Whole-file byte loading.
"""

from pathlib import Path
from typing import BinaryIO

from ..utils.exceptions import NotFoundError, PathLike, handle_io_error
from ..utils.logging import LoggerMixin
from .files import is_file_existed


def read_fully(stream: BinaryIO, size: int) -> bytes:
    """Read up to ``size`` bytes, looping over short reads until end of stream."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


class ByteSource(LoggerMixin):
    """Loads entire files into memory as bytes."""

    def read_bytes(self, path: PathLike) -> bytes:
        """
        Read the whole file at ``path``.

        The file size is taken from ``stat`` and exactly that many bytes are
        read. Not suitable for files larger than available memory; use
        LineStream for those.

        Raises:
            NotFoundError: ``path`` is not an existing regular file.
            IOFailureError: the file exists but could not be read.
        """
        file_path = Path(path)
        if not is_file_existed(file_path):
            error = NotFoundError(f"File not found: {file_path}", file_path=file_path)
            self.log_error("reading bytes", error)
            raise error

        try:
            with file_path.open("rb") as f:
                size = file_path.stat().st_size
                data = read_fully(f, size)
        except OSError as e:
            # The file can vanish between the existence check and open
            self.log_error("reading bytes", e, file_path=str(file_path))
            raise handle_io_error(e, file_path, operation="read") from e

        self.log_debug("File read", file_path=str(file_path), size_bytes=len(data))
        return data


_default_source = ByteSource()


def read_bytes(path: PathLike) -> bytes:
    """Read the whole file at ``path`` as bytes."""
    return _default_source.read_bytes(path)
