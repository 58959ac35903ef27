"""
Whole-buffer file writers.
"""

from pathlib import Path

from ..utils.exceptions import IOFailureError, PathLike
from ..utils.logging import LoggerMixin
from .text_decoder import UTF8_BOM


class FileWriter(LoggerMixin):
    """Writes complete byte or text buffers to disk."""

    def write_bytes(self, path: PathLike, data: bytes) -> int:
        """Write ``data`` to ``path``, creating parent directories. Returns bytes written."""
        output_path = Path(path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with output_path.open("wb") as f:
                f.write(data)
        except OSError as e:
            self.log_error("writing file", e, file_path=str(output_path))
            raise IOFailureError(
                f"Failed to write {output_path}: {e}",
                file_path=output_path,
                operation="write",
            ) from e

        self.log_debug("File written", file_path=str(output_path), size_bytes=len(data))
        return len(data)

    def write_text(
        self,
        path: PathLike,
        text: str,
        charset: str = "utf-8",
        with_bom: bool = False,
    ) -> int:
        """Encode ``text`` and write it, optionally prefixed with a UTF-8 BOM."""
        data = text.encode(charset)
        if with_bom:
            data = UTF8_BOM + data
        return self.write_bytes(path, data)


_default_writer = FileWriter()


def write_bytes(path: PathLike, data: bytes) -> int:
    """Write ``data`` to ``path``."""
    return _default_writer.write_bytes(path, data)


def write_text(
    path: PathLike, text: str, charset: str = "utf-8", with_bom: bool = False
) -> int:
    """Write ``text`` to ``path`` encoded with ``charset``."""
    return _default_writer.write_text(path, text, charset, with_bom)
