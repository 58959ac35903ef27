"""
Line-list and CSV helpers built on the decoder and the line stream.
"""

from typing import Optional

from ..models.config import ReaderConfig
from ..utils.exceptions import PathLike
from .line_stream import LineStream
from .text_decoder import TextDecoder


def read_line_list(path: PathLike, config: Optional[ReaderConfig] = None) -> list[str]:
    """
    Decode the whole file and split it on ``\\n``, dropping empty lines.

    Raises the same errors as ``TextDecoder.read_text``.
    """
    text = TextDecoder(config).read_text(path)
    return [line for line in text.split("\n") if line]


def read_line_list_with_less_memory(
    path: PathLike, config: Optional[ReaderConfig] = None
) -> list[str]:
    """
    Collect every line of ``path`` through a LineStream.

    Blank lines are kept. A file that cannot be read yields an empty list.
    """
    with LineStream(path, config) as lines:
        return list(lines)


def read_csv(
    path: PathLike, separator: str = ",", config: Optional[ReaderConfig] = None
) -> list[list[str]]:
    """Split each non-empty line of ``path`` on ``separator``."""
    return [line.split(separator) for line in read_line_list(path, config)]
