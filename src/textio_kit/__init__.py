"""
textio toolkit

Robust file ingestion (whole-file bytes and text, lazy line streaming with BOM
handling) and string classification heuristics for Chinese and numeral text.
"""

__version__ = "1.0.0"

from .core.classifier import (
    get_unsigned,
    is_all_chinese,
    is_all_non_chinese,
    is_all_num,
    is_all_single_byte,
)
from .io.byte_source import ByteSource, read_bytes
from .io.line_stream import LineStream
from .io.text_decoder import TextDecoder, decode_bytes, read_text
from .models.config import TextioConfig
from .utils.exceptions import (
    IOFailureError,
    NotFoundError,
    TextioError,
    UnsupportedOperationError,
)

__all__ = [
    "ByteSource",
    "TextDecoder",
    "LineStream",
    "TextioConfig",
    "read_bytes",
    "read_text",
    "decode_bytes",
    "is_all_chinese",
    "is_all_non_chinese",
    "is_all_single_byte",
    "is_all_num",
    "get_unsigned",
    "TextioError",
    "NotFoundError",
    "IOFailureError",
    "UnsupportedOperationError",
]
