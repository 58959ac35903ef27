"""
Whole-file text decoding with UTF-8 BOM handling and optional charset detection.
"""

import codecs
from pathlib import Path
from typing import Optional

import chardet

from ..models.config import ReaderConfig
from ..utils.exceptions import ConfigurationError, IOFailureError, PathLike
from ..utils.logging import LoggerMixin
from .byte_source import ByteSource

UTF8_BOM = codecs.BOM_UTF8


def strip_bom(data: bytes) -> bytes:
    """Drop a leading UTF-8 byte-order mark, if any."""
    if data[:3] == UTF8_BOM:
        return data[3:]
    return data


class TextDecoder(LoggerMixin):
    """Decodes bytes and whole files into strings."""

    def __init__(
        self,
        config: Optional[ReaderConfig] = None,
        source: Optional[ByteSource] = None,
    ):
        """Initialise decoder with reader configuration."""
        self.config = config or ReaderConfig()
        self.source = source or ByteSource()

    def decode(self, data: bytes, charset: Optional[str] = None) -> str:
        """
        Decode ``data`` after removing a leading UTF-8 BOM.

        ``charset`` overrides the configured charset. When detection is
        enabled and no override is given, chardet picks the charset.
        """
        payload = strip_bom(data)
        encoding = charset or self._choose_encoding(payload)
        try:
            return payload.decode(encoding, errors=self.config.decode_errors)
        except LookupError as e:
            raise ConfigurationError(
                f"Unknown encoding: {encoding}",
                config_field="charset",
                config_value=encoding,
            ) from e

    def read_text(self, path: PathLike, charset: Optional[str] = None) -> str:
        """
        Read the whole file at ``path`` and decode it.

        Raises:
            NotFoundError: ``path`` is not an existing regular file.
            IOFailureError: the file could not be read, or could not be
                decoded under strict error handling.
        """
        file_path = Path(path)
        data = self.source.read_bytes(file_path)
        try:
            text = self.decode(data, charset)
        except UnicodeDecodeError as e:
            self.log_error("decoding text", e, file_path=str(file_path))
            raise IOFailureError(
                f"Encoding error reading {file_path}: {e}",
                file_path=file_path,
                operation="decode",
            ) from e

        self.log_debug(
            "Text decoded",
            file_path=str(file_path),
            had_bom=data[:3] == UTF8_BOM,
            characters=len(text),
        )
        return text

    def _choose_encoding(self, payload: bytes) -> str:
        """Pick the charset for ``payload`` from configuration or detection."""
        if not self.config.detect_encoding or not payload:
            return self.config.charset

        sample = payload[: self.config.max_detection_bytes]
        detection_result = chardet.detect(sample)
        detected_encoding = detection_result.get("encoding")
        confidence = detection_result.get("confidence") or 0.0

        if detected_encoding and confidence > self.config.min_confidence:
            self.log_debug(
                "Encoding detected", encoding=detected_encoding, confidence=confidence
            )
            return detected_encoding

        self.log_debug(
            "Low confidence encoding detection, using configured charset",
            detected=detected_encoding,
            confidence=confidence,
            fallback=self.config.charset,
        )
        return self.config.charset


_default_decoder = TextDecoder()


def decode_bytes(data: bytes, charset: str = "utf-8") -> str:
    """Decode ``data`` with ``charset``, stripping a leading UTF-8 BOM."""
    return _default_decoder.decode(data, charset)


def read_text(path: PathLike, charset: str = "utf-8") -> str:
    """Read and decode the whole file at ``path``."""
    return _default_decoder.read_text(path, charset)
