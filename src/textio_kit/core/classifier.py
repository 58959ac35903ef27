"""
String classification heuristics for Chinese text, single-byte text and numerals.

All functions are pure and side-effect free.
"""

import re
import traceback
from typing import Optional

CJK_PATTERN = re.compile(r"[\u4e00-\u9fa5]+")

SIGN_CHARS = "±+-＋－—"
FULL_WIDTH_DIGITS = "０１２３４５６７８９"
FULL_WIDTH_DELIMITERS = "·∶:，,．./／"
HALF_WIDTH_DIGITS = "0123456789"
HALF_WIDTH_DELIMITERS = ",./:∶·，．／"
MAGNITUDE_SUFFIXES = "百千万亿佰仟%％‰"

# Lead-byte window of GB2312 ideographs and CJK punctuation
LEGACY_CJK_LOW = 175
LEGACY_CJK_HIGH = 248


def is_all_chinese(text: str) -> bool:
    """True if ``text`` is non-empty and made only of CJK ideographs U+4E00-U+9FA5."""
    return CJK_PATTERN.fullmatch(text) is not None


def get_unsigned(b: int) -> int:
    """Map a signed 8-bit value (-128..127) onto 0..255."""
    if b > 0:
        return b
    return b & 0xFF


def is_all_non_chinese(text: str, encoding: str = "gbk") -> bool:
    """
    Byte-level check that ``text`` contains no Chinese characters.

    ``text`` is encoded with a legacy double-byte ``encoding`` and walked byte
    by byte. Any visited byte in the (175, 248) lead-byte window marks the
    string as Chinese. A byte with its high bit set starts a two-byte
    character, so the walk skips its trail byte.

    This works on encoded bytes, not code points, and is not the negation of
    ``is_all_chinese``: full-width punctuation such as ``，`` and GBK extension
    ideographs such as ``丂`` (lead byte 0x81) pass here.
    """
    data = text.encode(encoding, errors="replace")
    i = 0
    while i < len(data):
        signed = data[i] - 256 if data[i] > 127 else data[i]
        if LEGACY_CJK_LOW < get_unsigned(signed) < LEGACY_CJK_HIGH:
            return False
        i += 2 if signed < 0 else 1
    return True


def is_all_single_byte(text: str) -> bool:
    """True if every character of ``text`` has a code point of at most 128."""
    return all(ord(ch) <= 128 for ch in text)


def _skip(text: str, i: int, charset: str) -> int:
    while i < len(text) and text[i] in charset:
        i += 1
    return i


def is_all_num(text: Optional[str]) -> bool:
    """
    Lenient check for numeral-like strings.

    Accepts an optional leading sign, then either a full-width number
    (``１２．５``) or a half-width number (``-3.14``) with at most one inner
    delimiter, optionally followed by one magnitude or percent sign
    (``98.1％``, ``3万``). A full-width part may be followed by a half-width
    part, but not the other way round.
    """
    if not text:
        return False

    i = 0
    if text[0] in SIGN_CHARS:
        i += 1

    i = _skip(text, i, FULL_WIDTH_DIGITS)
    if 0 < i < len(text) and text[i] in FULL_WIDTH_DELIMITERS:
        i = _skip(text, i + 1, FULL_WIDTH_DIGITS)
    if i >= len(text):
        return True

    i = _skip(text, i, HALF_WIDTH_DIGITS)
    if 0 < i < len(text) and text[i] in HALF_WIDTH_DELIMITERS:
        i = _skip(text, i + 1, HALF_WIDTH_DIGITS)

    if i < len(text) and text[i] in MAGNITUDE_SUFFIXES:
        i += 1
    return i >= len(text)


def exception_to_string(error: BaseException) -> str:
    """Render ``error`` and its traceback as text for log messages."""
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))
