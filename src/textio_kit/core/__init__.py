"""
String classification heuristics.
"""

from .classifier import (
    exception_to_string,
    get_unsigned,
    is_all_chinese,
    is_all_non_chinese,
    is_all_num,
    is_all_single_byte,
)

__all__ = [
    "is_all_chinese",
    "is_all_non_chinese",
    "is_all_single_byte",
    "is_all_num",
    "get_unsigned",
    "exception_to_string",
]
