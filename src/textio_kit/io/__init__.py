"""
Input/Output modules for file operations.

This package handles whole-file reads and writes, lazy line streaming,
object persistence and directory scanning.
"""

from .byte_source import ByteSource, read_bytes, read_fully
from .file_scanner import FileScanner, list_files
from .files import basename, delete_file, dirname, is_file_existed, suffix
from .line_stream import LineStream, StreamState
from .lines import read_csv, read_line_list, read_line_list_with_less_memory
from .persistence import read_object_from, save_object_to
from .text_decoder import TextDecoder, decode_bytes, read_text, strip_bom
from .writer import FileWriter, write_bytes, write_text

__all__ = [
    # Whole-file reads
    "ByteSource",
    "read_bytes",
    "read_fully",
    "TextDecoder",
    "read_text",
    "decode_bytes",
    "strip_bom",
    # Line streaming
    "LineStream",
    "StreamState",
    "read_line_list",
    "read_line_list_with_less_memory",
    "read_csv",
    # Writes and persistence
    "FileWriter",
    "write_bytes",
    "write_text",
    "save_object_to",
    "read_object_from",
    # Files and directories
    "FileScanner",
    "list_files",
    "is_file_existed",
    "delete_file",
    "basename",
    "suffix",
    "dirname",
]
