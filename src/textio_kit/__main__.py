#!/usr/bin/env python3
"""
Command line access to the textio toolkit: stream lines, dump text, classify strings.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .core.classifier import (
    is_all_chinese,
    is_all_non_chinese,
    is_all_num,
    is_all_single_byte,
)
from .io.byte_source import ByteSource
from .io.line_stream import LineStream
from .io.text_decoder import TextDecoder
from .models.config import TextioConfig
from .utils.exceptions import TextioError
from .utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="textio-kit",
        description="Read files robustly and classify strings",
    )
    parser.add_argument("--charset", help="Charset used to decode files (default: utf-8)")
    parser.add_argument(
        "--detect-encoding",
        action="store_true",
        help="Guess the charset with chardet",
    )
    parser.add_argument("--log-level", help="Log level (default: WARNING)")
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    lines = subparsers.add_parser("lines", help="Stream the lines of a file")
    lines.add_argument("path", type=Path)
    lines.add_argument("--limit", "-n", type=int, help="Stop after this many lines")

    text = subparsers.add_parser("text", help="Print a whole file, BOM removed")
    text.add_argument("path", type=Path)

    size = subparsers.add_parser("size", help="Print the byte size of a file")
    size.add_argument("path", type=Path)

    classify = subparsers.add_parser("classify", help="Classify strings")
    classify.add_argument("values", nargs="+")

    return parser


def _run_lines(args: argparse.Namespace, config: TextioConfig) -> int:
    with LineStream(args.path, config.reader) as stream:
        for count, line in enumerate(stream, start=1):
            print(line)
            if args.limit is not None and count >= args.limit:
                break
    return 0


def _run_classify(args: argparse.Namespace, config: TextioConfig) -> int:
    encoding = config.classifier.legacy_encoding
    print("value\tchinese\tnon_chinese\tsingle_byte\tnumeral")
    for value in args.values:
        flags = [
            is_all_chinese(value),
            is_all_non_chinese(value, encoding),
            is_all_single_byte(value),
            is_all_num(value),
        ]
        print(value + "\t" + "\t".join(str(flag).lower() for flag in flags))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = TextioConfig.from_cli_args(vars(args))
        setup_logging(
            level=config.logging.level,
            log_file=config.logging.log_file,
            verbose=config.logging.verbose,
        )

        if args.command == "lines":
            return _run_lines(args, config)
        if args.command == "text":
            sys.stdout.write(TextDecoder(config.reader).read_text(args.path))
            return 0
        if args.command == "size":
            print(len(ByteSource().read_bytes(args.path)))
            return 0
        return _run_classify(args, config)

    except TextioError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
