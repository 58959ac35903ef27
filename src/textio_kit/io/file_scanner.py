"""
Directory tree enumeration with extension and ignore-pattern filtering.
"""

import fnmatch
import re
from collections.abc import Iterator
from pathlib import Path
from re import Pattern
from typing import Optional

from ..utils.exceptions import NotFoundError, PathLike
from ..utils.logging import LoggerMixin


class FileScanner(LoggerMixin):
    """Lists regular files below a directory."""

    DEFAULT_IGNORE_PATTERNS = {
        ".*",  # Hidden files and directories
        "__pycache__",
        "*.pyc",
        "Thumbs.db",
    }

    def __init__(
        self,
        extensions: Optional[set[str]] = None,
        ignore_patterns: Optional[set[str]] = None,
    ):
        """
        Initialise file scanner.

        Args:
            extensions: Suffixes to keep (``.txt`` or ``txt``); None keeps all
            ignore_patterns: fnmatch patterns matched against entry names
        """
        self.extensions = (
            {self._normalise_extension(ext) for ext in extensions}
            if extensions
            else None
        )
        self.ignore_patterns = (
            set(ignore_patterns)
            if ignore_patterns is not None
            else set(self.DEFAULT_IGNORE_PATTERNS)
        )
        self._compiled_patterns: list[Pattern] = [
            re.compile(fnmatch.translate(pattern)) for pattern in self.ignore_patterns
        ]

    def list_files(
        self, directory: PathLike, recursive: bool = True, max_depth: Optional[int] = None
    ) -> list[Path]:
        """
        Return the sorted regular files under ``directory``.

        Raises:
            NotFoundError: ``directory`` is missing or not a directory.
        """
        root = Path(directory)
        if not root.is_dir():
            raise NotFoundError(f"Directory does not exist: {root}", file_path=root)

        depth_limit = (max_depth if max_depth is not None else 50) if recursive else 0
        files = sorted(
            path for path in self._walk(root, 0, depth_limit) if self._matches(path)
        )
        self.log_debug("Directory scan completed", directory=str(root), files=len(files))
        return files

    def _walk(self, current_dir: Path, depth: int, max_depth: int) -> Iterator[Path]:
        try:
            entries = list(current_dir.iterdir())
        except OSError as e:
            self.log_warning(f"Cannot access directory {current_dir}: {e}")
            return

        for item in entries:
            if self._should_ignore(item):
                continue
            if item.is_file():
                yield item
            elif item.is_dir() and depth < max_depth:
                yield from self._walk(item, depth + 1, max_depth)

    def _should_ignore(self, path: Path) -> bool:
        return any(pattern.match(path.name) for pattern in self._compiled_patterns)

    def _matches(self, path: Path) -> bool:
        if self.extensions is None:
            return True
        return path.suffix.lower() in self.extensions

    @staticmethod
    def _normalise_extension(extension: str) -> str:
        extension = extension.lower()
        return extension if extension.startswith(".") else "." + extension


def list_files(
    directory: PathLike,
    recursive: bool = True,
    extensions: Optional[set[str]] = None,
) -> list[Path]:
    """List regular files under ``directory`` using default ignore patterns."""
    return FileScanner(extensions=extensions).list_files(directory, recursive)
