"""
File existence checks, deletion and path-string helpers.
"""

from pathlib import Path

from ..utils.exceptions import IOFailureError, PathLike
from ..utils.logging import get_logger

logger = get_logger(__name__)


def is_file_existed(path: PathLike) -> bool:
    """Return True if ``path`` is an existing regular file."""
    return Path(path).is_file()


def delete_file(path: PathLike) -> bool:
    """
    Delete the regular file at ``path``.

    Returns:
        True if a file was removed, False if there was nothing to remove.

    Raises:
        IOFailureError: the file exists but could not be removed.
    """
    file_path = Path(path)
    if not is_file_existed(file_path):
        return False
    try:
        file_path.unlink()
    except OSError as e:
        logger.error(f"Failed to delete {file_path}: {e}")
        raise IOFailureError(
            f"OS error deleting {file_path}: {e}",
            file_path=file_path,
            operation="delete",
        ) from e
    return True


def basename(path: PathLike) -> str:
    """Final component of ``path``."""
    return Path(path).name


def suffix(path: PathLike) -> str:
    """Extension of the final component, including the dot, or ''."""
    return Path(path).suffix


def dirname(path: PathLike) -> str:
    """Parent directory of ``path``."""
    return str(Path(path).parent)
