"""
Opaque object persistence using pickle.

Only load files this process (or another trusted one) wrote: unpickling
untrusted data can execute arbitrary code.
"""

import pickle
from pathlib import Path
from typing import Any

from ..utils.exceptions import IOFailureError, NotFoundError, PathLike
from ..utils.logging import get_logger
from .files import is_file_existed

logger = get_logger(__name__)


def save_object_to(obj: Any, path: PathLike) -> bool:
    """Pickle ``obj`` into ``path``. Returns True on success."""
    output_path = Path(path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("wb") as f:
            pickle.dump(obj, f)
    except (OSError, pickle.PicklingError, TypeError, AttributeError) as e:
        logger.error(f"Failed to save {type(obj).__name__} to {output_path}: {e}")
        raise IOFailureError(
            f"Failed to save object to {output_path}: {e}",
            file_path=output_path,
            operation="serialize",
        ) from e
    return True


def read_object_from(path: PathLike) -> Any:
    """Load an object previously written by ``save_object_to``."""
    input_path = Path(path)
    if not is_file_existed(input_path):
        logger.error(f"Object file not found: {input_path}")
        raise NotFoundError(f"File not found: {input_path}", file_path=input_path)
    try:
        with input_path.open("rb") as f:
            return pickle.load(f)
    except (OSError, pickle.UnpicklingError, EOFError) as e:
        logger.error(f"Failed to read object from {input_path}: {e}")
        raise IOFailureError(
            f"Failed to read object from {input_path}: {e}",
            file_path=input_path,
            operation="deserialize",
        ) from e
