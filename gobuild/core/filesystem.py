"""
File system helpers for gobuild.
"""

import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


def resolve_project_root(path: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve project root directory.

    Args:
        path: Optional path (defaults to current directory)

    Returns:
        Resolved absolute path
    """
    if path is None:
        path = Path.cwd()
    return Path(path).resolve()


def ensure_directory(path: Union[str, Path], description: str = "directory") -> Path:
    """
    Ensure a directory exists (idempotent).

    Missing parents are created; an existing directory is not an error.

    Args:
        path: Directory path
        description: Description for error messages

    Returns:
        Path object

    Raises:
        OSError: If directory cannot be created

    Example:
        >>> ensure_directory('output/linux-amd64', 'output folder')
        PosixPath('output/linux-amd64')
    """
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Ensured {description} exists: {path}")
    except OSError as e:
        raise OSError(f"Could not create {description} at {path}: {e}") from e
    return path
