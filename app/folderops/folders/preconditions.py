"""Argument checks shared by folder operations."""

import os
from pathlib import Path


class FolderOpsError(Exception):
    """Base exception for folder operation errors."""


class InvalidDirectoryError(FolderOpsError, ValueError):
    """Raised when a path argument does not designate an existing directory.

    Attributes:
        path: Absolute form of the offending path.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Path '{path}' is not a directory")


def ensure_is_directory(path: str | os.PathLike[str]) -> Path:
    """Verify that a path currently designates an existing directory.

    Symbolic links to directories are accepted. The check does not lock
    the path; it may change between the check and later use.

    Args:
        path: Path to check.

    Returns:
        The path as a Path object, unchanged.

    Raises:
        InvalidDirectoryError: If the path is missing or not a directory.
    """
    directory = Path(path)
    if not directory.is_dir():
        raise InvalidDirectoryError(directory.absolute())
    return directory
