"""Clear the contents of a directory tree.

Deletion failures never abort the walk; every path that could not be
removed is returned to the caller in traversal order.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from folderops.folders.models import EntryKind, FolderOption, normalize_options
from folderops.folders.preconditions import ensure_is_directory
from folderops.folders.walker import walk

logger = logging.getLogger(__name__)


def clear_contents(
    target: str | os.PathLike[str],
    options: Iterable[FolderOption] = (),
) -> list[Path]:
    """Delete the entries under ``target`` and report what remains.

    The walk follows symbolic links.

    Without USE_RECURSION each directory reached (the target itself) is
    removed as a leaf and its subtree is skipped, so a non-empty target
    is left untouched and reported.

    With USE_RECURSION a directory that has no entries is skipped and
    left in place. Other directories are entered, their files deleted,
    and the directory removed once all of its children were processed.

    Args:
        target: Existing directory to clear.
        options: Folder options; USE_RECURSION enables descending.

    Returns:
        Paths that could not be deleted, in traversal order. Empty when
        everything was removed.

    Raises:
        InvalidDirectoryError: If the target is not a directory.
    """
    target_path = ensure_is_directory(target)
    recursive = FolderOption.USE_RECURSION in normalize_options(options)

    undeletable: list[Path] = []
    descend = _has_entries if recursive else _never

    for entry in walk(target_path, follow_symlinks=True, descend=descend):
        if entry.kind == EntryKind.DIRECTORY:
            if not recursive and not _remove_directory(entry.path):
                undeletable.append(entry.path)
        elif entry.kind == EntryKind.FILE:
            if not _remove_file(entry.path):
                undeletable.append(entry.path)
        elif entry.kind == EntryKind.DIRECTORY_POST:
            if not _remove_directory(entry.path):
                undeletable.append(entry.path)
        else:
            logger.warning("Skipping unreadable entry %s: %s", entry.path, entry.error)

    if undeletable:
        logger.info("Cleared %s with %d undeletable entries", target_path, len(undeletable))
    else:
        logger.debug("Cleared %s", target_path)
    return undeletable


def _has_entries(directory: Path) -> bool:
    """Check if a directory currently contains anything."""
    try:
        with os.scandir(directory) as it:
            return next(it, None) is not None
    except OSError:
        return False


def _never(directory: Path) -> bool:
    return False


def _remove_file(path: Path) -> bool:
    """Delete a file or symlink, returning False on failure."""
    try:
        path.unlink()
    except OSError as e:
        logger.debug("Cannot delete %s: %s", path, e)
        return False
    logger.debug("Deleted %s", path)
    return True


def _remove_directory(path: Path) -> bool:
    """Remove an empty directory, or the link when reached through a symlink.

    Returns:
        True if the directory (or link) was removed, False otherwise.
    """
    try:
        if path.is_symlink():
            path.unlink()
        else:
            path.rmdir()
    except OSError as e:
        logger.debug("Cannot remove directory %s: %s", path, e)
        return False
    logger.debug("Removed directory %s", path)
    return True
