"""Directory tree traversal.

Walks a tree depth-first and yields a TreeEntry for every event:
DIRECTORY before a directory's children, FILE for each non-directory,
DIRECTORY_POST after a directory's children, and FAILED for entries
that could not be listed. Children are visited in name order.

A directory that cannot be listed is reported only as FAILED; no
DIRECTORY or DIRECTORY_POST event is produced for it. When a ``descend``
predicate rejects a directory, its subtree is skipped and no
DIRECTORY_POST event follows.
"""

import errno
import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

from folderops.folders.models import EntryKind, TreeEntry

logger = logging.getLogger(__name__)

DescendPredicate = Callable[[Path], bool]


def walk(
    root: str | os.PathLike[str],
    *,
    follow_symlinks: bool = True,
    descend: DescendPredicate | None = None,
) -> Iterator[TreeEntry]:
    """Walk the tree under ``root``, yielding one TreeEntry per event.

    The root itself is the first entry. The predicate is evaluated after
    the DIRECTORY event has been consumed, so a consumer may act on the
    directory before deciding whether the walk enters it.

    Args:
        root: Path to start from.
        follow_symlinks: If True, symlinks to directories are walked into
            and a directory that is its own ancestor is reported as FAILED.
            If False, every symlink is reported as FILE.
        descend: Optional predicate; returning False skips the subtree.

    Yields:
        TreeEntry events in traversal order.
    """
    root_path = Path(root)
    try:
        is_dir = root_path.is_dir() if follow_symlinks else _is_real_dir(root_path)
    except OSError as e:
        yield TreeEntry(root_path, EntryKind.FAILED, e)
        return

    if not is_dir:
        yield TreeEntry(root_path, EntryKind.FILE)
        return

    yield from _walk_tree(root_path, follow_symlinks, descend)


def _walk_tree(
    root: Path,
    follow_symlinks: bool,
    descend: DescendPredicate | None,
) -> Iterator[TreeEntry]:
    """Yield the events for ``root`` and its subtree.

    Open directories are kept on an explicit stack of
    ``(path, remaining children, (st_dev, st_ino))`` frames, so the depth
    of the tree is not bounded by the interpreter's recursion limit.
    """
    stack: list[tuple[Path, Iterator[tuple[str, bool]], tuple[int, int]]] = []
    ancestors: set[tuple[int, int]] = set()
    pending: Path | None = root

    while pending is not None or stack:
        if pending is not None:
            path, pending = pending, None
            try:
                key, children = _list_directory(path, ancestors, follow_symlinks)
            except OSError as e:
                logger.debug("Cannot list directory %s: %s", path, e)
                yield TreeEntry(path, EntryKind.FAILED, e)
                continue

            yield TreeEntry(path, EntryKind.DIRECTORY)

            if descend is not None and not descend(path):
                continue
            stack.append((path, iter(children), key))
            ancestors.add(key)
            continue

        path, remaining, key = stack[-1]
        for name, is_dir in remaining:
            child = path / name
            if is_dir:
                pending = child
                break
            yield TreeEntry(child, EntryKind.FILE)
        else:
            stack.pop()
            ancestors.discard(key)
            yield TreeEntry(path, EntryKind.DIRECTORY_POST)


def _list_directory(
    path: Path,
    ancestors: set[tuple[int, int]],
    follow_symlinks: bool,
) -> tuple[tuple[int, int], list[tuple[str, bool]]]:
    """Identify and list one directory, sorted by name.

    Raises:
        OSError: If the directory cannot be read, or with ELOOP if it is
            already open further up the current branch.
    """
    st = path.stat() if follow_symlinks else path.lstat()
    key = (st.st_dev, st.st_ino)
    if key in ancestors:
        raise OSError(errno.ELOOP, "Filesystem loop detected", str(path))
    with os.scandir(path) as it:
        children = sorted((entry.name, _is_dir_entry(entry, follow_symlinks)) for entry in it)
    return key, children


def _is_dir_entry(entry: os.DirEntry[str], follow_symlinks: bool) -> bool:
    """Classify a scandir entry, treating unreadable entries as files."""
    try:
        return entry.is_dir(follow_symlinks=follow_symlinks)
    except OSError:
        return False


def _is_real_dir(path: Path) -> bool:
    """Check if a path is a directory without following a final symlink."""
    return path.is_dir() and not path.is_symlink()
