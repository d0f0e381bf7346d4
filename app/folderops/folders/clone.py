"""Clone the contents of one directory into another.

Every entry reachable under the source is copied to
``destination / relativize(entry, source)``. Copies never overwrite:
an existing entry at a file's target fails the entry, while an existing
directory is reused for a directory. A file mapped onto a ``..`` target
is placed inside that directory under its own name.

Without USE_RECURSION the whole tree is walked once, following
symlinks, and the first failure aborts the clone. With USE_RECURSION
symlinks are not followed, directory failures still abort, and file
failures are logged and skipped.
"""

import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from folderops.folders.models import (
    CloneReport,
    EntryFailure,
    EntryKind,
    ErrorPolicy,
    FolderOption,
    normalize_options,
)
from folderops.folders.preconditions import ensure_is_directory
from folderops.folders.relativize import Relativizer, relative_to_source_name
from folderops.folders.walker import walk

logger = logging.getLogger(__name__)


def clone_contents(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    options: Iterable[FolderOption] = (),
    *,
    relativize: Relativizer = relative_to_source_name,
    on_error: ErrorPolicy | None = None,
) -> CloneReport:
    """Copy every entry under ``source`` into ``destination``.

    Args:
        source: Existing directory to copy from. Never modified.
        destination: Existing directory to copy into.
        options: Folder options; USE_RECURSION selects the recursive walk.
        relativize: Policy mapping a source entry to a path relative to
            the destination.
        on_error: Failure handling applied to every entry. If None, the
            mode default is used: ABORT without recursion; with recursion
            ABORT for directories and CONTINUE for files.

    Returns:
        CloneReport listing created paths and collected failures.

    Raises:
        InvalidDirectoryError: If either argument is not a directory.
        ValueError: If ``relativize`` cannot map an entry, e.g. absolute
            paths under the default policy. Raised before the first copy.
        OSError: If a copy fails under the ABORT policy.
    """
    source_path = ensure_is_directory(source)
    destination_path = ensure_is_directory(destination)
    frozen = normalize_options(options)

    report = CloneReport()
    if FolderOption.USE_RECURSION in frozen:
        _clone_recursive(source_path, destination_path, relativize, on_error, report)
    else:
        policy = on_error or ErrorPolicy.ABORT
        _clone_flat(source_path, destination_path, relativize, policy, report)

    logger.debug(
        "Cloned %s into %s: %d copied, %d failed",
        source_path,
        destination_path,
        len(report.copied),
        len(report.failures),
    )
    return report


def _clone_flat(
    source: Path,
    destination: Path,
    relativize: Relativizer,
    policy: ErrorPolicy,
    report: CloneReport,
) -> None:
    """Single preorder walk following symlinks, directories and files alike."""
    for entry in walk(source, follow_symlinks=True):
        if entry.kind == EntryKind.DIRECTORY_POST:
            continue
        if entry.kind == EntryKind.FAILED:
            # entry.error is always set on FAILED entries
            _handle_failure(entry.path, entry.error, policy, report)  # type: ignore[arg-type]
            continue
        _copy_with_policy(entry.path, destination / relativize(entry.path, source), policy, report)


def _clone_recursive(
    source: Path,
    destination: Path,
    relativize: Relativizer,
    on_error: ErrorPolicy | None,
    report: CloneReport,
) -> None:
    """Walk without following symlinks, with separate directory and file steps."""
    directory_policy = on_error or ErrorPolicy.ABORT
    file_policy = on_error or ErrorPolicy.CONTINUE

    for entry in walk(source, follow_symlinks=False):
        if entry.kind == EntryKind.DIRECTORY:
            target = destination / relativize(entry.path, source)
            _copy_with_policy(entry.path, target, directory_policy, report)
        elif entry.kind == EntryKind.FILE:
            target = destination / relativize(entry.path, source)
            _copy_with_policy(entry.path, target, file_policy, report)
        elif entry.kind == EntryKind.FAILED:
            logger.debug("Skipping unreadable entry %s: %s", entry.path, entry.error)
            if on_error is not None:
                _handle_failure(entry.path, entry.error, on_error, report)  # type: ignore[arg-type]


def _copy_with_policy(
    source: Path,
    target: Path,
    policy: ErrorPolicy,
    report: CloneReport,
) -> None:
    """Copy one entry, routing an OSError through the error policy."""
    try:
        report.copied.append(copy_entry(source, target))
    except OSError as e:
        _handle_failure(source, e, policy, report)


def _handle_failure(
    path: Path,
    error: OSError,
    policy: ErrorPolicy,
    report: CloneReport,
) -> None:
    """Apply the error policy to a failed entry."""
    if policy == ErrorPolicy.ABORT:
        raise error
    if policy == ErrorPolicy.COLLECT:
        report.failures.append(EntryFailure(path=path, error=str(error)))
    logger.warning("Could not copy %s: %s", path, error)


def copy_entry(source: Path, target: Path) -> Path:
    """Copy a single entry without overwriting anything.

    Directories are created empty (their contents are separate entries);
    an existing directory at the target is reused. Files are copied by
    content, following symlinks. A file target ending in ``..`` names a
    directory rather than an entry, so the file goes inside it under its
    own name; any other existing target fails the copy, directories
    included.

    Args:
        source: Path to copy.
        target: Resolved destination path.

    Returns:
        The path that now holds the copy.

    Raises:
        FileExistsError: If a non-directory already occupies the target
            of a directory, or anything occupies the final file path.
        OSError: If reading the source or writing the target fails.
    """
    if source.is_dir():
        if target.is_dir():
            logger.debug("Directory already present: %s", target)
            return target
        if target.exists() or target.is_symlink():
            msg = f"Cannot create directory, path exists: {target}"
            raise FileExistsError(msg)
        target.mkdir()
        logger.debug("Created directory %s", target)
        return target

    final = target / source.name if target.name == ".." else target
    # exclusive create: fails if anything exists at the final path
    with open(source, "rb") as src, open(final, "xb") as dst:
        shutil.copyfileobj(src, dst)
    logger.debug("Copied %s -> %s", source, final)
    return final
