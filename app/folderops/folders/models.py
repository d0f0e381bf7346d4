"""Folder operation domain models.

This module defines the option flags accepted by the clone and clear
operations, the entries produced while walking a directory tree, and
the structured results returned to callers.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FolderOption(str, Enum):
    """Behavior toggles for folder operations.

    Attributes:
        USE_RECURSION: Walk the tree with separate directory and file
            steps instead of the flat default behavior.
    """

    USE_RECURSION = "use_recursion"


class ErrorPolicy(str, Enum):
    """How a clone reacts when copying a single entry fails.

    Attributes:
        ABORT: Re-raise the first failure and stop the walk.
        CONTINUE: Log the failure and move on to the next entry.
        COLLECT: Record the failure in the returned report and move on.
    """

    ABORT = "abort"
    CONTINUE = "continue"
    COLLECT = "collect"


class EntryKind(str, Enum):
    """Kind of event produced by the tree walker.

    Attributes:
        DIRECTORY: A directory, reported before its children.
        FILE: A regular file, symlink, or anything that is not a directory.
        DIRECTORY_POST: A directory, reported after all of its children.
        FAILED: An entry that could not be opened or read.
    """

    DIRECTORY = "directory"
    FILE = "file"
    DIRECTORY_POST = "directory_post"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """A single path visited during a directory walk.

    Attributes:
        path: Path of the entry, built from the walk root.
        kind: What the walker saw at this path.
        error: The OSError that made the entry unreadable (FAILED only).
    """

    path: Path
    kind: EntryKind
    error: OSError | None = None

    @property
    def is_directory(self) -> bool:
        """Check if the entry is a directory event (pre or post)."""
        return self.kind in (EntryKind.DIRECTORY, EntryKind.DIRECTORY_POST)


@dataclass(frozen=True, slots=True)
class EntryFailure:
    """A source entry that could not be copied.

    Attributes:
        path: Source path whose copy failed.
        error: Error message of the failure.
    """

    path: Path
    error: str


@dataclass(slots=True)
class CloneReport:
    """Outcome of a clone operation.

    Attributes:
        copied: Destination paths created, in traversal order.
        failures: Entries that failed while the error policy was COLLECT.
    """

    copied: list[Path] = field(default_factory=list)
    failures: list[EntryFailure] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if every visited entry was copied."""
        return not self.failures


def normalize_options(options: Iterable[FolderOption]) -> frozenset[FolderOption]:
    """Freeze caller-supplied options into an immutable set.

    Args:
        options: Any iterable of FolderOption values (duplicates allowed).

    Returns:
        Frozen set of the given options.

    Raises:
        TypeError: If an element is not a FolderOption.
    """
    frozen = frozenset(options)
    for option in frozen:
        if not isinstance(option, FolderOption):
            msg = f"Expected FolderOption, got {option!r}"
            raise TypeError(msg)
    return frozen
