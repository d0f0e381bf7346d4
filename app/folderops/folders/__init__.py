"""Directory clone and clear operations.

This module provides the tree walker, relativization policies, and the
two folder operations built on them: cloning one directory's contents
into another and clearing a directory tree.
"""

from folderops.folders.clear import clear_contents
from folderops.folders.clone import clone_contents, copy_entry
from folderops.folders.models import (
    CloneReport,
    EntryFailure,
    EntryKind,
    ErrorPolicy,
    FolderOption,
    TreeEntry,
)
from folderops.folders.preconditions import (
    FolderOpsError,
    InvalidDirectoryError,
    ensure_is_directory,
)
from folderops.folders.relativize import (
    RELATIVIZERS,
    Relativizer,
    relative_to_source_name,
    relative_to_source_root,
)
from folderops.folders.walker import walk

__all__ = [
    "RELATIVIZERS",
    "CloneReport",
    "EntryFailure",
    "EntryKind",
    "ErrorPolicy",
    "FolderOpsError",
    "FolderOption",
    "InvalidDirectoryError",
    "Relativizer",
    "TreeEntry",
    "clear_contents",
    "clone_contents",
    "copy_entry",
    "ensure_is_directory",
    "relative_to_source_name",
    "relative_to_source_root",
    "walk",
]
