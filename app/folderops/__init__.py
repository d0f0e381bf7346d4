"""folderops - clone and clear directory trees."""

from folderops.folders import (
    CloneReport,
    EntryFailure,
    ErrorPolicy,
    FolderOption,
    InvalidDirectoryError,
    clear_contents,
    clone_contents,
    ensure_is_directory,
    relative_to_source_name,
    relative_to_source_root,
    walk,
)

__version__ = "0.1.0"

__all__ = [
    "CloneReport",
    "EntryFailure",
    "ErrorPolicy",
    "FolderOption",
    "InvalidDirectoryError",
    "__version__",
    "clear_contents",
    "clone_contents",
    "ensure_is_directory",
    "relative_to_source_name",
    "relative_to_source_root",
    "walk",
]
