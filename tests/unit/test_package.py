"""Unit tests for the top-level package surface."""

import folderops
import folderops.folders


def test_library_surface_reexported() -> None:
    """The folder API is importable from the package root."""
    for name in (
        "CloneReport",
        "EntryFailure",
        "ErrorPolicy",
        "FolderOption",
        "InvalidDirectoryError",
        "clear_contents",
        "clone_contents",
        "ensure_is_directory",
        "relative_to_source_name",
        "relative_to_source_root",
        "walk",
    ):
        assert name in folderops.__all__
        assert getattr(folderops, name) is getattr(folderops.folders, name)
