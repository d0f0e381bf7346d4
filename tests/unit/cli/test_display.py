"""Unit tests for result display tables."""

from pathlib import Path

from folderops.cli.display import create_clone_table, create_undeletable_table
from folderops.folders.models import CloneReport, EntryFailure


class TestCreateCloneTable:
    """Tests for create_clone_table."""

    def test_rows_for_copied_and_failed(self) -> None:
        """One row per copied path plus one per failure."""
        report = CloneReport(
            copied=[Path("dst/a.txt"), Path("dst/sub")],
            failures=[EntryFailure(path=Path("src/b.txt"), error="File exists")],
        )

        table = create_clone_table(report)

        assert table.title == "Clone Results"
        assert table.row_count == 3

    def test_empty_report(self) -> None:
        assert create_clone_table(CloneReport()).row_count == 0


class TestCreateUndeletableTable:
    """Tests for create_undeletable_table."""

    def test_one_row_per_path(self, tmp_path: Path) -> None:
        """Directories and files are both listed."""
        (tmp_path / "f.txt").write_text("x")

        table = create_undeletable_table([tmp_path, tmp_path / "f.txt"])

        assert table.title == "Undeletable Entries"
        assert table.row_count == 2
