"""Shared Rich display functions for folder operation results."""

from pathlib import Path

from rich.table import Table

from folderops.folders.models import CloneReport


def create_clone_table(report: CloneReport) -> Table:
    """Create a Rich table of a clone's copied entries and failures.

    Copied entries are listed first with "OK" status, followed by
    collected failures with "FAIL" status and their error message.

    Args:
        report: Clone report to display.

    Returns:
        Rich Table configured for clone result display.
    """
    table = Table(
        title="Clone Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Path", no_wrap=True)
    table.add_column("Message")

    for path in report.copied:
        table.add_row("[success]OK[/success]", f"[added]{path}[/added]", "")

    for failure in report.failures:
        table.add_row(
            "[error]FAIL[/error]",
            str(failure.path),
            f"[muted]{failure.error}[/muted]",
        )

    return table


def create_undeletable_table(paths: list[Path]) -> Table:
    """Create a Rich table listing entries a clear could not delete.

    Args:
        paths: Undeletable paths in traversal order.

    Returns:
        Rich Table configured for undeletable entry display.
    """
    table = Table(
        title="Undeletable Entries",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Type", width=10)
    table.add_column("Path", no_wrap=True)

    for path in paths:
        kind = "directory" if path.is_dir() else "file"
        table.add_row(kind, f"[removed]{path}[/removed]")

    return table
