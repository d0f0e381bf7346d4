"""Clone command implementation.

Copies the contents of a source directory into an existing
destination directory.
"""

from pathlib import Path
from typing import Annotated

import typer

from folderops.cli.display import create_clone_table
from folderops.core.config import ConfigError, load_config_or_default
from folderops.folders.clone import clone_contents
from folderops.folders.models import ErrorPolicy, FolderOption
from folderops.folders.preconditions import InvalidDirectoryError
from folderops.folders.relativize import RELATIVIZERS
from folderops.utils.formatting import console, print_error, print_success, print_warning


def clone(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="Directory to copy from.")],
    destination: Annotated[Path, typer.Argument(help="Existing directory to copy into.")],
    recursive: Annotated[
        bool,
        typer.Option(
            "--recursive",
            "-r",
            help="Walk directories and files separately; skip files that fail.",
        ),
    ] = False,
    relativize: Annotated[
        str | None,
        typer.Option(
            "--relativize",
            help="Path mapping: 'source' mirrors the tree, 'name' uses the legacy mapping.",
        ),
    ] = None,
    collect_errors: Annotated[
        bool,
        typer.Option(
            "--collect-errors",
            help="Keep going after failures and list them at the end.",
        ),
    ] = False,
) -> None:
    """Clone the contents of SOURCE into DESTINATION.

    Existing files in the destination are never overwritten; existing
    directories are reused. Defaults come from ~/.config/folderops/config.toml;
    flags switch options on and --relativize replaces the configured policy.

    Examples:
        folderops clone ./site ./backup
        folderops clone ./site ./backup -r --collect-errors
    """
    try:
        settings = load_config_or_default().clone
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=2) from e

    use_recursion = recursive or settings.recursive
    policy_name = relativize or settings.relativize
    collect = collect_errors or settings.collect_errors

    relativizer = RELATIVIZERS.get(policy_name)
    if relativizer is None:
        choices = ", ".join(sorted(RELATIVIZERS))
        print_error(f"Unknown relativize policy '{policy_name}' (choose from {choices})")
        raise typer.Exit(code=2)

    options = [FolderOption.USE_RECURSION] if use_recursion else []
    try:
        report = clone_contents(
            source,
            destination,
            options,
            relativize=relativizer,
            on_error=ErrorPolicy.COLLECT if collect else None,
        )
    except InvalidDirectoryError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e
    except (ValueError, OSError) as e:
        print_error(f"Clone failed: {e}")
        raise typer.Exit(code=2) from e

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    if not quiet and (report.copied or report.failures):
        console.print(create_clone_table(report))

    if report.failures:
        print_warning(f"{len(report.failures)} entries could not be copied.")
        raise typer.Exit(code=1)

    print_success(f"Cloned {source} into {destination} ({len(report.copied)} entries).")
