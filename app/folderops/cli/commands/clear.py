"""Clear command implementation.

Deletes the contents of a directory tree and lists what could not
be removed.
"""

from pathlib import Path
from typing import Annotated

import typer

from folderops.cli.display import create_undeletable_table
from folderops.core.config import ConfigError, load_config_or_default
from folderops.folders.clear import clear_contents
from folderops.folders.models import FolderOption
from folderops.folders.preconditions import InvalidDirectoryError
from folderops.utils.formatting import console, print_error, print_info, print_success


def clear(
    target: Annotated[Path, typer.Argument(help="Directory to clear.")],
    recursive: Annotated[
        bool,
        typer.Option(
            "--recursive",
            "-r",
            help="Descend into subdirectories and delete bottom-up.",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Clear TARGET, removing the directory itself once it is empty.

    Without --recursive only an empty TARGET can be removed. With
    --recursive files are deleted first and directories bottom-up.

    Examples:
        folderops clear ./build -r
        folderops clear ./build -r --yes
    """
    try:
        settings = load_config_or_default().clear
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=2) from e

    use_recursion = recursive or settings.recursive

    if settings.confirm and not yes:
        mode = "recursively" if use_recursion else "without recursion"
        confirmed = typer.confirm(f"Clear {target} {mode}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    options = [FolderOption.USE_RECURSION] if use_recursion else []
    try:
        undeletable = clear_contents(target, options)
    except InvalidDirectoryError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e

    if undeletable:
        console.print(create_undeletable_table(undeletable))
        print_error(f"{len(undeletable)} entries could not be deleted.")
        raise typer.Exit(code=1)

    print_success(f"Cleared {target}.")
